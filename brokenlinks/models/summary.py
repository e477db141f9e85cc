from pydantic import BaseModel, computed_field


class CheckSummary(BaseModel):
    """Aggregated outcome of a link check run."""

    pages_checked: int = 0
    total_broken: int
    broken_page_count: int
    broken_fragment_count: int

    @computed_field  # type: ignore[misc]
    @property
    def passed(self) -> bool:
        return self.total_broken == 0
