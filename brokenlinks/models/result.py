from pydantic import BaseModel, model_validator

from brokenlinks.models.page import Page


class LinkCheckResult(BaseModel):
    """A single broken link found on ``source_page``."""

    source_page: Page
    resolved_href: str
    is_missing_page: bool = False
    is_missing_fragment: bool = False

    @model_validator(mode="after")
    def _exactly_one_reason(self) -> "LinkCheckResult":
        if self.is_missing_page == self.is_missing_fragment:
            raise ValueError(
                "a broken link is either a missing page or a missing fragment, not both or neither"
            )
        return self
