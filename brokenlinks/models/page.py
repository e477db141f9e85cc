from pathlib import Path
from typing import FrozenSet, List, Optional

from pydantic import BaseModel


class Page(BaseModel):
    """One rendered page of the site, keyed by its pathname."""

    pathname: str  # always ends in "/"
    href: str  # base URL + pathname
    content_location: Path
    attribution_hint: Optional[Path] = None  # diagnostics only, never used for resolution
    link_targets: List[str]  # unique, in discovery order, exactly as authored
    anchor_targets: FrozenSet[str]  # "#"-prefixed ids and legacy anchor names
