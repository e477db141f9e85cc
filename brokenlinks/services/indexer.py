"""Builds the page index: one :class:`Page` per sitemap pathname."""

import logging
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional

from bs4 import BeautifulSoup

from brokenlinks.config import Settings
from brokenlinks.errors import MissingArtifactError
from brokenlinks.models.page import Page
from brokenlinks.services.normalizer import pathname_to_href

logger = logging.getLogger(__name__)

_SOURCE_SUFFIX = ".md"


def _extract_link_targets(soup: BeautifulSoup) -> List[str]:
    seen: set = set()
    links: List[str] = []
    for a in soup.find_all("a", href=True):
        href = str(a["href"])
        if href not in seen:
            seen.add(href)
            links.append(href)
    return links


def _extract_anchor_targets(soup: BeautifulSoup) -> FrozenSet[str]:
    """Return ``#name`` for every legacy ``<a name>`` and ``#id`` for every element id."""
    names = [str(a["name"]) for a in soup.find_all("a", attrs={"name": True})]
    ids = [str(el["id"]) for el in soup.find_all(id=True)]
    return frozenset(f"#{value}" for value in names + ids)


def content_location(pathname: str, settings: Settings) -> Path:
    """Return where the rendered page for *pathname* lives in the build output."""
    return settings.build_output_dir / pathname.strip("/") / settings.content_file_name


def find_source_file(pathname: str, page_source_dir: Path) -> Optional[Path]:
    """Best-effort lookup of the source file a page was generated from.

    Given a pathname of ``/path/to/route/``, looks below *page_source_dir* for
    ``path/to/route.md`` and then ``path/to/route/index.md``.  Returns *None*
    when neither exists.
    """
    route = pathname.strip("/")
    candidates = []
    if route:
        candidates.append(page_source_dir / f"{route}{_SOURCE_SUFFIX}")
    candidates.append(page_source_dir / route / f"index{_SOURCE_SUFFIX}")

    for candidate in candidates:
        try:
            if candidate.is_file():
                return candidate
        except OSError:
            continue
    return None


def index_page(pathname: str, settings: Settings) -> Page:
    """Load the rendered page for *pathname* and index its links and anchors.

    Raises:
        MissingArtifactError: if the build output has no page for *pathname*.
    """
    location = content_location(pathname, settings)
    if not location.is_file():
        raise MissingArtifactError(pathname, location)

    soup = BeautifulSoup(location.read_bytes(), "lxml")

    source_file = find_source_file(pathname, settings.page_source_dir)
    logger.info("Converted pathname=%s to source file=%s", pathname, source_file)

    return Page(
        pathname=pathname,
        href=pathname_to_href(pathname, settings.base_url),
        content_location=location,
        attribution_hint=source_file,
        link_targets=_extract_link_targets(soup),
        anchor_targets=_extract_anchor_targets(soup),
    )


def build_page_index(pathnames: Iterable[str], settings: Settings) -> Dict[str, Page]:
    """Index every pathname, keeping sitemap order.  Duplicate pathnames collapse."""
    pages: Dict[str, Page] = {}
    for pathname in pathnames:
        if pathname not in pages:
            pages[pathname] = index_page(pathname, settings)
    logger.info("Indexed %d pages", len(pages))
    return pages
