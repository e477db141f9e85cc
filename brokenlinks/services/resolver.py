"""Resolves every outbound link of every indexed page against the page index."""

import logging
from typing import Dict, List, Mapping, Optional
from urllib.parse import unquote, urljoin, urlsplit

from brokenlinks.models.page import Page
from brokenlinks.models.result import LinkCheckResult
from brokenlinks.services.normalizer import is_internal, normalize_pathname

logger = logging.getLogger(__name__)


def check_link(
    page: Page,
    link: str,
    pages: Mapping[str, Page],
    base_url: str,
) -> Optional[LinkCheckResult]:
    """Check a single raw *link* found on *page*.

    Returns a :class:`LinkCheckResult` when the link is broken, or *None* when
    it is intact or points outside *base_url*.  Links that cannot be parsed as
    URLs are logged and skipped.
    """
    try:
        # Surrounding whitespace is not part of the URL, as in a browser
        url = urljoin(page.href, link.strip())
        internal = is_internal(url, base_url)
        parts = urlsplit(url)
    except ValueError as exc:
        logger.warning("Skipping malformed link %r on %s: %s", link, page.pathname, exc)
        return None

    if not internal:
        logger.debug("Skipping external link %s on %s", url, page.pathname)
        return None

    linked_page = pages.get(normalize_pathname(parts.path))
    if linked_page is None:
        return LinkCheckResult(source_page=page, resolved_href=url, is_missing_page=True)

    if parts.fragment and f"#{unquote(parts.fragment)}" not in linked_page.anchor_targets:
        return LinkCheckResult(source_page=page, resolved_href=url, is_missing_fragment=True)

    return None


def find_broken_links(pages: Dict[str, Page], base_url: str) -> List[LinkCheckResult]:
    """Return all broken links, page by page in index order, links in discovery order."""
    broken: List[LinkCheckResult] = []
    for page in pages.values():
        for link in page.link_targets:
            result = check_link(page, link, pages, base_url)
            if result is not None:
                broken.append(result)
    logger.info("Checked links on %d pages, %d broken", len(pages), len(broken))
    return broken
