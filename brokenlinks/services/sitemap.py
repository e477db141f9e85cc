"""Page discovery from the sitemap contained in the build output."""

import logging
from pathlib import Path
from typing import List, Optional
from xml.etree import ElementTree

from brokenlinks.errors import SitemapError
from brokenlinks.services.normalizer import normalize_pathname, strip_base_url

logger = logging.getLogger(__name__)


def _parse_sitemap(xml_data: bytes) -> List[str]:
    """Extract all ``<loc>`` values from a sitemap or sitemap-index XML."""
    try:
        root = ElementTree.fromstring(xml_data)
    except ElementTree.ParseError as exc:
        raise SitemapError(f"Failed to parse sitemap XML: {exc}") from exc

    ns = root.tag.split("}")[0] + "}" if root.tag.startswith("{") else ""
    urls: List[str] = []
    for elem in root.iter(f"{ns}loc"):
        if elem.text:
            urls.append(elem.text.strip())
    return urls


def _loc_to_pathname(loc: str, base_url: str) -> Optional[str]:
    rest = strip_base_url(loc, base_url)
    if not rest:
        return None
    # Drop any query string or fragment, keeping only the path
    path = rest.split("#", 1)[0].split("?", 1)[0]
    return normalize_pathname(path)


def read_page_pathnames(sitemap_path: Path, base_url: str) -> List[str]:
    """Return the unique page pathnames listed in the sitemap at *sitemap_path*.

    Only ``<loc>`` URLs below *base_url* are kept.  Order of first appearance
    is preserved.

    Raises:
        SitemapError: if the sitemap cannot be read or is not well-formed XML.
    """
    try:
        xml_bytes = sitemap_path.read_bytes()
    except OSError as exc:
        raise SitemapError(f"Failed to read sitemap {sitemap_path}: {exc}") from exc

    seen: set = set()
    pathnames: List[str] = []
    for loc in _parse_sitemap(xml_bytes):
        pathname = _loc_to_pathname(loc, base_url)
        if pathname is None:
            logger.debug("Sitemap: ignoring entry outside %s: %s", base_url, loc)
            continue
        if pathname not in seen:
            seen.add(pathname)
            pathnames.append(pathname)

    logger.info("Found %d unique pages in sitemap %s", len(pathnames), sitemap_path)
    return pathnames
