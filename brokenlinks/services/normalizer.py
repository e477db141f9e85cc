"""URL and pathname helpers shared by the sitemap reader, indexer and resolver."""

from typing import Optional
from urllib.parse import quote, urljoin, urlsplit

# Characters left as-is when percent-encoding a URL path; "%" keeps existing escapes intact
_PATH_SAFE = "/%:@!$&'()*+,;=~"

_DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_pathname(pathname: str) -> str:
    """Return *pathname* percent-encoded and with a trailing slash, the form pages are keyed by."""
    pathname = quote(pathname, safe=_PATH_SAFE)
    if not pathname.endswith("/"):
        pathname += "/"
    return pathname


def strip_base_url(url: str, base_url: str) -> Optional[str]:
    """Return the part of *url* after *base_url*, or *None* if *url* is not below it.

    The scheme/host prefix is compared case-insensitively.  The remainder must
    be empty or start with ``/`` so that ``https://example.com.evil/`` is not
    mistaken for a page on ``https://example.com``.
    """
    prefix = url[: len(base_url)]
    if prefix.lower() != base_url.lower():
        return None
    rest = url[len(base_url):]
    if rest and not rest.startswith("/"):
        return None
    return rest


def origin(url: str) -> Optional[str]:
    """Return ``scheme://host[:port]`` of *url* with any default port dropped.

    Returns *None* for URLs without a host (``mailto:``, ``javascript:`` …).

    Raises:
        ValueError: if the port is not a number.
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.hostname:
        return None
    scheme = parts.scheme.lower()
    host = parts.hostname
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        host = f"{host}:{port}"
    return f"{scheme}://{host}"


def is_internal(url: str, base_url: str) -> bool:
    """Return True when the origin and path of *url* start with *base_url*."""
    url_origin = origin(url)
    if url_origin is None:
        return False
    return strip_base_url(url_origin + urlsplit(url).path, base_url) is not None


def pathname_to_href(pathname: str, base_url: str) -> str:
    """Return the absolute URL of the page at *pathname*."""
    return urljoin(base_url + "/", pathname)
