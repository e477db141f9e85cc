"""Errors that abort a link check before any report is produced."""


class LinkCheckError(RuntimeError):
    """Base class for fatal, run-aborting errors."""


class SitemapError(LinkCheckError):
    """The sitemap could not be read or parsed."""


class MissingArtifactError(LinkCheckError):
    """A sitemap entry has no rendered page in the build output."""

    def __init__(self, pathname: str, location) -> None:
        self.pathname = pathname
        self.location = location
        super().__init__(
            f"Failed to find HTML file referenced by sitemap: {location} (pathname {pathname})"
        )
