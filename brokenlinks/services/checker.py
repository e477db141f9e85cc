"""Runs the full link check: sitemap → page index → resolution → report."""

import logging
from typing import Optional, TextIO

from brokenlinks.config import Settings
from brokenlinks.models.summary import CheckSummary
from brokenlinks.services.annotations import (
    AnnotationSink,
    GitHubAnnotationSink,
    NullAnnotationSink,
)
from brokenlinks.services.indexer import build_page_index
from brokenlinks.services.reporter import report_results
from brokenlinks.services.resolver import find_broken_links
from brokenlinks.services.sitemap import read_page_pathnames

logger = logging.getLogger(__name__)


def default_sink(settings: Settings) -> AnnotationSink:
    if settings.annotate_output:
        return GitHubAnnotationSink()
    return NullAnnotationSink()


def run_link_check(
    settings: Settings,
    *,
    out: Optional[TextIO] = None,
    sink: Optional[AnnotationSink] = None,
) -> CheckSummary:
    """Check every page in the sitemap for broken links and print the report.

    Raises:
        SitemapError: if the sitemap cannot be read.
        MissingArtifactError: if a sitemap page has no rendered file.
    """
    logger.info(
        "Checking links",
        extra={"base_url": settings.base_url, "build_output_dir": str(settings.build_output_dir)},
    )
    pathnames = read_page_pathnames(settings.sitemap_path, settings.base_url)
    pages = build_page_index(pathnames, settings)
    broken = find_broken_links(pages, settings.base_url)

    return report_results(
        broken,
        out=out,
        sink=sink if sink is not None else default_sink(settings),
        color=settings.color,
        pages_checked=len(pages),
    )
