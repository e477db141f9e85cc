"""Console report of broken links, plus forwarding to an annotation sink."""

import logging
import sys
from typing import Optional, Sequence, TextIO

from colorama import Fore, Style

from brokenlinks.models.result import LinkCheckResult
from brokenlinks.models.summary import CheckSummary
from brokenlinks.services.annotations import AnnotationSink, NullAnnotationSink

logger = logging.getLogger(__name__)


def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color or not codes:
        return text
    return "".join(codes) + text + Style.RESET_ALL


def _marker(label: str, label_color: str, color: bool) -> str:
    return (
        _style("[", Fore.LIGHTBLACK_EX, color=color)
        + _style(label, label_color, Style.BRIGHT, color=color)
        + _style("]", Fore.LIGHTBLACK_EX, color=color)
    )


def _plural(count: int) -> str:
    return "link" if count == 1 else "links"


def annotation_title(result: LinkCheckResult) -> str:
    kind = "Broken fragment" if result.is_missing_fragment else "404 link"
    return f"{kind} in {result.source_page.pathname}"


def _annotate(sink: AnnotationSink, result: LinkCheckResult) -> None:
    hint = result.source_page.attribution_hint
    try:
        sink.error(
            result.resolved_href,
            title=annotation_title(result),
            file=hint.resolve() if hint is not None else None,
        )
    except Exception:
        logger.warning("Failed to annotate broken link %s", result.resolved_href, exc_info=True)


def report_results(
    results: Sequence[LinkCheckResult],
    *,
    out: Optional[TextIO] = None,
    sink: Optional[AnnotationSink] = None,
    color: bool = True,
    pages_checked: int = 0,
) -> CheckSummary:
    """Print the broken-link report and return the run summary.

    Results are grouped by their source page in the order given; consecutive
    results from the same page share one header.  Every result is also sent
    to *sink*, whose failures are logged and otherwise ignored.
    """
    if out is None:
        out = sys.stdout
    if sink is None:
        sink = NullAnnotationSink()
    prefix_page = _marker("404", Fore.RED, color)
    prefix_hash = _marker(" # ", Fore.YELLOW, color)

    total = len(results)
    fragment_count = sum(1 for r in results if r.is_missing_fragment)
    summary = CheckSummary(
        pages_checked=pages_checked,
        total_broken=total,
        broken_page_count=total - fragment_count,
        broken_fragment_count=fragment_count,
    )

    if summary.passed:
        print(_style("*** Found no broken links. Great job!", Fore.GREEN, Style.BRIGHT, color=color), file=out)
        print(file=out)
        return summary

    last_pathname = None
    for result in results:
        if result.source_page.pathname != last_pathname:
            print(f"\n{result.source_page.pathname}", file=out)
            last_pathname = result.source_page.pathname
        prefix = prefix_hash if result.is_missing_fragment else prefix_page
        print(f"  {prefix} {result.resolved_href}", file=out)
        _annotate(sink, result)
    print(file=out)

    lines = [
        f"*** Found {total} broken {_plural(total)} in total:",
        f"  {prefix_page} {summary.broken_page_count} broken page {_plural(summary.broken_page_count)}",
        f"  {prefix_hash} {fragment_count} broken fragment {_plural(fragment_count)}",
    ]
    print(_style("\n".join(lines), Fore.WHITE, Style.BRIGHT, color=color), file=out)
    print(file=out)
    return summary
