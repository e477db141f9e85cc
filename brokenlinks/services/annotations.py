"""CI annotation sinks that broken links can be forwarded to.

The reporter only talks to the :class:`AnnotationSink` protocol, so the sink
can be swapped for a no-op or a recording double.

``GitHubAnnotationSink``
    Emits GitHub Actions workflow commands (``::error file=…,title=…::message``)
    which the Actions runner turns into inline annotations on the source file.

``NullAnnotationSink``
    Discards everything; used when annotations are disabled.
"""

import sys
from pathlib import Path
from typing import Optional, Protocol, TextIO


class AnnotationSink(Protocol):
    def error(self, message: str, *, title: str, file: Optional[Path] = None) -> None:
        ...


class NullAnnotationSink:
    def error(self, message: str, *, title: str, file: Optional[Path] = None) -> None:
        return None


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_workflow_command(command: str, message: str, **properties: Optional[str]) -> str:
    """Serialise a workflow command, omitting properties whose value is *None*."""
    params = ",".join(
        f"{key}={_escape_property(str(value))}"
        for key, value in properties.items()
        if value is not None
    )
    return f"::{command}{' ' + params if params else ''}::{_escape_data(message)}"


class GitHubAnnotationSink:
    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def error(self, message: str, *, title: str, file: Optional[Path] = None) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        line = format_workflow_command(
            "error",
            message,
            file=str(file) if file is not None else None,
            title=title,
        )
        print(line, file=stream)
