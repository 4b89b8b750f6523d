"""Render-time helpers for log lines: severity, timestamps and highlighting."""

from __future__ import annotations

import re
from typing import Final

from rich.text import Text

from kubeoptic.constants.enums import LogSeverity

# kubectl --timestamps prefixes each line with an RFC3339 timestamp and a space.
_TIMESTAMP_RE: Final = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:\d{2}) "
)

# Checked in order; the first keyword found wins.
_SEVERITY_KEYWORDS: Final[tuple[tuple[str, LogSeverity], ...]] = (
    ("error", LogSeverity.ERROR),
    ("warn", LogSeverity.WARNING),
    ("info", LogSeverity.INFO),
    ("debug", LogSeverity.DEBUG),
)

SEVERITY_STYLES: Final[dict[LogSeverity, str]] = {
    LogSeverity.ERROR: "bold red",
    LogSeverity.WARNING: "yellow",
    LogSeverity.INFO: "cyan",
    LogSeverity.DEBUG: "dim",
    LogSeverity.PLAIN: "",
}

SEARCH_MATCH_STYLE: Final = "black on yellow"


def classify_severity(text: str) -> LogSeverity:
    lowered = text.lower()
    for keyword, severity in _SEVERITY_KEYWORDS:
        if keyword in lowered:
            return severity
    return LogSeverity.PLAIN


def strip_timestamp(text: str) -> str:
    """Drop a leading RFC3339 timestamp, if present."""
    return _TIMESTAMP_RE.sub("", text, count=1)


def render_line(text: str, *, query: str = "", show_timestamps: bool = False) -> Text:
    """Build the styled renderable for one raw log line."""
    shown = text if show_timestamps else strip_timestamp(text)
    rendered = Text(shown, style=SEVERITY_STYLES[classify_severity(shown)], end="")
    if query:
        rendered.highlight_words([query], SEARCH_MATCH_STYLE, case_sensitive=False)
    return rendered
