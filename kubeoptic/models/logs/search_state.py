"""Search state derived from the log buffer.

Matches are always recomputed from ``(buffer, query)`` as a whole; nothing in
this module patches a previous result incrementally.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kubeoptic.constants.limits import MAX_SEARCH_HISTORY, MAX_SEARCH_RESULTS
from kubeoptic.models.logs.log_buffer import LogBuffer, LogLine


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search pass over the buffer."""

    matches: tuple[int, ...] = ()
    display: tuple[LogLine, ...] = ()
    truncated: bool = False


def search_buffer(
    buffer: LogBuffer,
    query: str,
    max_results: int = MAX_SEARCH_RESULTS,
) -> SearchResult:
    """Case-insensitive substring search, oldest to newest.

    An empty query is a pass-through: no matches and the full buffer is
    displayed. Otherwise both the match list and the filtered display list
    stop growing at ``max_results``.
    """
    if not query:
        return SearchResult(display=tuple(buffer))

    needle = query.lower()
    matches: list[int] = []
    display: list[LogLine] = []
    truncated = False
    for line in buffer:
        if needle not in line.text.lower():
            continue
        if len(matches) >= max_results:
            truncated = True
            break
        matches.append(line.index)
        display.append(line)
    return SearchResult(tuple(matches), tuple(display), truncated)


@dataclass
class SearchState:
    """Query, derived matches, match cursor and confirmed-query history."""

    query: str = ""
    matches: list[int] = field(default_factory=list)
    cursor: int = 0
    history: list[str] = field(default_factory=list)
    truncated: bool = False
    max_results: int = MAX_SEARCH_RESULTS
    max_history: int = MAX_SEARCH_HISTORY

    @property
    def active(self) -> bool:
        return bool(self.query)

    @property
    def current_match(self) -> int | None:
        """Ring index of the match under the cursor, if any."""
        if not self.matches:
            return None
        return self.matches[self.cursor]

    def recompute(self, buffer: LogBuffer) -> tuple[LogLine, ...]:
        """Rebuild matches from scratch and return the display list."""
        result = search_buffer(buffer, self.query, self.max_results)
        self.matches = list(result.matches)
        self.truncated = result.truncated
        if self.cursor >= len(self.matches):
            self.cursor = 0
        return result.display

    def step(self, offset: int) -> int | None:
        """Move the cursor circularly by ``offset`` and return the target line."""
        if not self.matches:
            return None
        self.cursor = (self.cursor + offset) % len(self.matches)
        return self.matches[self.cursor]

    def remember(self, query: str) -> bool:
        """Append a confirmed query to history unless empty or already present."""
        if not query or query in self.history:
            return False
        self.history.append(query)
        if len(self.history) > self.max_history:
            del self.history[0]
        return True

    def clear(self) -> None:
        """Drop the query and its matches; history is kept."""
        self.query = ""
        self.matches = []
        self.cursor = 0
        self.truncated = False


__all__ = [
    "SearchResult",
    "SearchState",
    "search_buffer",
]
