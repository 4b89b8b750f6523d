"""Bounded FIFO ring of ingested log lines."""

from __future__ import annotations

import re
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from kubeoptic.constants.limits import MAX_LOG_LINES

_LINE_SPLIT_RE = re.compile(r"\r?\n")


@dataclass(frozen=True, slots=True)
class LogLine:
    """A raw log line and its 0-based position within the ring."""

    text: str
    index: int


def split_chunk(data: str) -> list[str]:
    """Split a stream chunk on line boundaries, dropping empty lines."""
    return [line for line in _LINE_SPLIT_RE.split(data) if line]


class LogBuffer:
    """Append-only ring holding at most ``capacity`` lines.

    A full buffer evicts its oldest line for every new insert, so after any
    append sequence it holds exactly the most recent ``capacity`` lines in
    arrival order.
    """

    def __init__(self, capacity: int = MAX_LOG_LINES) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._lines: deque[str] = deque(maxlen=capacity)
        self._total_appended = 0

    @property
    def capacity(self) -> int:
        return self._lines.maxlen or 0

    @property
    def total_appended(self) -> int:
        """Number of lines ever appended, including evicted ones."""
        return self._total_appended

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)

    def __getitem__(self, index: int) -> LogLine:
        if index < 0:
            index += len(self._lines)
        return LogLine(self._lines[index], index)

    def __iter__(self) -> Iterator[LogLine]:
        for index, text in enumerate(self._lines):
            yield LogLine(text, index)

    def append(self, line: str) -> None:
        """Push one line, evicting the oldest line at capacity."""
        self._lines.append(line)
        self._total_appended += 1

    def extend(self, lines: list[str]) -> int:
        """Push several lines in order and return how many were added."""
        for line in lines:
            self.append(line)
        return len(lines)

    def texts(self) -> list[str]:
        """Return the raw text of every buffered line, oldest first."""
        return list(self._lines)

    def clear(self) -> None:
        self._lines.clear()
        self._total_appended = 0


__all__ = [
    "LogBuffer",
    "LogLine",
    "split_chunk",
]
