"""Log buffer and search models owned by the log viewer."""

from kubeoptic.models.logs.log_buffer import LogBuffer, LogLine, split_chunk
from kubeoptic.models.logs.search_state import (
    SearchResult,
    SearchState,
    search_buffer,
)

__all__ = [
    "LogBuffer",
    "LogLine",
    "SearchResult",
    "SearchState",
    "search_buffer",
    "split_chunk",
]
