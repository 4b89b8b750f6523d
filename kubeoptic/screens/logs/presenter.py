"""Log viewer presenter - stream lifecycle, buffer, search and viewport.

The presenter holds no Textual objects. Every event handler returns a
``StreamStep`` telling the screen which deferred work to schedule next (open
the stream, issue one more read, close a handle) and whether there is an
error to surface. The screen owns the workers; the presenter owns the state.

Each call to ``start_stream`` or ``stop_stream`` bumps the stream
generation. Open results and chunks tagged with an older generation are
discarded, so a read that completes after the user left the log screen can
never touch the new buffer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from kubeoptic.constants.defaults import (
    FOLLOW_DEFAULT,
    SHOW_TIMESTAMPS_DEFAULT,
    WRAP_LINES_DEFAULT,
)
from kubeoptic.constants.enums import Action, CycleDirection, StreamState
from kubeoptic.constants.limits import (
    DEFAULT_VIEWPORT_HEIGHT,
    MAX_LOG_LINES,
    MIN_VIEWPORT_HEIGHT,
)
from kubeoptic.constants.values import LOG_STREAMING_CONTEXT, NO_WORKLOAD_SELECTED
from kubeoptic.controllers.base import LogStream
from kubeoptic.models.core import WorkloadInfo
from kubeoptic.models.logs import LogBuffer, LogLine, SearchState, split_chunk

logger = logging.getLogger(__name__)


class WorkloadSelectionError(ValueError):
    """Log streaming was requested without a selected workload."""


@dataclass(frozen=True)
class StreamStep:
    """Follow-up work requested by the presenter.

    Attributes:
        stream_id: Generation the follow-up belongs to.
        open_stream: Schedule ``open_log_stream`` for the current workload.
        read_next: Schedule exactly one ``read_chunk`` on the attached stream.
        close: A detached stream handle the caller must close.
        error: An error to surface to the user.
        context: Short description of the failed operation.
        render: The display list changed.
    """

    stream_id: int = 0
    open_stream: bool = False
    read_next: bool = False
    close: LogStream | None = None
    error: Exception | None = None
    context: str = LOG_STREAMING_CONTEXT
    render: bool = False


@dataclass
class Viewport:
    """Visible window over the display list, in display rows."""

    height: int = DEFAULT_VIEWPORT_HEIGHT
    y_offset: int = 0
    target_line: int = 0

    def max_offset(self, line_count: int) -> int:
        return max(0, line_count - self.height)

    def at_bottom(self, line_count: int) -> bool:
        return self.y_offset >= self.max_offset(line_count)


class LogViewerPresenter:
    """State of the streaming log viewer for one workload at a time."""

    def __init__(
        self,
        *,
        capacity: int = MAX_LOG_LINES,
        follow: bool = FOLLOW_DEFAULT,
        wrap: bool = WRAP_LINES_DEFAULT,
        show_timestamps: bool = SHOW_TIMESTAMPS_DEFAULT,
    ) -> None:
        self._capacity = capacity
        self.buffer = LogBuffer(capacity)
        self.search = SearchState()
        self.viewport = Viewport()
        self.state = StreamState.IDLE
        self.workload: WorkloadInfo | None = None
        self.stream: LogStream | None = None
        self.stream_id = 0
        self.follow = follow
        self.wrap = wrap
        self.show_timestamps = show_timestamps
        self.last_error: Exception | None = None
        self._filtered: tuple[LogLine, ...] | None = None
        self._query_before_search: str | None = None
        self._history_cursor: int | None = None

    # ========================================================================
    # Derived views
    # ========================================================================

    @property
    def display_lines(self) -> tuple[LogLine, ...]:
        """Lines to render: the search view when a query is active, else the buffer."""
        if self._filtered is not None:
            return self._filtered
        return tuple(self.buffer)

    @property
    def is_filtered(self) -> bool:
        return self._filtered is not None

    @property
    def line_count(self) -> int:
        if self._filtered is not None:
            return len(self._filtered)
        return len(self.buffer)

    @property
    def is_streaming(self) -> bool:
        return self.state is StreamState.STREAMING

    def status_text(self) -> str:
        """One-line summary, e.g. ``FOLLOW | 120 lines | search: err (2/7)``."""
        parts = []
        if self.follow:
            parts.append("FOLLOW")
        parts.append(f"{len(self.buffer)} lines")
        if self.search.query:
            search_part = f"search: {self.search.query}"
            if self.search.matches:
                position = self.search.cursor + 1
                total = f"{len(self.search.matches)}{'+' if self.search.truncated else ''}"
                search_part += f" ({position}/{total})"
            else:
                search_part += " (0)"
            parts.append(search_part)
        if self.state in (StreamState.STOPPED, StreamState.ERRORED):
            parts.append(self.state.value.upper())
        return " | ".join(parts)

    # ========================================================================
    # Stream lifecycle
    # ========================================================================

    def _detach(self) -> LogStream | None:
        handle, self.stream = self.stream, None
        return handle

    def start_stream(self, workload: WorkloadInfo | None) -> StreamStep:
        """Begin streaming ``workload``, replacing any previous stream."""
        if workload is None:
            logger.debug("Log stream requested without a selected workload")
            return StreamStep(
                stream_id=self.stream_id,
                error=WorkloadSelectionError(NO_WORKLOAD_SELECTED),
            )

        previous = self._detach()
        self.stream_id += 1
        self.workload = workload
        self.state = StreamState.STREAMING
        self.last_error = None
        self.buffer = LogBuffer(self._capacity)
        self.search.clear()
        self._filtered = None
        self._query_before_search = None
        self._history_cursor = None
        self.viewport.y_offset = 0
        self.viewport.target_line = 0
        logger.debug("Starting log stream %d for %s", self.stream_id, workload.identity)
        return StreamStep(
            stream_id=self.stream_id,
            open_stream=True,
            close=previous,
            render=True,
        )

    def _is_current(self, stream_id: int) -> bool:
        return stream_id == self.stream_id and self.state is StreamState.STREAMING

    def stream_opened(self, stream_id: int, stream: LogStream) -> StreamStep:
        """Attach an opened stream and issue the first read."""
        if not self._is_current(stream_id):
            logger.debug("Discarding stale stream %d (current %d)", stream_id, self.stream_id)
            return StreamStep(stream_id=self.stream_id, close=stream)
        self.stream = stream
        return StreamStep(stream_id=stream_id, read_next=True)

    def stream_open_failed(self, stream_id: int, error: Exception) -> StreamStep:
        """Surface an open failure; it is not retried."""
        if not self._is_current(stream_id):
            return StreamStep(stream_id=self.stream_id)
        logger.warning("Failed to open log stream %d: %s", stream_id, error)
        self.state = StreamState.ERRORED
        self.last_error = error
        return StreamStep(stream_id=stream_id, error=error)

    def handle_chunk(
        self,
        stream_id: int,
        data: str = "",
        *,
        eof: bool = False,
        error: Exception | None = None,
    ) -> StreamStep:
        """Apply one read result and decide whether to read again."""
        if not self._is_current(stream_id) or self.stream is None:
            logger.debug("Discarding chunk for stale stream %d", stream_id)
            return StreamStep(stream_id=self.stream_id)

        if error is not None:
            logger.warning("Transient log stream error on %d: %s", stream_id, error)
            self.last_error = error
            return StreamStep(stream_id=stream_id, read_next=True, error=error)

        if eof:
            logger.debug("Log stream %d reached end of stream", stream_id)
            self.state = StreamState.STOPPED
            return StreamStep(stream_id=stream_id, close=self._detach(), render=True)

        added = self.append_chunk(data)
        return StreamStep(stream_id=stream_id, read_next=True, render=added > 0)

    def stop_stream(self) -> StreamStep:
        """Return to Idle from any state, orphaning in-flight work."""
        handle = self._detach()
        self.stream_id += 1
        self.state = StreamState.IDLE
        return StreamStep(stream_id=self.stream_id, close=handle)

    # ========================================================================
    # Buffer
    # ========================================================================

    def append_chunk(self, data: str) -> int:
        """Append the non-empty lines of ``data`` and return how many were added."""
        added = self.buffer.extend(split_chunk(data))
        if not added:
            return 0
        if self.search.query:
            self._recompute()
        if self.follow:
            self.scroll_to_bottom()
        return added

    def _recompute(self) -> None:
        display = self.search.recompute(self.buffer)
        self._filtered = display if self.search.query else None

    # ========================================================================
    # Viewport
    # ========================================================================

    def set_viewport_height(self, height: int) -> None:
        self.viewport.height = max(MIN_VIEWPORT_HEIGHT, height)
        if self.follow:
            self.scroll_to_bottom()

    def scroll_to_bottom(self) -> None:
        count = self.line_count
        self.viewport.target_line = max(0, count - 1)
        self.viewport.y_offset = self.viewport.max_offset(count)

    def jump_to_row(self, row: int) -> None:
        """Centre display row ``row`` in the viewport.

        Like a manual scroll, a jump that leaves the bottom turns follow off.
        """
        count = self.line_count
        self.viewport.target_line = row
        self.viewport.y_offset = min(
            max(0, row - self.viewport.height // 2),
            self.viewport.max_offset(count),
        )
        if self.follow and not self.viewport.at_bottom(count):
            self.follow = False

    def scroll(self, action: Action) -> bool:
        """Apply a manual scroll action; leaving the bottom turns follow off.

        Returns False for actions that are not scroll actions.
        """
        count = self.line_count
        offset = self.viewport.y_offset
        page = max(1, self.viewport.height - 1)
        if action is Action.SCROLL_UP:
            offset -= 1
        elif action is Action.SCROLL_DOWN:
            offset += 1
        elif action is Action.PAGE_UP:
            offset -= page
        elif action is Action.PAGE_DOWN:
            offset += page
        elif action is Action.HOME:
            offset = 0
        elif action is Action.END:
            offset = self.viewport.max_offset(count)
        else:
            return False
        self.viewport.y_offset = min(max(0, offset), self.viewport.max_offset(count))
        if self.follow and not self.viewport.at_bottom(count):
            self.follow = False
        return True

    # ========================================================================
    # Display toggles
    # ========================================================================

    def toggle_follow(self) -> bool:
        self.follow = not self.follow
        if self.follow:
            self.scroll_to_bottom()
        return self.follow

    def toggle_wrap(self) -> bool:
        self.wrap = not self.wrap
        return self.wrap

    def toggle_timestamps(self) -> bool:
        self.show_timestamps = not self.show_timestamps
        return self.show_timestamps

    # ========================================================================
    # Search
    # ========================================================================

    def set_query(self, query: str) -> bool:
        """Replace the live query and recompute; True when it changed.

        A non-empty query with matches moves the cursor to the first match
        and jumps to it.
        """
        if query == self.search.query:
            return False
        self.search.query = query
        self.search.cursor = 0
        self._recompute()
        if self.search.matches:
            self.jump_to_row(self._display_row(self.search.cursor))
        elif self.follow:
            self.scroll_to_bottom()
        return True

    def _display_row(self, cursor: int) -> int:
        """Row of match ``cursor`` within the display list."""
        if self._filtered is not None:
            return cursor
        return self.search.matches[cursor]

    def begin_search(self) -> None:
        """Remember the query in effect before search entry started."""
        self._query_before_search = self.search.query
        self._history_cursor = None

    def confirm_search(self) -> bool:
        """Keep the draft query and record it in history."""
        self._query_before_search = None
        self._history_cursor = None
        return self.search.remember(self.search.query)

    def cancel_search(self) -> bool:
        """Restore the query in effect before search entry started."""
        previous = self._query_before_search
        self._query_before_search = None
        self._history_cursor = None
        if previous is None:
            return False
        return self.set_query(previous)

    def clear_search(self) -> bool:
        return self.set_query("")

    def recall_history(self, step: int) -> str | None:
        """Walk confirmed queries into the draft; negative steps go older.

        Walking past the newest entry returns to an empty draft.
        """
        history = self.search.history
        if not history:
            return None
        cursor = len(history) if self._history_cursor is None else self._history_cursor
        cursor = min(max(0, cursor + step), len(history))
        self._history_cursor = cursor
        query = history[cursor] if cursor < len(history) else ""
        self.set_query(query)
        return query

    def navigate_match(self, direction: CycleDirection) -> int | None:
        """Move to the next/previous match circularly; None with no matches."""
        line = self.search.step(direction.value)
        if line is None:
            return None
        self.jump_to_row(self._display_row(self.search.cursor))
        return line

    def next_match(self) -> int | None:
        return self.navigate_match(CycleDirection.NEXT)

    def prev_match(self) -> int | None:
        return self.navigate_match(CycleDirection.PREV)

    # ========================================================================
    # Export
    # ========================================================================

    def export_lines(self) -> list[str]:
        """Raw text of the currently displayed lines."""
        return [line.text for line in self.display_lines]


__all__ = [
    "LogViewerPresenter",
    "StreamStep",
    "Viewport",
    "WorkloadSelectionError",
]
