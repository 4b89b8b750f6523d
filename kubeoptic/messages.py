"""Message bus: every event value exchanged between components.

Input handling, background workers and the log stream all communicate through
these Textual messages. A worker performs one unit of deferred work and posts
exactly one of them back to the screen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.message import Message

from kubeoptic.constants.enums import CycleDirection, Panel, Screen
from kubeoptic.screens.mixins.worker_mixin import DataLoaded

if TYPE_CHECKING:
    from kubeoptic.controllers.base.base_controller import LogStream
    from kubeoptic.models.core import ContextInfo, NamespaceInfo, WorkloadInfo


# ============================================================================
# Navigation
# ============================================================================


class SelectionConfirmed(Message):
    """The highlighted item of a list panel was confirmed."""

    def __init__(self, panel: Panel) -> None:
        super().__init__()
        self.panel = panel


class RefreshRequested(Message):
    """The data backing ``screen`` should be (re)loaded."""

    def __init__(self, screen: Screen) -> None:
        super().__init__()
        self.screen = screen


class ScreenChanged(Message):
    """The navigation state moved between screens."""

    def __init__(self, previous: Screen, current: Screen) -> None:
        super().__init__()
        self.previous = previous
        self.current = current


class FocusChanged(Message):
    """Input focus moved to another panel."""

    def __init__(self, component: Panel) -> None:
        super().__init__()
        self.component = component


class HelpToggled(Message):
    def __init__(self, visible: bool) -> None:
        super().__init__()
        self.visible = visible


class QuitRequested(Message):
    """The user asked to leave the application."""


# ============================================================================
# Search
# ============================================================================


class SearchStarted(Message):
    """Search entry mode was entered."""


class SearchConfirmed(Message):
    """The draft query was accepted."""


class SearchCancelled(Message):
    """Search entry was abandoned; the previous query is restored."""


class SearchNavigate(Message):
    """Jump to the next or previous search match."""

    def __init__(self, direction: CycleDirection) -> None:
        super().__init__()
        self.direction = direction


# ============================================================================
# Log viewer toggles
# ============================================================================


class ToggleFollow(Message):
    pass


class ToggleWrap(Message):
    pass


class ToggleTimestamps(Message):
    pass


class SaveLogs(Message):
    """Write the currently displayed log lines to a file."""


# ============================================================================
# Data loading
# ============================================================================


class ContextsLoaded(DataLoaded):
    data: list[ContextInfo]


class NamespacesLoaded(DataLoaded):
    data: list[NamespaceInfo]


class WorkloadsLoaded(DataLoaded):
    data: list[WorkloadInfo]


# ============================================================================
# Log streaming
# ============================================================================


class LogStreamOpened(Message):
    """A log stream for generation ``stream_id`` is ready to be read."""

    def __init__(self, stream_id: int, stream: LogStream) -> None:
        super().__init__()
        self.stream_id = stream_id
        self.stream = stream


class LogStreamOpenFailed(Message):
    def __init__(self, stream_id: int, error: Exception) -> None:
        super().__init__()
        self.stream_id = stream_id
        self.error = error


class LogChunk(Message):
    """Result of one read: data, end-of-stream or a transient error.

    Exactly one of ``data`` (non-empty), ``eof`` or ``error`` is meaningful.
    """

    def __init__(
        self,
        stream_id: int,
        data: str = "",
        *,
        eof: bool = False,
        error: Exception | None = None,
    ) -> None:
        super().__init__()
        self.stream_id = stream_id
        self.data = data
        self.eof = eof
        self.error = error


# ============================================================================
# Errors
# ============================================================================


class ErrorRaised(Message):
    """A recoverable error to show in the error overlay.

    Attributes:
        error: What went wrong.
        context: Short description of the operation that failed.
    """

    def __init__(self, error: Exception | str, context: str) -> None:
        super().__init__()
        self.error = error
        self.context = context

    @property
    def text(self) -> str:
        return f"{self.context}: {self.error}"


__all__ = [
    "ContextsLoaded",
    "ErrorRaised",
    "FocusChanged",
    "HelpToggled",
    "LogChunk",
    "LogStreamOpenFailed",
    "LogStreamOpened",
    "NamespacesLoaded",
    "QuitRequested",
    "RefreshRequested",
    "SaveLogs",
    "ScreenChanged",
    "SearchCancelled",
    "SearchConfirmed",
    "SearchNavigate",
    "SearchStarted",
    "SelectionConfirmed",
    "ToggleFollow",
    "ToggleTimestamps",
    "ToggleWrap",
    "WorkloadsLoaded",
]
