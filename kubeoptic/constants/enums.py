"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Navigation Enums
# =============================================================================

class Screen(Enum):
    """Top-level application modes, ordered from broadest to narrowest."""

    CONTEXT = "context"
    NAMESPACE = "namespace"
    WORKLOAD = "workload"
    LOG = "log"


class Panel(Enum):
    """Independently focusable regions of the browser screen."""

    CONTEXT = "context"
    NAMESPACE = "namespace"
    WORKLOAD = "workload"
    SEARCH = "search"
    LOG = "log"
    STATUS_BAR = "status"


class CycleDirection(Enum):
    """Direction used when cycling focus between panels."""

    NEXT = 1
    PREV = -1


# =============================================================================
# Input Enums
# =============================================================================

class Action(Enum):
    """Logical input actions consumed by the event router.

    Physical keys are mapped onto these values by ``KeyMap``; nothing past the
    key map ever looks at a literal key name except the search input.
    """

    QUIT = "quit"
    HELP = "help"
    CONFIRM = "confirm"
    BACK = "back"
    PANEL_NEXT = "panel_next"
    PANEL_PREV = "panel_prev"
    SEARCH_ENTER = "search_enter"
    SEARCH_CONFIRM = "search_confirm"
    SEARCH_CANCEL = "search_cancel"
    SEARCH_NEXT_MATCH = "search_next_match"
    SEARCH_PREV_MATCH = "search_prev_match"
    FOLLOW_TOGGLE = "follow_toggle"
    WRAP_TOGGLE = "wrap_toggle"
    TIMESTAMP_TOGGLE = "timestamp_toggle"
    REFRESH = "refresh"
    SAVE = "save"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


class RouteDisposition(Enum):
    """Where the event router sent an input."""

    GLOBAL = "global"
    NAVIGATION = "navigation"
    FORWARD = "forward"


# =============================================================================
# Log Streaming Enums
# =============================================================================

class StreamState(Enum):
    """Lifecycle of the workload log stream."""

    IDLE = "idle"
    STREAMING = "streaming"
    STOPPED = "stopped"
    ERRORED = "errored"


class LogSeverity(Enum):
    """Severity derived from a log line's text at render time."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"
    PLAIN = "plain"


# =============================================================================
# Status Enums
# =============================================================================

class StatusType(Enum):
    """Kind of status message shown in the status bar."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class WorkloadStatus(Enum):
    """Pod phase values from Kubernetes API."""

    RUNNING = "Running"
    PENDING = "Pending"
    FAILED = "Failed"
    SUCCEEDED = "Succeeded"
    UNKNOWN = "Unknown"


class NamespaceStatus(Enum):
    """Namespace phase values from Kubernetes API."""

    ACTIVE = "Active"
    TERMINATING = "Terminating"
    UNKNOWN = "Unknown"


__all__ = [
    "Action",
    "CycleDirection",
    "LogSeverity",
    "NamespaceStatus",
    "Panel",
    "RouteDisposition",
    "Screen",
    "StatusType",
    "StreamState",
    "WorkloadStatus",
]
