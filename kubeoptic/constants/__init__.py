"""Constants module for the kubeoptic TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in kubeoptic.keyboard module.
"""

from kubeoptic.constants.defaults import (
    EXPORT_PATH_DEFAULT,
    FOLLOW_DEFAULT,
    NAMESPACE_DEFAULT,
    SHOW_TIMESTAMPS_DEFAULT,
    THEME_DEFAULT,
    WRAP_LINES_DEFAULT,
)
from kubeoptic.constants.enums import (
    Action,
    CycleDirection,
    LogSeverity,
    Panel,
    RouteDisposition,
    Screen,
    StatusType,
    StreamState,
)
from kubeoptic.constants.limits import (
    MAX_LOG_LINES,
    MAX_SEARCH_HISTORY,
    MAX_SEARCH_RESULTS,
)
from kubeoptic.constants.timeouts import (
    KUBECTL_COMMAND_TIMEOUT,
    STREAM_READ_TIMEOUT,
)
from kubeoptic.constants.values import (
    APP_TITLE,
    NO_WORKLOAD_SELECTED,
)

__all__ = [
    # Application
    "APP_TITLE",
    "EXPORT_PATH_DEFAULT",
    # Defaults
    "FOLLOW_DEFAULT",
    # Timeouts
    "KUBECTL_COMMAND_TIMEOUT",
    # Limits
    "MAX_LOG_LINES",
    "MAX_SEARCH_HISTORY",
    "MAX_SEARCH_RESULTS",
    "NAMESPACE_DEFAULT",
    "NO_WORKLOAD_SELECTED",
    "SHOW_TIMESTAMPS_DEFAULT",
    "STREAM_READ_TIMEOUT",
    "THEME_DEFAULT",
    "WRAP_LINES_DEFAULT",
    # Enums
    "Action",
    "CycleDirection",
    "LogSeverity",
    "Panel",
    "RouteDisposition",
    "Screen",
    "StatusType",
    "StreamState",
]
