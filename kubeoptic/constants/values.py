"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "kubeoptic"

# ============================================================================
# Log viewer text
# ============================================================================

SEARCH_PROMPT: Final = "Search: "
SEARCH_PLACEHOLDER: Final = "Search logs..."
NO_LOGS_MESSAGE: Final = "No logs available"
NO_WORKLOAD_SELECTED: Final = "no workload selected"
LOG_STREAMING_CONTEXT: Final = "log streaming"

# ============================================================================
# Breadcrumb labels
# ============================================================================

BREADCRUMB_SEPARATOR: Final = " > "
BREADCRUMB_LABELS: Final[tuple[str, ...]] = (
    "Contexts",
    "Namespaces",
    "Workloads",
    "Logs",
)

__all__ = [
    "APP_TITLE",
    "BREADCRUMB_LABELS",
    "BREADCRUMB_SEPARATOR",
    "LOG_STREAMING_CONTEXT",
    "NO_LOGS_MESSAGE",
    "NO_WORKLOAD_SELECTED",
    "SEARCH_PLACEHOLDER",
    "SEARCH_PROMPT",
]
