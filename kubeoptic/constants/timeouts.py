"""Timeout constants for the TUI.

All timeout and interval values for cluster requests and log streaming.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = "30s"

# Process-level command timeout (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 45

# ============================================================================
# Log streaming timeouts (float, in seconds)
# ============================================================================

STREAM_READ_TIMEOUT: Final = 5.0
STREAM_CLOSE_TIMEOUT: Final = 2.0

# Not wired: search recomputes synchronously on every keystroke.
SEARCH_DEBOUNCE_DELAY: Final = 0.1

__all__ = [
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "SEARCH_DEBOUNCE_DELAY",
    "STREAM_CLOSE_TIMEOUT",
    "STREAM_READ_TIMEOUT",
]
