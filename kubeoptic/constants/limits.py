"""Limit and threshold constants for the TUI.

All buffer sizes, caps and validation ranges.
"""

from typing import Final

# ============================================================================
# Log buffer limits
# ============================================================================

MAX_LOG_LINES: Final = 10000
LOG_READ_BYTES: Final = 64 * 1024

# ============================================================================
# Search limits
# ============================================================================

MAX_SEARCH_RESULTS: Final = 1000
MAX_SEARCH_HISTORY: Final = 50
SEARCH_INPUT_CHAR_LIMIT: Final = 256

# ============================================================================
# Viewport limits
# ============================================================================

MIN_VIEWPORT_HEIGHT: Final = 1
DEFAULT_VIEWPORT_HEIGHT: Final = 20

__all__ = [
    "DEFAULT_VIEWPORT_HEIGHT",
    "LOG_READ_BYTES",
    "MAX_LOG_LINES",
    "MAX_SEARCH_HISTORY",
    "MAX_SEARCH_RESULTS",
    "MIN_VIEWPORT_HEIGHT",
    "SEARCH_INPUT_CHAR_LIMIT",
]
