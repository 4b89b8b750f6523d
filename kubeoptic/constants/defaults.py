"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "textual-dark"

# ============================================================================
# Log viewer defaults
# ============================================================================

FOLLOW_DEFAULT: Final = True
WRAP_LINES_DEFAULT: Final = True
SHOW_TIMESTAMPS_DEFAULT: Final = False

# ============================================================================
# Cluster defaults
# ============================================================================

NAMESPACE_DEFAULT: Final = "default"
EXPORT_PATH_DEFAULT: Final = "./logs"

__all__ = [
    "EXPORT_PATH_DEFAULT",
    "FOLLOW_DEFAULT",
    "NAMESPACE_DEFAULT",
    "SHOW_TIMESTAMPS_DEFAULT",
    "THEME_DEFAULT",
    "WRAP_LINES_DEFAULT",
]
