"""App-level keyboard bindings.

Everything except the emergency quit goes through ``KeyMap`` and the event
router; these Textual bindings only cover keys that must work even if the
browser screen is not mounted.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+q", "quit", "Quit", show=False, priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
