"""Display widgets for kubeoptic TUI.

This module provides display widgets that show content:
- LogDisplay: Rich log output for the streaming log viewer
"""

from kubeoptic.widgets.display.log_display import LogDisplay

__all__ = [
    "LogDisplay",
]
