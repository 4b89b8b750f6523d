"""Structure widgets for kubeoptic TUI.

This module provides structural layout widgets:
- StatusBar: Breadcrumb and status line
"""

from kubeoptic.widgets.structure.status_bar import StatusBar

__all__ = [
    "StatusBar",
]
