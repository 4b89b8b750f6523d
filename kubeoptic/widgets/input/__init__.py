"""Input widgets for kubeoptic TUI.

This module provides input widgets for user interaction:
- SearchBar: Search draft editor
"""

from kubeoptic.widgets.input.search_bar import SearchBar

__all__ = [
    "SearchBar",
]
