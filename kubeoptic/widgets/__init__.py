"""Widgets module for the kubeoptic TUI.

This module provides all reusable widgets organized into submodules:
- display: Log output (LogDisplay)
- feedback: Error and help overlays (ErrorOverlay, HelpPanel)
- input: Search draft editor (SearchBar)
- panels: Resource list panels (ResourceList)
- structure: Status line (StatusBar)
- protocols: Panel capability protocols (KeyHandler, Focusable)
"""

# Display widgets
from kubeoptic.widgets.display import LogDisplay

# Feedback widgets
from kubeoptic.widgets.feedback import ErrorOverlay, HelpPanel

# Input widgets
from kubeoptic.widgets.input import SearchBar

# Panel widgets
from kubeoptic.widgets.panels import ResourceList

# Protocols
from kubeoptic.widgets.protocols import BrowserPanel, Focusable, KeyHandler

# Structure widgets
from kubeoptic.widgets.structure import StatusBar

__all__ = [
    "BrowserPanel",
    "ErrorOverlay",
    "Focusable",
    "HelpPanel",
    "KeyHandler",
    "LogDisplay",
    "ResourceList",
    "SearchBar",
    "StatusBar",
]
