"""Feedback widgets for error states and help."""

from kubeoptic.widgets.feedback.error_overlay import ErrorOverlay
from kubeoptic.widgets.feedback.help_panel import HelpPanel

__all__ = [
    "ErrorOverlay",
    "HelpPanel",
]
