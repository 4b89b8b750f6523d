"""ErrorOverlay widget - shows the latest recoverable error.

The overlay sits on its own layer above the panels and is hidden by the
next key press.

CSS Classes: widget-error-overlay
"""

from rich.text import Text
from textual.widgets import Static


class ErrorOverlay(Static):
    """Dismissable error box."""

    _default_classes = "widget-error-overlay"

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id, classes=self._default_classes)
        self.message = ""
        self.display = False

    @property
    def is_showing(self) -> bool:
        return bool(self.display)

    def show_error(self, message: str) -> None:
        self.message = message
        text = Text("Error\n", style="bold")
        text.append(message)
        text.append("\n\npress any key to dismiss", style="dim")
        self.update(text)
        self.display = True

    def dismiss(self) -> bool:
        """Hide the overlay; True when it was showing."""
        if not self.display:
            return False
        self.display = False
        self.message = ""
        return True


__all__ = [
    "ErrorOverlay",
]
