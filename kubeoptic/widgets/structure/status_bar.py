"""StatusBar widget - breadcrumb, focused panel and log viewer status.

CSS Classes: widget-status-bar, -loading
"""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static


class StatusBar(Static):
    """Bottom line of the browser screen."""

    _default_classes = "widget-status-bar"

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id, classes=self._default_classes)
        self.breadcrumb = ""
        self.focus_name = ""
        self.detail = ""
        self.loading = False

    def update_status(
        self,
        *,
        breadcrumb: str | None = None,
        focus_name: str | None = None,
        detail: str | None = None,
        loading: bool | None = None,
    ) -> None:
        """Update any subset of the status fields and redraw."""
        if breadcrumb is not None:
            self.breadcrumb = breadcrumb
        if focus_name is not None:
            self.focus_name = focus_name
        if detail is not None:
            self.detail = detail
        if loading is not None:
            self.loading = loading
            self.set_class(loading, "-loading")
        self.update(self.render_status())

    def render_status(self) -> Text:
        text = Text(self.breadcrumb, style="bold")
        if self.focus_name:
            text.append(f"  [{self.focus_name}]", style="dim")
        if self.loading:
            text.append("  loading...", style="italic")
        if self.detail:
            text.append(f"  {self.detail}")
        text.append("  ?: help", style="dim")
        return text


__all__ = [
    "StatusBar",
]
