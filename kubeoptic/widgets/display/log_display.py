"""LogDisplay widget - renders the log viewer's display list.

Standard Wrapper Pattern:
- Wraps Textual's RichLog with styling supplied by ``screens.logs.rendering``
- Never takes real focus; scrolling is driven by the presenter's viewport

CSS Classes: widget-log-display, -focused-panel
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text
from textual.widgets import RichLog

from kubeoptic.constants.enums import Action
from kubeoptic.constants.limits import MAX_LOG_LINES
from kubeoptic.constants.values import NO_LOGS_MESSAGE
from kubeoptic.models.logs import LogLine
from kubeoptic.screens.logs.presenter import LogViewerPresenter
from kubeoptic.screens.logs.rendering import render_line


class LogDisplay(RichLog, can_focus=False):
    """Scrolling log output fed from a ``LogViewerPresenter``."""

    _default_classes = "widget-log-display"

    def __init__(self, presenter: LogViewerPresenter, *, id: str | None = None) -> None:
        super().__init__(
            id=id,
            classes=self._default_classes,
            max_lines=MAX_LOG_LINES,
            wrap=presenter.wrap,
            highlight=False,
            markup=False,
            auto_scroll=False,
        )
        self.presenter = presenter
        self._rendered_total = 0
        self._showing_placeholder = False

    def _render_log_line(self, line: LogLine) -> Text:
        return render_line(
            line.text,
            query=self.presenter.search.query,
            show_timestamps=self.presenter.show_timestamps,
        )

    def _write_lines(self, lines: Iterable[LogLine]) -> None:
        for line in lines:
            self.write(self._render_log_line(line), scroll_end=False)

    def render_all(self) -> None:
        """Clear and redraw every line of the display list."""
        presenter = self.presenter
        self.clear()
        self.wrap = presenter.wrap
        lines = presenter.display_lines
        self._showing_placeholder = not lines
        if lines:
            self._write_lines(lines)
        else:
            self.write(Text(NO_LOGS_MESSAGE, style="dim italic"), scroll_end=False)
        self._rendered_total = presenter.buffer.total_appended
        self.sync_viewport()

    def render_new(self) -> None:
        """Write only lines appended since the last render.

        Falls back to a full redraw while a search filter is active, when the
        placeholder is showing, or when lines were evicted unseen.
        """
        presenter = self.presenter
        pending = presenter.buffer.total_appended - self._rendered_total
        if (
            presenter.is_filtered
            or self._showing_placeholder
            or pending < 0
            or pending > len(presenter.buffer)
        ):
            self.render_all()
            return
        if pending:
            buffer = presenter.buffer
            self._write_lines(buffer[index] for index in range(len(buffer) - pending, len(buffer)))
            self._rendered_total = buffer.total_appended
        self.sync_viewport()

    def sync_viewport(self) -> None:
        """Scroll to match the presenter's viewport."""
        if self.presenter.follow:
            self.scroll_end(animate=False)
        else:
            self.scroll_to(y=self.presenter.viewport.y_offset, animate=False)

    def handle_action(
        self,
        action: Action | None,
        key: str,
        character: str | None,
    ) -> bool:
        if action is None or not self.presenter.scroll(action):
            return False
        self.sync_viewport()
        return True

    def set_focused(self, focused: bool) -> None:
        self.set_class(focused, "-focused-panel")


__all__ = [
    "LogDisplay",
]
