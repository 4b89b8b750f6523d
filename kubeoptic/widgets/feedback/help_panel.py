"""HelpPanel widget - key binding reference built from the active key map."""

from __future__ import annotations

from typing import Final

from rich.table import Table
from textual.widgets import Static

from kubeoptic.constants.enums import Action
from kubeoptic.keyboard.keymap import KeyMap

_HELP_SECTIONS: Final[tuple[tuple[str, tuple[tuple[Action, str], ...]], ...]] = (
    (
        "Navigation",
        (
            (Action.CONFIRM, "Select / open"),
            (Action.BACK, "Back"),
            (Action.PANEL_NEXT, "Next panel"),
            (Action.PANEL_PREV, "Previous panel"),
            (Action.SCROLL_UP, "Up"),
            (Action.SCROLL_DOWN, "Down"),
            (Action.REFRESH, "Refresh"),
        ),
    ),
    (
        "Search",
        (
            (Action.SEARCH_ENTER, "Search"),
            (Action.SEARCH_CONFIRM, "Apply search"),
            (Action.SEARCH_CANCEL, "Cancel search"),
            (Action.SEARCH_NEXT_MATCH, "Next match"),
            (Action.SEARCH_PREV_MATCH, "Previous match"),
        ),
    ),
    (
        "Logs",
        (
            (Action.FOLLOW_TOGGLE, "Toggle follow"),
            (Action.WRAP_TOGGLE, "Toggle wrap"),
            (Action.TIMESTAMP_TOGGLE, "Toggle timestamps"),
            (Action.SAVE, "Save logs"),
        ),
    ),
    (
        "General",
        (
            (Action.HELP, "Toggle help"),
            (Action.QUIT, "Quit"),
        ),
    ),
)


def build_help_table(keymap: KeyMap) -> Table:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    for title, entries in _HELP_SECTIONS:
        table.add_row(f"[underline]{title}[/underline]", "")
        for action, description in entries:
            keys = keymap.keys_for(action)
            if keys:
                table.add_row(" / ".join(keys), description)
        table.add_row("", "")
    return table


class HelpPanel(Static):
    """Overlay listing every bound key."""

    _default_classes = "widget-help-panel"

    def __init__(self, keymap: KeyMap, *, id: str | None = None) -> None:
        super().__init__(build_help_table(keymap), id=id, classes=self._default_classes)
        self.border_title = "Help"
        self.display = False


__all__ = [
    "HelpPanel",
    "build_help_table",
]
