"""SearchBar widget - the draft query editor shown while searching.

The bar never takes real focus. While search entry is active the browser
screen forwards unrouted keys to ``handle_action``; printable characters and
backspace edit the draft, up/down walk the search history.

CSS Classes: widget-search-bar, -editing
"""

from __future__ import annotations

from rich.text import Text
from textual.message import Message
from textual.widgets import Static

from kubeoptic.constants.enums import Action
from kubeoptic.constants.limits import SEARCH_INPUT_CHAR_LIMIT
from kubeoptic.constants.values import SEARCH_PLACEHOLDER, SEARCH_PROMPT


class SearchBar(Static, can_focus=False):
    """Single-line search input with a match counter."""

    _default_classes = "widget-search-bar"

    class Changed(Message):
        """The draft query was edited."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class HistoryRecall(Message):
        """Step through previously confirmed queries (-1 older, +1 newer)."""

        def __init__(self, step: int) -> None:
            super().__init__()
            self.step = step

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(id=id, classes=self._default_classes)
        self._value = ""
        self._counter = ""
        self._editing = False

    @property
    def value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        """Replace the draft without posting ``Changed``."""
        self._value = value[:SEARCH_INPUT_CHAR_LIMIT]
        self._refresh_text()

    def set_counter(self, counter: str) -> None:
        self._counter = counter
        self._refresh_text()

    def set_editing(self, editing: bool) -> None:
        self._editing = editing
        self.set_class(editing, "-editing")
        self._refresh_text()

    def edit(self, key: str, character: str | None) -> bool:
        """Apply a key to the draft; True when the draft changed."""
        if key == "backspace":
            if not self._value:
                return False
            self._value = self._value[:-1]
        elif key == "ctrl+u":
            if not self._value:
                return False
            self._value = ""
        elif character and len(character) == 1 and character.isprintable():
            if len(self._value) >= SEARCH_INPUT_CHAR_LIMIT:
                return False
            self._value += character
        else:
            return False
        self._refresh_text()
        return True

    def _refresh_text(self) -> None:
        text = Text(SEARCH_PROMPT, style="bold")
        if self._value:
            text.append(self._value)
        elif self._editing:
            text.append(SEARCH_PLACEHOLDER, style="dim")
        if self._editing:
            text.append("█", style="blink")
        if self._counter:
            text.append(f"  {self._counter}", style="dim")
        self.update(text)

    def handle_action(
        self,
        action: Action | None,
        key: str,
        character: str | None,
    ) -> bool:
        if key in ("up", "down"):
            self.post_message(self.HistoryRecall(-1 if key == "up" else 1))
            return True
        if self.edit(key, character):
            self.post_message(self.Changed(self._value))
            return True
        return False

    def set_focused(self, focused: bool) -> None:
        self.set_editing(focused)


__all__ = [
    "SearchBar",
]
