"""ResourceList widget - a filterable list of contexts, namespaces or workloads.

Standard Wrapper Pattern:
- Wraps Textual's OptionList; never takes real focus, the browser screen
  decides which panel receives input
- Items are pydantic models; the option id is the model's ``name``

CSS Classes: widget-resource-list, -focused-panel
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final

from rich.text import Text
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from kubeoptic.constants.enums import Action, Panel

_SCROLL_ACTIONS: Final[dict[Action, str]] = {
    Action.SCROLL_UP: "action_cursor_up",
    Action.SCROLL_DOWN: "action_cursor_down",
    Action.PAGE_UP: "action_page_up",
    Action.PAGE_DOWN: "action_page_down",
    Action.HOME: "action_first",
    Action.END: "action_last",
}


def _default_label(item: Any) -> Text:
    return Text(str(getattr(item, "name", item)))


class ResourceList(OptionList, can_focus=False):
    """List panel for one level of the resource hierarchy."""

    _default_classes = "widget-resource-list"

    def __init__(
        self,
        panel: Panel,
        title: str,
        *,
        label: Callable[[Any], Text] = _default_label,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(id=id, classes=f"{self._default_classes} {classes}".strip())
        self.panel = panel
        self.border_title = title
        self._label = label
        self._items: list[Any] = []
        self._visible: list[Any] = []
        self._filter = ""

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    @property
    def items(self) -> list[Any]:
        return list(self._items)

    @property
    def filter_text(self) -> str:
        return self._filter

    def set_items(self, items: list[Any], *, select: str | None = None) -> None:
        """Replace the list contents, keeping the filter.

        Args:
            items: Models with a ``name`` attribute.
            select: Name of the item to highlight, defaults to the first.
        """
        self._items = list(items)
        self._rebuild(select)

    def clear_items(self) -> None:
        self.set_items([])

    def set_filter(self, text: str) -> None:
        """Show only items whose name contains ``text`` (case-insensitive)."""
        if text == self._filter:
            return
        current = self.selected_item
        self._filter = text
        self._rebuild(getattr(current, "name", None))

    def _rebuild(self, select: str | None) -> None:
        needle = self._filter.lower()
        self._visible = [
            item
            for item in self._items
            if not needle or needle in str(getattr(item, "name", item)).lower()
        ]
        self.clear_options()
        self.add_options(
            [Option(self._label(item), id=str(getattr(item, "name", item))) for item in self._visible]
        )
        if not self._visible:
            return
        index = 0
        if select is not None:
            for position, item in enumerate(self._visible):
                if getattr(item, "name", None) == select:
                    index = position
                    break
        self.highlighted = index

    @property
    def selected_item(self) -> Any | None:
        """The highlighted model, if any."""
        index = self.highlighted
        if index is None or not 0 <= index < len(self._visible):
            return None
        return self._visible[index]

    # ------------------------------------------------------------------
    # Panel protocols
    # ------------------------------------------------------------------

    def handle_action(
        self,
        action: Action | None,
        key: str,
        character: str | None,
    ) -> bool:
        method_name = _SCROLL_ACTIONS.get(action) if action is not None else None
        if method_name is None:
            return False
        getattr(self, method_name)()
        return True

    def set_focused(self, focused: bool) -> None:
        self.set_class(focused, "-focused-panel")


__all__ = [
    "ResourceList",
]
