"""Physical key to logical action mapping.

The event router only ever sees :class:`Action` values. ``KeyMap`` is a plain
configuration value handed to the router at construction, and it is persisted
as part of ``AppSettings`` so users can rebind keys.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kubeoptic.constants.enums import Action, Screen

# ============================================================================
# Default tables
# ============================================================================

DEFAULT_GLOBAL_KEYS: dict[str, Action] = {
    "q": Action.QUIT,
    "ctrl+c": Action.QUIT,
    "?": Action.HELP,
    "f1": Action.HELP,
}

DEFAULT_SCREEN_KEYS: dict[str, Action] = {
    "enter": Action.CONFIRM,
    "escape": Action.BACK,
    "backspace": Action.BACK,
    "tab": Action.PANEL_NEXT,
    "shift+tab": Action.PANEL_PREV,
    "/": Action.SEARCH_ENTER,
    "r": Action.REFRESH,
    "ctrl+r": Action.REFRESH,
    "up": Action.SCROLL_UP,
    "k": Action.SCROLL_UP,
    "down": Action.SCROLL_DOWN,
    "j": Action.SCROLL_DOWN,
    "pageup": Action.PAGE_UP,
    "pagedown": Action.PAGE_DOWN,
    "home": Action.HOME,
    "g": Action.HOME,
    "end": Action.END,
    "G": Action.END,
}

DEFAULT_LOG_KEYS: dict[str, Action] = {
    "n": Action.SEARCH_NEXT_MATCH,
    "N": Action.SEARCH_PREV_MATCH,
    "f": Action.FOLLOW_TOGGLE,
    "w": Action.WRAP_TOGGLE,
    "t": Action.TIMESTAMP_TOGGLE,
    "s": Action.SAVE,
    "ctrl+s": Action.SAVE,
}

DEFAULT_SEARCH_KEYS: dict[str, Action] = {
    "enter": Action.SEARCH_CONFIRM,
    "escape": Action.SEARCH_CANCEL,
    "ctrl+c": Action.QUIT,
}


class KeyMap(BaseModel):
    """Key tables consulted in order: search, global, log overrides, screen.

    Keys are Textual key names (``"enter"``, ``"shift+tab"``) or the printed
    character for punctuation (``"/"``, ``"?"``).
    """

    model_config = ConfigDict(populate_by_name=True)

    global_keys: dict[str, Action] = Field(
        default_factory=lambda: dict(DEFAULT_GLOBAL_KEYS),
    )
    screen_keys: dict[str, Action] = Field(
        default_factory=lambda: dict(DEFAULT_SCREEN_KEYS),
    )
    log_keys: dict[str, Action] = Field(
        default_factory=lambda: dict(DEFAULT_LOG_KEYS),
    )
    search_keys: dict[str, Action] = Field(
        default_factory=lambda: dict(DEFAULT_SEARCH_KEYS),
    )

    @staticmethod
    def _lookup(
        table: dict[str, Action],
        key: str,
        character: str | None,
    ) -> Action | None:
        action = table.get(key)
        if action is None and character:
            action = table.get(character)
        return action

    def resolve(
        self,
        key: str,
        character: str | None = None,
        *,
        screen: Screen,
        search_active: bool = False,
    ) -> Action | None:
        """Return the action bound to a key press, or None when unbound.

        While search entry is active printable keys reach the search input as
        text; only the search table and non-printable global keys apply.
        """
        if search_active:
            action = self._lookup(self.search_keys, key, character)
            if action is None and not (character and character.isprintable()):
                action = self.global_keys.get(key)
            return action

        action = self._lookup(self.global_keys, key, character)
        if action is not None:
            return action
        if screen is Screen.LOG:
            action = self._lookup(self.log_keys, key, character)
            if action is not None:
                return action
        return self._lookup(self.screen_keys, key, character)

    def keys_for(self, action: Action) -> list[str]:
        """Return every key bound to ``action`` across all tables."""
        keys: list[str] = []
        for table in (
            self.global_keys,
            self.screen_keys,
            self.log_keys,
            self.search_keys,
        ):
            keys.extend(key for key, bound in table.items() if bound is action)
        return list(dict.fromkeys(keys))


__all__ = [
    "DEFAULT_GLOBAL_KEYS",
    "DEFAULT_LOG_KEYS",
    "DEFAULT_SCREEN_KEYS",
    "DEFAULT_SEARCH_KEYS",
    "KeyMap",
]
