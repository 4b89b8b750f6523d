"""Keyboard bindings module.

Bindings are organized into two layers:

- app: Textual bindings active on every screen (APP_BINDINGS)
- keymap: physical key to logical ``Action`` tables read by the event router
"""

from kubeoptic.keyboard.app import APP_BINDINGS
from kubeoptic.keyboard.keymap import (
    DEFAULT_GLOBAL_KEYS,
    DEFAULT_LOG_KEYS,
    DEFAULT_SCREEN_KEYS,
    DEFAULT_SEARCH_KEYS,
    KeyMap,
)

__all__ = [
    "APP_BINDINGS",
    "DEFAULT_GLOBAL_KEYS",
    "DEFAULT_LOG_KEYS",
    "DEFAULT_SCREEN_KEYS",
    "DEFAULT_SEARCH_KEYS",
    "KeyMap",
]
