"""Capability protocols implemented by the browser panels.

The browser screen keeps a ``Panel -> widget`` table and dispatches forwarded
input through these protocols, so it never needs to know a panel's concrete
type.
"""

from __future__ import annotations

from typing import Protocol

from kubeoptic.constants.enums import Action


class KeyHandler(Protocol):
    """A panel that accepts input the router forwarded to it."""

    def handle_action(
        self,
        action: Action | None,
        key: str,
        character: str | None,
    ) -> bool:
        """Handle forwarded input; return True when it was used."""
        ...


class Focusable(Protocol):
    """A panel that renders differently while it owns input focus."""

    def set_focused(self, focused: bool) -> None: ...


class BrowserPanel(KeyHandler, Focusable, Protocol):
    """Both capabilities; every browser panel satisfies this."""


__all__ = [
    "BrowserPanel",
    "Focusable",
    "KeyHandler",
]
