"""Event router.

Decides, for each logical input action, whether it is consumed globally,
consumed by navigation/screen logic, or forwarded untouched to the focused
panel. The checks run in a fixed order and stop at the first match:

1. global actions (quit, help)
2. search entry mode
3. screen-specific actions (confirm, log viewer toggles, refresh)
4. navigation actions (panel cycling, back, search entry)
5. anything else is forwarded
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final

from textual.message import Message

from kubeoptic.constants.enums import Action, CycleDirection, RouteDisposition, Screen
from kubeoptic.keyboard.keymap import KeyMap
from kubeoptic.messages import (
    FocusChanged,
    HelpToggled,
    QuitRequested,
    RefreshRequested,
    SaveLogs,
    ScreenChanged,
    SearchCancelled,
    SearchConfirmed,
    SearchNavigate,
    SearchStarted,
    SelectionConfirmed,
    ToggleFollow,
    ToggleTimestamps,
    ToggleWrap,
)
from kubeoptic.navigation.state import FORWARD_SCREEN, NavigationState

logger = logging.getLogger(__name__)

_LOG_SCREEN_MESSAGES: Final[dict[Action, type[Message]]] = {
    Action.FOLLOW_TOGGLE: ToggleFollow,
    Action.WRAP_TOGGLE: ToggleWrap,
    Action.TIMESTAMP_TOGGLE: ToggleTimestamps,
    Action.SAVE: SaveLogs,
}

_MATCH_DIRECTIONS: Final[dict[Action, CycleDirection]] = {
    Action.SEARCH_NEXT_MATCH: CycleDirection.NEXT,
    Action.SEARCH_PREV_MATCH: CycleDirection.PREV,
}


@dataclass
class RouteResult:
    """Where an action went and the messages it produced, in emit order."""

    disposition: RouteDisposition
    action: Action | None = None
    messages: list[Message] = field(default_factory=list)

    @property
    def consumed_globally(self) -> bool:
        return self.disposition is RouteDisposition.GLOBAL

    @property
    def consumed_by_navigation(self) -> bool:
        return self.disposition is RouteDisposition.NAVIGATION

    @property
    def forward_to_focused(self) -> bool:
        return self.disposition is RouteDisposition.FORWARD


class EventRouter:
    """Routes actions against a ``NavigationState`` using a ``KeyMap``."""

    def __init__(self, state: NavigationState, keymap: KeyMap | None = None) -> None:
        self.state = state
        self.keymap = keymap or KeyMap()

    def route_key(self, key: str, character: str | None = None) -> RouteResult:
        """Resolve a physical key through the key map, then route it.

        Unbound keys come back with ``forward_to_focused`` set and no action.
        """
        action = self.keymap.resolve(
            key,
            character,
            screen=self.state.current,
            search_active=self.state.search_active,
        )
        return self.route(action)

    def route(self, action: Action | None) -> RouteResult:
        if action is None:
            return RouteResult(RouteDisposition.FORWARD)

        result = self._route_global(action)
        if result is None and self.state.search_active:
            result = self._route_search(action)
        if result is None:
            result = self._route_screen(action)
        if result is None:
            result = self._route_navigation(action)
        if result is None:
            result = RouteResult(RouteDisposition.FORWARD, action)

        logger.debug(
            "Routed %s -> %s (%d messages)",
            action.value,
            result.disposition.value,
            len(result.messages),
        )
        return result

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _route_global(self, action: Action) -> RouteResult | None:
        if action is Action.QUIT:
            return RouteResult(RouteDisposition.GLOBAL, action, [QuitRequested()])
        if action is Action.HELP:
            visible = self.state.toggle_help()
            return RouteResult(RouteDisposition.GLOBAL, action, [HelpToggled(visible)])
        return None

    def _route_search(self, action: Action) -> RouteResult:
        if action in (Action.SEARCH_CONFIRM, Action.CONFIRM):
            self.state.exit_search()
            return RouteResult(
                RouteDisposition.NAVIGATION,
                action,
                [SearchConfirmed(), FocusChanged(self.state.focused)],
            )
        if action in (Action.SEARCH_CANCEL, Action.BACK):
            self.state.exit_search()
            return RouteResult(
                RouteDisposition.NAVIGATION,
                action,
                [SearchCancelled(), FocusChanged(self.state.focused)],
            )
        # Character input belongs to the search input.
        return RouteResult(RouteDisposition.FORWARD, action)

    def _route_screen(self, action: Action) -> RouteResult | None:
        state = self.state
        if action is Action.CONFIRM:
            next_screen = FORWARD_SCREEN.get(state.current)
            if next_screen is None or state.focused is not state.canonical_panel:
                return None
            messages: list[Message] = [SelectionConfirmed(state.focused)]
            messages.extend(self._transition(next_screen))
            messages.append(RefreshRequested(next_screen))
            return RouteResult(RouteDisposition.NAVIGATION, action, messages)

        if action is Action.REFRESH:
            return RouteResult(
                RouteDisposition.NAVIGATION, action, [RefreshRequested(state.current)]
            )

        if state.current is not Screen.LOG:
            return None
        message_type = _LOG_SCREEN_MESSAGES.get(action)
        if message_type is not None:
            return RouteResult(RouteDisposition.NAVIGATION, action, [message_type()])
        direction = _MATCH_DIRECTIONS.get(action)
        if direction is not None:
            return RouteResult(
                RouteDisposition.NAVIGATION, action, [SearchNavigate(direction)]
            )
        return None

    def _route_navigation(self, action: Action) -> RouteResult | None:
        state = self.state
        messages: list[Message] = []
        if action in (Action.PANEL_NEXT, Action.PANEL_PREV):
            direction = (
                CycleDirection.NEXT if action is Action.PANEL_NEXT else CycleDirection.PREV
            )
            if state.cycle_panel(direction):
                messages.append(FocusChanged(state.focused))
        elif action is Action.BACK:
            source = state.current
            if state.navigate_back():
                messages.extend([ScreenChanged(source, state.current), FocusChanged(state.focused)])
        elif action is Action.SEARCH_ENTER:
            if state.enter_search():
                messages.extend([SearchStarted(), FocusChanged(state.focused)])
        else:
            return None
        return RouteResult(RouteDisposition.NAVIGATION, action, messages)

    def _transition(self, target: Screen) -> list[Message]:
        """Apply a screen transition and describe it as messages."""
        source = self.state.current
        if target is source or not self.state.request_transition(target):
            return []
        return [ScreenChanged(source, target), FocusChanged(self.state.focused)]


__all__ = [
    "EventRouter",
    "RouteResult",
]
