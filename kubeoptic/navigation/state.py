"""Navigation state machine.

Tracks the current screen, the focused panel, whether search entry is active
and the screen history. ``NavigationState`` is the sole authority for
current/focused; widgets only mirror it.

Every operation is total: requests that make no sense in the current state
are rejected by returning ``False`` (or doing nothing) rather than raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final

from kubeoptic.constants.enums import CycleDirection, Panel, Screen
from kubeoptic.constants.values import BREADCRUMB_LABELS, BREADCRUMB_SEPARATOR

logger = logging.getLogger(__name__)

# ============================================================================
# Static tables
# ============================================================================

TRANSITIONS: Final[frozenset[tuple[Screen, Screen]]] = frozenset(
    {
        (Screen.CONTEXT, Screen.NAMESPACE),
        (Screen.NAMESPACE, Screen.WORKLOAD),
        (Screen.WORKLOAD, Screen.LOG),
        (Screen.LOG, Screen.WORKLOAD),
        (Screen.WORKLOAD, Screen.NAMESPACE),
        (Screen.NAMESPACE, Screen.CONTEXT),
    }
)

CANONICAL_PANEL: Final[dict[Screen, Panel]] = {
    Screen.CONTEXT: Panel.CONTEXT,
    Screen.NAMESPACE: Panel.NAMESPACE,
    Screen.WORKLOAD: Panel.WORKLOAD,
    Screen.LOG: Panel.LOG,
}

FORWARD_SCREEN: Final[dict[Screen, Screen]] = {
    Screen.CONTEXT: Screen.NAMESPACE,
    Screen.NAMESPACE: Screen.WORKLOAD,
    Screen.WORKLOAD: Screen.LOG,
}

BACK_SCREEN: Final[dict[Screen, Screen]] = {
    Screen.LOG: Screen.WORKLOAD,
    Screen.WORKLOAD: Screen.NAMESPACE,
    Screen.NAMESPACE: Screen.CONTEXT,
}

# Screens hosting a single panel are absent and never cycle.
PANEL_CYCLES: Final[dict[Screen, tuple[Panel, ...]]] = {
    Screen.NAMESPACE: (Panel.CONTEXT, Panel.NAMESPACE),
    Screen.WORKLOAD: (Panel.CONTEXT, Panel.NAMESPACE, Panel.WORKLOAD),
}

_SCREEN_ORDER: Final[tuple[Screen, ...]] = (
    Screen.CONTEXT,
    Screen.NAMESPACE,
    Screen.WORKLOAD,
    Screen.LOG,
)


def is_valid_transition(source: Screen, target: Screen) -> bool:
    """Return True when ``source -> target`` is in the transition table."""
    return (source, target) in TRANSITIONS


@dataclass
class NavigationState:
    """Mutable navigation session, changed only through its methods."""

    current: Screen = Screen.CONTEXT
    focused: Panel = Panel.CONTEXT
    previous: Screen | None = None
    search_active: bool = False
    help_visible: bool = False
    history: list[Screen] = field(default_factory=lambda: [Screen.CONTEXT])

    # ------------------------------------------------------------------
    # Screen transitions
    # ------------------------------------------------------------------

    def request_transition(self, target: Screen) -> bool:
        """Move to ``target`` if the transition table allows it.

        Moving to the current screen succeeds without changing anything.
        """
        if target is self.current:
            return True
        if not is_valid_transition(self.current, target):
            logger.debug("Rejected transition %s -> %s", self.current.value, target.value)
            return False

        logger.debug("Transition %s -> %s", self.current.value, target.value)
        self.previous = self.current
        self.current = target
        self.history.append(target)
        self.focused = CANONICAL_PANEL[target]
        self.search_active = False
        return True

    def navigate_forward(self) -> bool:
        target = FORWARD_SCREEN.get(self.current)
        if target is None:
            return False
        return self.request_transition(target)

    def navigate_back(self) -> bool:
        """Go one level up the hierarchy; False on the Context screen."""
        target = BACK_SCREEN.get(self.current)
        if target is None:
            return False
        return self.request_transition(target)

    def can_navigate_forward(self) -> bool:
        return self.current in FORWARD_SCREEN

    def can_navigate_back(self) -> bool:
        return self.current in BACK_SCREEN

    # ------------------------------------------------------------------
    # Focus
    # ------------------------------------------------------------------

    def cycle_panel(self, direction: CycleDirection = CycleDirection.NEXT) -> bool:
        """Move focus to the next/previous panel of the current screen.

        Returns True when focus moved. Screens with a single panel ignore the
        request. A focused panel outside the cycle (e.g. Search) is treated as
        the screen's canonical panel.
        """
        cycle = PANEL_CYCLES.get(self.current)
        if not cycle:
            return False
        anchor = self.focused if self.focused in cycle else CANONICAL_PANEL[self.current]
        position = cycle.index(anchor)
        target = cycle[(position + direction.value) % len(cycle)]
        if target is self.focused:
            return False
        self.focused = target
        return True

    def next_panel(self) -> bool:
        return self.cycle_panel(CycleDirection.NEXT)

    def prev_panel(self) -> bool:
        return self.cycle_panel(CycleDirection.PREV)

    @property
    def canonical_panel(self) -> Panel:
        return CANONICAL_PANEL[self.current]

    # ------------------------------------------------------------------
    # Search entry and help
    # ------------------------------------------------------------------

    def enter_search(self) -> bool:
        if self.search_active:
            return False
        self.search_active = True
        self.focused = Panel.SEARCH
        return True

    def exit_search(self) -> bool:
        """Leave search entry; focus returns to the canonical panel."""
        if not self.search_active:
            return False
        self.search_active = False
        self.focused = CANONICAL_PANEL[self.current]
        return True

    def toggle_help(self) -> bool:
        """Flip help visibility and return the new value."""
        self.help_visible = not self.help_visible
        return self.help_visible

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    @property
    def breadcrumb(self) -> str:
        """Path from the root screen to the current one, e.g. ``Contexts > Namespaces``."""
        depth = _SCREEN_ORDER.index(self.current) + 1
        return BREADCRUMB_SEPARATOR.join(BREADCRUMB_LABELS[:depth])

    @property
    def focus_component_name(self) -> str:
        return self.focused.value


__all__ = [
    "BACK_SCREEN",
    "CANONICAL_PANEL",
    "FORWARD_SCREEN",
    "PANEL_CYCLES",
    "TRANSITIONS",
    "NavigationState",
    "is_valid_transition",
]
