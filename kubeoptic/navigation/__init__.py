"""Navigation state machine and event router."""

from kubeoptic.navigation.router import EventRouter, RouteResult
from kubeoptic.navigation.state import NavigationState, is_valid_transition

__all__ = [
    "EventRouter",
    "NavigationState",
    "RouteResult",
    "is_valid_transition",
]
