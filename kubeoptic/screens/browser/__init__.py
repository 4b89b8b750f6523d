"""Browser screen: resource hierarchy lists and the streaming log viewer."""

from kubeoptic.screens.browser.browser_screen import BrowserScreen
from kubeoptic.screens.browser.presenter import BrowserPresenter, SelectionMissingError

__all__ = [
    "BrowserPresenter",
    "BrowserScreen",
    "SelectionMissingError",
]
