"""Main application class for kubeoptic TUI."""

from __future__ import annotations

import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from kubeoptic.constants import APP_TITLE
from kubeoptic.controllers.base import BaseController
from kubeoptic.controllers.cluster import KubectlController
from kubeoptic.keyboard.app import APP_BINDINGS
from kubeoptic.models.state import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class KubeopticApp(App[None]):
    """Main TUI application for kubeoptic."""

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"
    BINDINGS: list[Binding] = APP_BINDINGS
    # Every printable key belongs to the event router.
    ENABLE_COMMAND_PALETTE = False

    # Type hint for settings attribute
    settings: AppSettings

    def __init__(
        self,
        kubeconfig: Path | None = None,
        context: str | None = None,
        controller: BaseController | None = None,
        settings_path: Path | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.kubeconfig = kubeconfig
        self.context = context
        self.settings_path = settings_path

        # Load settings on startup
        self._load_settings()
        self.controller = controller or self._build_controller()

    def _load_settings(self) -> None:
        """Load application settings from persistent storage."""
        try:
            self.settings = ConfigManager.load(self.settings_path)
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("%s; using default settings", exc)
            self.settings = AppSettings()

        # Apply CLI overrides if provided
        if self.kubeconfig is not None:
            self.settings.kubeconfig_path = str(self.kubeconfig)

        self._apply_theme()

    def _apply_theme(self) -> None:
        theme_name = str(self.settings.theme or "").strip()
        if theme_name in self.available_themes:
            self.theme = theme_name
        else:
            logger.warning("Unknown theme %r, keeping %s", theme_name, self.theme)
            self.settings.theme = self.theme

    def _build_controller(self) -> KubectlController:
        return KubectlController(
            context=self.context,
            kubeconfig=self.settings.kubeconfig_path or None,
        )

    def on_mount(self) -> None:
        """Called when app is mounted."""
        from kubeoptic.screens.browser import BrowserScreen

        self.push_screen(BrowserScreen(self.controller, self.settings))

    def on_unmount(self) -> None:
        """Save settings when app exits."""
        try:
            ConfigManager.save(self.settings, self.settings_path)
        except ConfigSaveError as e:
            logger.error("Failed to save settings: %s", e)


__all__ = [
    "KubeopticApp",
]
