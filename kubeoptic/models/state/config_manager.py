"""Persistent storage for application settings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from kubeoptic.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "KUBEOPTIC_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/kubeoptic/settings.json")


class ConfigManager:
    """Load and save ``AppSettings`` as JSON."""

    @staticmethod
    def config_path() -> Path:
        """Return the settings file location, honouring ``$KUBEOPTIC_CONFIG``."""
        override = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if override:
            return Path(override).expanduser()
        return DEFAULT_CONFIG_PATH.expanduser()

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings, returning defaults when no file exists yet.

        Raises:
            ConfigLoadError: The file exists but is unreadable or invalid.
        """
        target = path or cls.config_path()
        if not target.exists():
            logger.debug("No settings file at %s, using defaults", target)
            return AppSettings()
        try:
            raw = target.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigLoadError(f"Cannot read {target}: {exc}") from exc
        try:
            return AppSettings.model_validate_json(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {target}: {exc}") from exc

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings to disk and return the path written.

        Raises:
            ConfigSaveError: The file or its parent directory cannot be written.
        """
        target = path or cls.config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write {target}: {exc}") from exc
        logger.debug("Saved settings to %s", target)
        return target


__all__ = [
    "CONFIG_ENV_VAR",
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
