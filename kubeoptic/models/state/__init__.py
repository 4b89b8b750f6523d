"""Persistent application settings."""

from kubeoptic.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from kubeoptic.models.state.config_manager import CONFIG_ENV_VAR, ConfigManager

__all__ = [
    "CONFIG_ENV_VAR",
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
