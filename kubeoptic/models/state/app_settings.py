"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from kubeoptic.constants.defaults import (
    EXPORT_PATH_DEFAULT,
    FOLLOW_DEFAULT,
    NAMESPACE_DEFAULT,
    SHOW_TIMESTAMPS_DEFAULT,
    THEME_DEFAULT,
    WRAP_LINES_DEFAULT,
)
from kubeoptic.constants.timeouts import STREAM_READ_TIMEOUT
from kubeoptic.keyboard.keymap import KeyMap


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Paths
    kubeconfig_path: str = ""
    export_path: str = EXPORT_PATH_DEFAULT

    # UI preferences
    theme: str = THEME_DEFAULT
    default_namespace: str = NAMESPACE_DEFAULT

    # Log viewer defaults
    follow: bool = FOLLOW_DEFAULT
    wrap: bool = WRAP_LINES_DEFAULT
    show_timestamps: bool = SHOW_TIMESTAMPS_DEFAULT
    stream_read_timeout: float = Field(default=STREAM_READ_TIMEOUT, gt=0)  # seconds

    keymap: KeyMap = Field(default_factory=KeyMap)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
