"""Unit tests for AppSettings and ConfigManager."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from kubeoptic.constants.enums import Action
from kubeoptic.constants.limits import MAX_LOG_LINES
from kubeoptic.models.state import (
    CONFIG_ENV_VAR,
    AppSettings,
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
)


@pytest.mark.unit
@pytest.mark.fast
class TestAppSettings:
    """Test AppSettings defaults and validation."""

    def test_defaults(self) -> None:
        """Test the log viewer defaults."""
        settings = AppSettings()
        assert settings.follow is True
        assert settings.wrap is True
        assert settings.show_timestamps is False
        assert settings.stream_read_timeout > 0
        assert settings.keymap.global_keys["q"] is Action.QUIT

    def test_rejects_non_positive_timeout(self) -> None:
        """Test that the read timeout must be positive."""
        with pytest.raises(ValidationError):
            AppSettings(stream_read_timeout=0)

    def test_buffer_cap_is_not_configurable(self) -> None:
        """Test that the line cap stays a constant."""
        assert "max_log_lines" not in AppSettings.model_fields
        assert MAX_LOG_LINES == 10_000


@pytest.mark.unit
@pytest.mark.fast
class TestConfigManager:
    """Test ConfigManager load/save."""

    def test_config_path_env_override(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Test that $KUBEOPTIC_CONFIG wins."""
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "custom.json"))
        assert ConfigManager.config_path() == tmp_path / "custom.json"

    def test_default_config_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the per-user default location."""
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert ConfigManager.config_path().parts[-3:] == (".config", "kubeoptic", "settings.json")

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        """Test that a first run starts from defaults."""
        assert ConfigManager.load(tmp_path / "absent.json") == AppSettings()

    def test_save_then_load(self, tmp_path: Path) -> None:
        """Test that saved preferences come back."""
        path = tmp_path / "nested" / "settings.json"
        saved = AppSettings(follow=False, default_namespace="payments")
        assert ConfigManager.save(saved, path) == path
        loaded = ConfigManager.load(path)
        assert loaded.follow is False
        assert loaded.default_namespace == "payments"

    def test_partial_file_fills_defaults(self, tmp_path: Path) -> None:
        """Test that missing keys fall back to defaults."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"wrap": False}), encoding="utf-8")
        loaded = ConfigManager.load(path)
        assert loaded.wrap is False
        assert loaded.follow is True

    def test_invalid_file_raises(self, tmp_path: Path) -> None:
        """Test that malformed settings are reported."""
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path)

    def test_save_failure_raises(self, tmp_path: Path) -> None:
        """Test that an unwritable location is reported."""
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(ConfigSaveError):
            ConfigManager.save(AppSettings(), blocker / "settings.json")
