"""Tests for configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from hollow_gear.core.config import (
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from hollow_gear.core.exceptions import ConfigurationError


class TestRulesSettings:
    """Tests for RulesSettings configuration."""

    def test_default_values(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default rules values."""
        monkeypatch.chdir(tmp_path)

        settings = RulesSettings()

        assert settings.default_max_heat == 10
        assert settings.default_dissipation_rate == 2
        assert settings.feedback_threshold_ratio == 0.6

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test rules read their own environment prefix."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOLLOW_GEAR_RULES_DEFAULT_MAX_HEAT", "15")
        monkeypatch.setenv("HOLLOW_GEAR_RULES_FEEDBACK_THRESHOLD_RATIO", "0.5")

        settings = RulesSettings()

        assert settings.default_max_heat == 15
        assert settings.feedback_threshold_ratio == 0.5

    def test_dissipation_cannot_exceed_max_heat(self) -> None:
        """Test that the dissipation rate must fit within the heat ceiling."""
        with pytest.raises(ConfigurationError) as exc_info:
            RulesSettings(default_max_heat=4, default_dissipation_rate=5)

        assert "default_dissipation_rate" in str(exc_info.value)

    def test_threshold_ratio_bounds(self) -> None:
        """Test that the threshold ratio must lie strictly between 0 and 1."""
        with pytest.raises(PydanticValidationError):
            RulesSettings(feedback_threshold_ratio=1.0)


class TestSettings:
    """Tests for main Settings configuration."""

    def test_default_settings(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test default settings initialization."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.app_name == "Hollow Gear Spellcasting Engine"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.log_json is False
        assert settings.rules.default_max_heat == 10

    def test_debug_mode(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        mock_env_vars: dict[str, str],
    ) -> None:
        """Test debug mode and nested rules from the environment."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.debug is True
        assert settings.log_level == "DEBUG"
        assert settings.rules.default_max_heat == 20

    def test_log_file_from_env(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test the log file path is read from the environment."""
        monkeypatch.setenv("HOLLOW_GEAR_LOG_FILE", str(tmp_path / "engine.log"))
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.log_file == str(tmp_path / "engine.log")


class TestGetSettings:
    """Tests for get_settings singleton function."""

    def test_returns_settings_instance(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that get_settings returns a Settings instance."""
        monkeypatch.chdir(tmp_path)

        settings = get_settings()

        assert isinstance(settings, Settings)

    def test_caching(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that settings are cached."""
        monkeypatch.chdir(tmp_path)

        assert get_settings() is get_settings()

    def test_cache_clear(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that cache can be cleared."""
        monkeypatch.chdir(tmp_path)

        settings1 = get_settings()
        clear_settings_cache()
        settings2 = get_settings()

        assert settings1 is not settings2

    def test_invalid_environment_wrapped(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test that load failures surface as ConfigurationError."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOLLOW_GEAR_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError):
            get_settings()
