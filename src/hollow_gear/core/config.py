"""Configuration management for the Hollow Gear engine.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides.

Example:
    >>> from hollow_gear.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.rules.feedback_threshold_ratio
    0.6

Environment Variables:
    HOLLOW_GEAR_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    HOLLOW_GEAR_LOG_JSON: Emit JSON logs instead of console output
    HOLLOW_GEAR_RULES_DEFAULT_MAX_HEAT: Heat ceiling for new casters
    HOLLOW_GEAR_RULES_DEFAULT_DISSIPATION_RATE: Heat shed per short rest
    HOLLOW_GEAR_RULES_FEEDBACK_THRESHOLD_RATIO: Fraction of max heat where feedback starts
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hollow_gear.core.exceptions import ConfigurationError


class RulesSettings(BaseSettings):
    """Tunable defaults used when building fresh caster states.

    Attributes:
        default_max_heat: Heat ceiling for a newly created heat tracker.
        default_dissipation_rate: Heat removed by a short rest.
        feedback_threshold_ratio: Fraction of max heat above which
            feedback penalties begin.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOLLOW_GEAR_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_max_heat: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Heat ceiling for new casters",
    )
    default_dissipation_rate: int = Field(
        default=2,
        ge=0,
        le=100,
        description="Heat removed per short rest",
    )
    feedback_threshold_ratio: float = Field(
        default=0.6,
        gt=0,
        lt=1,
        description="Fraction of max heat where feedback begins",
    )

    @model_validator(mode="after")
    def validate_dissipation(self) -> "RulesSettings":
        """Ensure a short rest cannot shed more heat than the ceiling holds.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If the dissipation rate exceeds max heat.
        """
        if self.default_dissipation_rate > self.default_max_heat:
            raise ConfigurationError(
                f"default_dissipation_rate ({self.default_dissipation_rate}) must not "
                f"exceed default_max_heat ({self.default_max_heat})",
                config_key="default_dissipation_rate",
            )
        return self


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name.
        debug: Force DEBUG logging regardless of log_level.
        log_level: Application logging level.
        log_json: Emit structured JSON logs.
        log_file: Optional file that also receives log records.
        rules: Rules defaults for new caster states.
    """

    model_config = SettingsConfigDict(
        env_prefix="HOLLOW_GEAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="Hollow Gear Spellcasting Engine",
        description="Application name",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Emit JSON logs",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional file that also receives log records",
    )

    rules: RulesSettings = Field(default_factory=RulesSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "RulesSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
