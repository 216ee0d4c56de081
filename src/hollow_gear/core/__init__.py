"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        HollowGearError: Base exception for all engine errors.
        ConfigurationError: Configuration-related errors.
        ValidationError: Malformed input data.
        StateValidationError: Malformed persisted state records.
        EngineError: Engine failures.
        DiceRollError: Dice rolling failures.

    Configuration:
        Settings: Main application settings class.
        RulesSettings: Defaults for new caster states.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_caster: Tag log entries with a caster.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from hollow_gear.core.config import (
    RulesSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from hollow_gear.core.exceptions import (
    ConfigurationError,
    DiceRollError,
    EngineError,
    HollowGearError,
    StateValidationError,
    ValidationError,
)
from hollow_gear.core.logging import (
    bind_caster,
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "HollowGearError",
    "ConfigurationError",
    "ValidationError",
    "StateValidationError",
    "EngineError",
    "DiceRollError",
    # Configuration
    "Settings",
    "RulesSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_caster",
    "bind_context",
    "clear_context",
]
