"""Exception hierarchy for the Hollow Gear spellcasting engine.

Only programmer errors and infrastructure failures are raised. Domain
outcomes such as an unaffordable cast or an overheated caster are returned
as coded results by the engines and never surface here.

Example:
    >>> from hollow_gear.core.exceptions import DiceRollError
    >>> raise DiceRollError("Invalid dice expression", expression="1d")
"""

from __future__ import annotations

from typing import Any


class HollowGearError(Exception):
    """Base exception for all Hollow Gear engine errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(HollowGearError):
    """Raised when engine configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(HollowGearError):
    """Raised when input data cannot be interpreted at all.

    This covers type mismatches and missing fields, not rule violations.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


class StateValidationError(ValidationError):
    """Raised when a persisted state record has a malformed shape.

    The pydantic error list is kept so callers can show what was wrong.
    """

    def __init__(
        self,
        message: str,
        *,
        record_type: str | None = None,
        issues: list[dict[str, Any]] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize state validation error with record context.

        Args:
            message: Human-readable error description.
            record_type: Name of the record that failed to load.
            issues: Structured problems reported by the model layer.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if record_type:
            combined_details["record_type"] = record_type
        self.issues = issues or []
        super().__init__(message, details=combined_details)


# =============================================================================
# Engine Exceptions
# =============================================================================


class EngineError(HollowGearError):
    """Base exception for spellcasting engine failures."""


class DiceRollError(EngineError):
    """Raised when dice rolling operations fail.

    This typically occurs when parsing invalid dice notation or when
    the dice library is unavailable.
    """

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize dice roll error with expression context.

        Args:
            message: Human-readable error description.
            expression: The dice expression that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if expression:
            combined_details["expression"] = expression
        super().__init__(message, details=combined_details)


__all__ = [
    "HollowGearError",
    "ConfigurationError",
    "ValidationError",
    "StateValidationError",
    "EngineError",
    "DiceRollError",
]
