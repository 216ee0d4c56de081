"""Tests for the exception hierarchy."""

from __future__ import annotations

from hollow_gear.core.exceptions import (
    ConfigurationError,
    DiceRollError,
    EngineError,
    HollowGearError,
    StateValidationError,
    ValidationError,
)


class TestHollowGearError:
    """Tests for the base HollowGearError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = HollowGearError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = HollowGearError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(HollowGearError("Test", details={"x": 1}))
        assert "HollowGearError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestValidationExceptions:
    """Tests for configuration and validation exceptions."""

    def test_configuration_error_with_key(self) -> None:
        """Test ConfigurationError with config key."""
        exc = ConfigurationError("Bad value", config_key="default_max_heat")
        assert exc.details["config_key"] == "default_max_heat"

    def test_validation_error_with_field(self) -> None:
        """Test ValidationError with field context."""
        exc = ValidationError("Bad field", field_name="caster_level", invalid_value=-1)
        assert exc.details["field_name"] == "caster_level"
        assert exc.details["invalid_value"] == -1

    def test_state_validation_error_keeps_issues(self) -> None:
        """Test StateValidationError with record type and issue list."""
        issues = [{"loc": "heat", "type": "missing", "message": "Field required"}]
        exc = StateValidationError(
            "Malformed record",
            record_type="ArcanistState",
            issues=issues,
        )
        assert exc.details["record_type"] == "ArcanistState"
        assert exc.issues == issues
        assert isinstance(exc, ValidationError)
        assert isinstance(exc, HollowGearError)

    def test_state_validation_error_defaults(self) -> None:
        """Test StateValidationError without issues."""
        exc = StateValidationError("Malformed record")
        assert exc.issues == []
        assert "record_type" not in exc.details


class TestEngineExceptions:
    """Tests for engine exceptions."""

    def test_dice_roll_error(self) -> None:
        """Test DiceRollError with expression."""
        exc = DiceRollError("Invalid dice", expression="1d0+5")
        assert exc.details["expression"] == "1d0+5"

    def test_engine_inheritance(self) -> None:
        """Test engine exception inheritance."""
        exc = DiceRollError("Error")
        assert isinstance(exc, EngineError)
        assert isinstance(exc, HollowGearError)
        assert isinstance(exc, Exception)
