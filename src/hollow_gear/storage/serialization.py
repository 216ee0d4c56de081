"""Structural serialization for caster and heat/feedback state records.

States are dumped to JSON-compatible dicts and rebuilt with pydantic.
Loading is two-stage: a record whose shape is wrong (missing fields,
wrong types, unknown keys) raises ``StateValidationError``; a well-shaped
record that breaks a rule (heat over its ceiling, harmony out of range)
is returned as a failed ``ValidationResult`` so the caller can decide
whether to discard or repair it. Nothing is coerced back into range.

Example:
    >>> from hollow_gear.engine.arcanist import create_arcanist_state
    >>> payload = to_json(create_arcanist_state(caster_level=5, ability_modifier=3))
    >>> load_arcanist_state(payload).success
    True
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hollow_gear.core.exceptions import StateValidationError
from hollow_gear.core.logging import get_logger
from hollow_gear.engine.arcanist import validate_arcanist_state
from hollow_gear.engine.heat_feedback import validate_heat_feedback_state
from hollow_gear.engine.templar import validate_templar_state
from hollow_gear.models.results import ValidationResult
from hollow_gear.models.state import ArcanistState, HeatFeedbackState, TemplarState


logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

StatePayload = dict[str, Any] | str | bytes


# =============================================================================
# Dumping
# =============================================================================


def dump_state(record: BaseModel) -> dict[str, Any]:
    """Dump a record to a JSON-compatible dict."""
    return record.model_dump(mode="json")


def to_json(record: BaseModel, *, indent: int | None = None) -> str:
    """Dump a record to a JSON string."""
    return record.model_dump_json(indent=indent)


# =============================================================================
# Loading
# =============================================================================


def _build(model: type[ModelT], payload: StatePayload) -> ModelT:
    """Rebuild ``model`` from a dict or JSON text.

    Raises:
        StateValidationError: If the payload does not have the record's shape.
    """
    try:
        if isinstance(payload, (str, bytes)):
            return model.model_validate_json(payload)
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        issues = [
            {
                "loc": ".".join(str(part) for part in error["loc"]),
                "type": error["type"],
                "message": error["msg"],
            }
            for error in exc.errors()
        ]
        logger.warning(
            "Malformed state record",
            record_type=model.__name__,
            error_count=len(issues),
        )
        raise StateValidationError(
            f"Malformed {model.__name__} record",
            record_type=model.__name__,
            issues=issues,
        ) from exc


def _load(
    model: type[ModelT],
    payload: StatePayload,
    validate: Callable[[ModelT], ValidationResult[ModelT]],
) -> ValidationResult[ModelT]:
    result = validate(_build(model, payload))
    if not result.success:
        logger.info(
            "State record failed validation",
            record_type=model.__name__,
            codes=[code.value for code in result.codes],
        )
    return result


def load_arcanist_state(payload: StatePayload) -> ValidationResult[ArcanistState]:
    """Load and validate an Arcanist state.

    Args:
        payload: A dict from ``dump_state`` or JSON text from ``to_json``.

    Returns:
        The validated state, or every rule it breaks.

    Raises:
        StateValidationError: If the payload is malformed.
    """
    return _load(ArcanistState, payload, validate_arcanist_state)


def load_templar_state(payload: StatePayload) -> ValidationResult[TemplarState]:
    """Load and validate a Templar state."""
    return _load(TemplarState, payload, validate_templar_state)


def load_heat_feedback_state(payload: StatePayload) -> ValidationResult[HeatFeedbackState]:
    """Load and validate a standalone heat/feedback tracker."""
    return _load(HeatFeedbackState, payload, validate_heat_feedback_state)


__all__ = [
    "StatePayload",
    "dump_state",
    "to_json",
    "load_arcanist_state",
    "load_templar_state",
    "load_heat_feedback_state",
]
