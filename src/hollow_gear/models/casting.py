"""Result records for casts and concentration saves."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from hollow_gear.models.results import ValidationIssue
from hollow_gear.models.state import ArcanistState, HeatFeedbackState, TemplarState


class ArcanistCastResult(BaseModel):
    """Outcome of casting an Aether formula.

    On failure ``errors`` holds the first violated rule and every numeric
    field is zero; ``updated_state`` is only present on success.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    success: bool
    cost: int = 0
    heat_generated: int = 0
    overclocked: bool = False
    errors: tuple[ValidationIssue, ...] = ()
    updated_state: ArcanistState | None = None


class TemplarCastResult(BaseModel):
    """Outcome of casting a miracle.

    ``harmony_bonus`` is None unless the caller supplied recent cast history,
    in which case it is reported whether or not the cast succeeds.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    success: bool
    cost: int = 0
    faith_feedback_generated: int = 0
    heat_generated: int = 0
    overchanneled: bool = False
    harmony_bonus: int | None = None
    errors: tuple[ValidationIssue, ...] = ()
    updated_state: TemplarState | None = None


class ConcentrationSaveResult(BaseModel):
    """Outcome of a concentration save.

    Attributes:
        success: Whether concentration holds.
        dc: Save DC; 0 when the caster was not concentrating.
        roll: The natural d20, exposed for auditing; 0 when no save was made.
        total: Natural roll plus every modifier.
        updated_state: State with the save counter advanced.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    success: bool
    dc: int
    roll: int
    total: int
    updated_state: HeatFeedbackState


class FaithFeedbackPenalties(BaseModel):
    """Roll penalties imposed by a Templar's faith feedback."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    attack_penalty: int
    dc_penalty: int
    description: str


__all__ = [
    "ArcanistCastResult",
    "TemplarCastResult",
    "ConcentrationSaveResult",
    "FaithFeedbackPenalties",
]
