"""Heat accumulation, feedback penalties, and concentration.

This engine is shared by both caster kinds. Heat is clamped to its
ceiling, the feedback level is derived from how far heat sits above the
threshold, and the effect list is rebuilt from that level on every change.
Effects are never accumulated incrementally.

Concentration is a separate flag driven by the caller. A failed save is
reported but does not end concentration; call ``end_concentration`` when
the narrative calls for it.

Example:
    >>> state = create_heat_feedback_state(10, CasterKind.ARCANIST, feedback_threshold=6)
    >>> add_heat(state, 8).feedback.level
    50
"""

from __future__ import annotations

import math

from hollow_gear.core.config import get_settings
from hollow_gear.core.constants import (
    CONCENTRATION_BASE_DC,
    FEEDBACK_EXTREME_BAND,
    FEEDBACK_MINOR_BAND,
    FEEDBACK_MODERATE_BAND,
    FEEDBACK_SEVERE_BAND,
    MAX_FEEDBACK_LEVEL,
    MINOR_PENALTY,
    SEVERE_PENALTY,
    SPELL_FAILURE_PERCENT,
)
from hollow_gear.core.logging import get_logger
from hollow_gear.engine.dice import RollFunction, default_roll
from hollow_gear.engine.shared import feedback_threshold as threshold_for
from hollow_gear.engine.shared import heat_dissipation
from hollow_gear.models.casting import ConcentrationSaveResult
from hollow_gear.models.enums import CasterKind, ErrorCode, FeedbackEffectKind, RestKind
from hollow_gear.models.resources import create_resource_pool
from hollow_gear.models.results import ValidationIssue, ValidationResult
from hollow_gear.models.state import (
    ConcentrationEffect,
    ConcentrationState,
    FeedbackEffect,
    FeedbackState,
    HeatFeedbackState,
)


logger = get_logger(__name__)


# =============================================================================
# Construction
# =============================================================================


def create_heat_feedback_state(
    max_heat: int | None = None,
    caster_kind: CasterKind = CasterKind.ARCANIST,
    *,
    dissipation_rate: int | None = None,
    feedback_threshold: int | None = None,
) -> HeatFeedbackState:
    """Create a cold heat tracker for a new caster.

    Args:
        max_heat: Heat ceiling. Defaults to the configured value.
        caster_kind: Which caster owns the tracker.
        dissipation_rate: Heat shed per short rest. Defaults to the configured value.
        feedback_threshold: Heat above which feedback starts. Defaults to the
            configured ratio of ``max_heat``.

    Returns:
        A state with zero heat, no effects, and no concentration.
    """
    rules = get_settings().rules
    if max_heat is None:
        max_heat = rules.default_max_heat
    if dissipation_rate is None:
        dissipation_rate = rules.default_dissipation_rate
    if feedback_threshold is None:
        feedback_threshold = threshold_for(max_heat, rules.feedback_threshold_ratio)

    return HeatFeedbackState(
        heat_points=create_resource_pool(max_heat, current=0),
        dissipation_rate=dissipation_rate,
        feedback_threshold=feedback_threshold,
        feedback=FeedbackState(source=caster_kind),
        concentration=ConcentrationState(),
    )


# =============================================================================
# Feedback Derivation
# =============================================================================


def feedback_level(current: int, maximum: int, threshold: int) -> int:
    """Normalized 0-100 measure of heat above the threshold.

    Zero at or below the threshold. A threshold at or above the ceiling
    leaves no range to scale over, so such a tracker never reaches
    feedback.
    """
    span = maximum - threshold
    if current <= threshold or span <= 0:
        return 0
    ratio = max(0.0, min(1.0, (current - threshold) / span))
    return math.floor(ratio * MAX_FEEDBACK_LEVEL)


def feedback_effects(level: int, caster_kind: CasterKind) -> tuple[FeedbackEffect, ...]:
    """Build the effect list for a feedback level.

    Bands are cumulative. At the severe band the roll penalties are
    replaced with larger fixed values rather than stacked.
    """
    if level < FEEDBACK_MINOR_BAND:
        return ()

    source = caster_kind.feedback_label
    severe = level >= FEEDBACK_SEVERE_BAND
    penalty = SEVERE_PENALTY if severe else MINOR_PENALTY
    grade = "Severe" if severe else "Minor"

    effects = [
        FeedbackEffect(
            kind=FeedbackEffectKind.SPELL_ATTACK_PENALTY,
            severity=penalty,
            description=f"{grade} penalty to spell attacks from {source} feedback",
        ),
        FeedbackEffect(
            kind=FeedbackEffectKind.CONCENTRATION_PENALTY,
            severity=penalty,
            description=f"{grade} penalty to concentration saves from {source} feedback",
        ),
    ]

    if level >= FEEDBACK_MODERATE_BAND:
        effects.append(
            FeedbackEffect(
                kind=FeedbackEffectKind.SPELL_DC_PENALTY,
                severity=penalty,
                description=f"{grade} penalty to spell save DCs from {source} feedback",
            )
        )
        effects.append(
            FeedbackEffect(
                kind=FeedbackEffectKind.HEAT_GENERATION_INCREASE,
                severity=1,
                description=f"Spells generate additional {source} due to feedback",
            )
        )

    if severe:
        effects.append(
            FeedbackEffect(
                kind=FeedbackEffectKind.RESOURCE_COST_INCREASE,
                severity=1,
                description=f"Increased {caster_kind.resource_label} costs from severe feedback",
            )
        )

    if level >= FEEDBACK_EXTREME_BAND:
        effects.append(
            FeedbackEffect(
                kind=FeedbackEffectKind.SPELL_FAILURE_CHANCE,
                severity=SPELL_FAILURE_PERCENT,
                description=f"Chance for spells to fail due to extreme {source} feedback",
            )
        )
        effects.append(
            FeedbackEffect(
                kind=FeedbackEffectKind.CASTING_TIME_INCREASE,
                severity=1,
                description="Casting times increased due to extreme feedback",
            )
        )

    return tuple(effects)


def _recovery_time(current: int, threshold: int, rate: int) -> int:
    """Short rests needed before heat falls back to the threshold."""
    excess = current - threshold
    if excess <= 0:
        return 0
    return math.ceil(excess / max(1, rate))


def _with_heat(
    state: HeatFeedbackState,
    new_heat: int,
    caster_kind: CasterKind,
    recovery_time: int,
) -> HeatFeedbackState:
    level = feedback_level(new_heat, state.heat_points.maximum, state.feedback_threshold)
    return state.model_copy(
        update={
            "heat_points": state.heat_points.model_copy(update={"current": new_heat}),
            "feedback": FeedbackState(
                level=level,
                effects=feedback_effects(level, caster_kind),
                source=caster_kind,
                recovery_time=recovery_time,
            ),
        }
    )


def add_heat(
    state: HeatFeedbackState,
    amount: int,
    caster_kind: CasterKind | None = None,
) -> HeatFeedbackState:
    """Fold newly generated heat into the tracker.

    Heat is clamped to ``[0, maximum]`` and the feedback level and effect
    list are recomputed from scratch.

    Args:
        state: Current tracker.
        amount: Heat generated.
        caster_kind: Source of the heat; defaults to the tracker's source.

    Returns:
        The updated tracker.
    """
    kind = caster_kind or state.feedback.source
    new_heat = max(0, min(state.heat_points.maximum, state.heat_points.current + amount))
    recovery = _recovery_time(new_heat, state.feedback_threshold, state.dissipation_rate)
    return _with_heat(state, new_heat, kind, recovery)


# =============================================================================
# Rest
# =============================================================================


def apply_rest(state: HeatFeedbackState, kind: RestKind) -> HeatFeedbackState:
    """Dissipate heat for a rest.

    A short rest sheds the dissipation rate and counts down the recovery
    timer. A long rest clears heat, feedback, effects, and the timer. Both
    reset the concentration save counter.
    """
    removed = heat_dissipation(kind, state.heat_points.current, state.dissipation_rate)
    new_heat = state.heat_points.current - removed

    if kind == RestKind.LONG:
        recovery = 0
    else:
        recovery = max(0, state.feedback.recovery_time - 1)

    rested = _with_heat(state, new_heat, state.feedback.source, recovery)
    rested = rested.model_copy(
        update={
            "concentration": rested.concentration.model_copy(update={"saves_this_turn": 0}),
        }
    )

    logger.info(
        "Rest applied to heat",
        rest=kind.value,
        heat_before=state.heat_points.current,
        heat_after=new_heat,
        feedback_level=rested.feedback.level,
    )
    return rested


# =============================================================================
# Concentration
# =============================================================================


def start_concentration(
    state: HeatFeedbackState,
    effect: ConcentrationEffect,
) -> HeatFeedbackState:
    """Begin concentrating on ``effect``, replacing any previous one."""
    return state.model_copy(
        update={
            "concentration": ConcentrationState(
                is_concentrating=True,
                effect=effect,
                saves_this_turn=0,
            )
        }
    )


def end_concentration(state: HeatFeedbackState) -> HeatFeedbackState:
    """Stop concentrating."""
    return state.model_copy(update={"concentration": ConcentrationState()})


def concentration_save(
    state: HeatFeedbackState,
    damage_taken: int,
    ability_modifier: int,
    proficiency_bonus: int,
    roll: RollFunction | None = None,
) -> ConcentrationSaveResult:
    """Make a concentration save after taking damage.

    DC is the higher of 10 and half the damage. The natural roll is added
    to the ability modifier, proficiency bonus, and any active
    concentration penalty. The save counter advances whether or not the
    save succeeds; concentration itself is left untouched.

    Args:
        state: Current tracker.
        damage_taken: Damage that triggered the save.
        ability_modifier: Spellcasting ability modifier.
        proficiency_bonus: Proficiency bonus, if proficient in the save.
        roll: Natural d20 source. Defaults to the shared dice roller.

    Returns:
        The save outcome. A caster who is not concentrating succeeds
        trivially with DC 0 and roll 0, and the state is returned as is.
    """
    if not state.concentration.is_concentrating:
        return ConcentrationSaveResult(success=True, dc=0, roll=0, total=0, updated_state=state)

    dc = max(CONCENTRATION_BASE_DC, damage_taken // 2)
    natural = (roll or default_roll)()
    total = natural + ability_modifier + proficiency_bonus + concentration_penalty(state)
    success = total >= dc

    updated = state.model_copy(
        update={
            "concentration": state.concentration.model_copy(
                update={"saves_this_turn": state.concentration.saves_this_turn + 1}
            )
        }
    )

    logger.info(
        "Concentration save",
        dc=dc,
        roll=natural,
        total=total,
        success=success,
        effect=state.concentration.effect.name if state.concentration.effect else None,
    )
    return ConcentrationSaveResult(
        success=success,
        dc=dc,
        roll=natural,
        total=total,
        updated_state=updated,
    )


# =============================================================================
# Effect Queries
# =============================================================================


def _sum_effects(state: HeatFeedbackState, kind: FeedbackEffectKind) -> int:
    return sum(
        effect.severity
        for effect in state.feedback.effects
        if effect.kind == kind and effect.active
    )


def spell_attack_penalty(state: HeatFeedbackState) -> int:
    """Total spell attack penalty (zero or negative)."""
    return _sum_effects(state, FeedbackEffectKind.SPELL_ATTACK_PENALTY)


def spell_dc_penalty(state: HeatFeedbackState) -> int:
    """Total spell save DC penalty (zero or negative)."""
    return _sum_effects(state, FeedbackEffectKind.SPELL_DC_PENALTY)


def concentration_penalty(state: HeatFeedbackState) -> int:
    """Total concentration save penalty (zero or negative)."""
    return _sum_effects(state, FeedbackEffectKind.CONCENTRATION_PENALTY)


def resource_cost_increase(state: HeatFeedbackState) -> int:
    """Extra resource cost imposed by severe feedback."""
    return _sum_effects(state, FeedbackEffectKind.RESOURCE_COST_INCREASE)


def spell_failure_chance(state: HeatFeedbackState) -> int:
    """Percent chance that a spell fails."""
    return _sum_effects(state, FeedbackEffectKind.SPELL_FAILURE_CHANCE)


# =============================================================================
# Validation
# =============================================================================


def collect_heat_feedback_issues(
    state: HeatFeedbackState,
    context: str = "heat",
) -> list[ValidationIssue]:
    """Collect every invariant violation in a heat tracker."""
    issues: list[ValidationIssue] = []
    heat = state.heat_points

    if heat.current < 0:
        issues.append(
            ValidationIssue(
                field=f"{context}.heat_points.current",
                message="Current heat points must be a non-negative integer",
                code=ErrorCode.INVALID_CURRENT_HEAT,
            )
        )
    if heat.maximum < 0:
        issues.append(
            ValidationIssue(
                field=f"{context}.heat_points.maximum",
                message="Maximum heat points must be a non-negative integer",
                code=ErrorCode.INVALID_MAX_HEAT,
            )
        )
    if heat.current > heat.maximum:
        issues.append(
            ValidationIssue(
                field=f"{context}.heat_points.current",
                message="Current heat points cannot exceed maximum",
                code=ErrorCode.HEAT_EXCEEDS_MAX,
                context={"current": heat.current, "maximum": heat.maximum},
            )
        )
    if state.dissipation_rate < 0:
        issues.append(
            ValidationIssue(
                field=f"{context}.dissipation_rate",
                message="Dissipation rate must be a non-negative integer",
                code=ErrorCode.INVALID_DISSIPATION_RATE,
            )
        )
    if not 0 <= state.feedback_threshold <= max(0, heat.maximum):
        issues.append(
            ValidationIssue(
                field=f"{context}.feedback_threshold",
                message="Feedback threshold must lie between 0 and maximum heat",
                code=ErrorCode.INVALID_FEEDBACK_THRESHOLD,
            )
        )
    if not 0 <= state.feedback.level <= MAX_FEEDBACK_LEVEL:
        issues.append(
            ValidationIssue(
                field=f"{context}.feedback.level",
                message="Feedback level must be an integer between 0 and 100",
                code=ErrorCode.INVALID_FEEDBACK_LEVEL,
            )
        )
    if state.feedback.recovery_time < 0:
        issues.append(
            ValidationIssue(
                field=f"{context}.feedback.recovery_time",
                message="Recovery time must be a non-negative integer",
                code=ErrorCode.INVALID_RECOVERY_TIME,
            )
        )
    if state.concentration.saves_this_turn < 0:
        issues.append(
            ValidationIssue(
                field=f"{context}.concentration.saves_this_turn",
                message="Concentration saves this turn must be a non-negative integer",
                code=ErrorCode.INVALID_SAVE_COUNT,
            )
        )
    if state.concentration.is_concentrating != (state.concentration.effect is not None):
        issues.append(
            ValidationIssue(
                field=f"{context}.concentration.effect",
                message="A concentrated effect is required exactly while concentrating",
                code=ErrorCode.CONCENTRATION_EFFECT_MISMATCH,
            )
        )

    return issues


def validate_heat_feedback_state(state: HeatFeedbackState) -> ValidationResult[HeatFeedbackState]:
    """Validate a heat tracker, reporting every problem found."""
    return ValidationResult.from_issues(state, collect_heat_feedback_issues(state))


__all__ = [
    "create_heat_feedback_state",
    "feedback_level",
    "feedback_effects",
    "add_heat",
    "apply_rest",
    "start_concentration",
    "end_concentration",
    "concentration_save",
    "spell_attack_penalty",
    "spell_dc_penalty",
    "concentration_penalty",
    "resource_cost_increase",
    "spell_failure_chance",
    "collect_heat_feedback_issues",
    "validate_heat_feedback_state",
]
