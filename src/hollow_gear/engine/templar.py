"""Templar spellcasting: Resonance Charges, Faith Feedback, Harmony.

Templars spend Resonance Charges on miracles. Each miracle generates faith
feedback (doubled when overchanneled) and a smaller amount of heat. A
running harmony score rewards casting the same resonance type repeatedly
and grows when the recent history is varied.

Example:
    >>> state = create_templar_state(caster_level=5, wisdom_modifier=3)
    >>> ward = Miracle(id="ward", name="Ward of Brass", level=1, base_cost=1)
    >>> result = cast(state, ward, effective_level=1)
    >>> result.faith_feedback_generated, result.heat_generated
    (1, 1)
"""

from __future__ import annotations

from collections.abc import Sequence

from hollow_gear.core.constants import (
    FAITH_FEEDBACK_BANDS,
    FAITH_FEEDBACK_BASE,
    HARMONY_DIVERSITY_CAP,
    HARMONY_FAILURE_PENALTY,
    HARMONY_LEVEL_DIVISOR,
    HARMONY_SAME_TYPE_CAP,
    MAX_HARMONY,
    MAX_OVERCHANNEL_USES,
    MIN_TEMPLAR_HEAT,
    OVERCHANNEL_MULTIPLIER,
    OVERCHANNEL_USES_INTERVAL,
)
from hollow_gear.core.logging import get_logger
from hollow_gear.engine import heat_feedback
from hollow_gear.engine.arcanist import MAX_CASTER_LEVEL, collect_castable_issues
from hollow_gear.engine.arcanist import cost_for_level as _scaled_cost
from hollow_gear.engine.shared import full_caster_tier
from hollow_gear.models.castables import Castable, Miracle
from hollow_gear.models.casting import FaithFeedbackPenalties, TemplarCastResult
from hollow_gear.models.enums import Ability, CasterKind, ErrorCode, ResonanceType, RestKind
from hollow_gear.models.resources import (
    create_resource_pool,
    has_at_least,
    restore,
    set_current,
    spend,
    validate_resource_pool,
)
from hollow_gear.models.results import ValidationIssue, ValidationResult
from hollow_gear.models.state import TemplarState


logger = get_logger(__name__)


# =============================================================================
# Progression
# =============================================================================


def attunement_tier(caster_level: int) -> int:
    """Highest miracle level a Templar of this level may cast."""
    return full_caster_tier(caster_level)


def max_overchannel_uses(caster_level: int) -> int:
    """Overchannels per long rest: one per 3 levels, at least 1, at most 6."""
    return min(MAX_OVERCHANNEL_USES, max(1, caster_level // OVERCHANNEL_USES_INTERVAL))


def max_faith_feedback(caster_level: int, wisdom_modifier: int) -> int:
    return max(0, FAITH_FEEDBACK_BASE + caster_level + wisdom_modifier)


# =============================================================================
# Cost, Feedback and Heat
# =============================================================================


def cost_for_level(miracle: Castable, effective_level: int) -> int:
    """Resonance Charge cost of casting ``miracle`` at ``effective_level``."""
    return _scaled_cost(miracle, effective_level)


def faith_feedback_for_cast(miracle: Castable, effective_level: int, overchanneled: bool) -> int:
    """Faith feedback generated by a cast; exactly doubled when overchanneled."""
    feedback = miracle.base_generation + miracle.generation_scaling * max(
        0, effective_level - miracle.level
    )
    if overchanneled:
        feedback *= OVERCHANNEL_MULTIPLIER
    return feedback


def heat_for_feedback(faith_feedback: int) -> int:
    """Heat produced alongside faith feedback: half of it, never below 1."""
    return max(MIN_TEMPLAR_HEAT, faith_feedback // 2)


# =============================================================================
# Harmony
# =============================================================================


def harmony_bonus(
    harmony_level: int,
    cast_type: ResonanceType,
    recent_cast_types: Sequence[ResonanceType],
) -> int:
    """Bonus for thematic consistency.

    One point per recent cast of the same resonance type (at most 3), plus
    one point per 5 points of harmony.
    """
    same_type = sum(1 for recent in recent_cast_types if recent == cast_type)
    return min(HARMONY_SAME_TYPE_CAP, same_type) + harmony_level // HARMONY_LEVEL_DIVISOR


def update_harmony(
    harmony_level: int,
    cast_type: ResonanceType,
    recent_cast_types: Sequence[ResonanceType],
    succeeded: bool,
) -> int:
    """New harmony after a cast.

    A success gains one point per distinct other resonance type in the
    recent history (at most 2) up to 20. A failure loses 2, floored at 0.
    """
    if not succeeded:
        return max(0, harmony_level - HARMONY_FAILURE_PENALTY)

    others = {recent for recent in recent_cast_types if recent != cast_type}
    gain = min(HARMONY_DIVERSITY_CAP, len(others))
    return min(MAX_HARMONY, harmony_level + gain)


def apply_harmony_update(
    state: TemplarState,
    cast_type: ResonanceType,
    recent_cast_types: Sequence[ResonanceType],
    succeeded: bool,
) -> TemplarState:
    """Record a cast outcome against the state's harmony."""
    harmony = update_harmony(state.resonance_harmony, cast_type, recent_cast_types, succeeded)
    return state.model_copy(update={"resonance_harmony": harmony})


# =============================================================================
# Casting
# =============================================================================


def _reject(
    code: ErrorCode, message: str, bonus: int | None = None, **context: int
) -> TemplarCastResult:
    logger.debug("Miracle rejected", code=code.value, reason=message)
    return TemplarCastResult(
        success=False,
        harmony_bonus=bonus,
        errors=(
            ValidationIssue(field="cast", message=message, code=code, context=context or None),
        ),
    )


def cast(
    state: TemplarState,
    miracle: Miracle,
    effective_level: int,
    overchanneled: bool = False,
    recent_casts: Sequence[ResonanceType] | None = None,
) -> TemplarCastResult:
    """Cast a miracle.

    Checks run in this order and the first failure is returned:
    overchannel permitted, overchannel use available, level within
    attunement tier, charges sufficient, faith feedback ceiling respected.

    Args:
        state: Caster state before the cast.
        miracle: The miracle to cast.
        effective_level: Level the miracle is cast at.
        overchanneled: Whether to overchannel.
        recent_casts: Resonance types of recent casts, oldest first. When
            given, every result carries a harmony bonus and a successful
            cast updates harmony.

    Returns:
        On success, the cost, feedback and heat applied and the new state.
        On failure, a single coded error and no state.
    """
    bonus: int | None = None
    if recent_casts is not None:
        bonus = harmony_bonus(state.resonance_harmony, miracle.resonance_type, recent_casts)

    if overchanneled and not miracle.can_overchannel:
        return _reject(ErrorCode.CANNOT_OVERCHANNEL, "This miracle cannot be Overchanneled", bonus)

    if overchanneled and state.overchannel_uses <= 0:
        return _reject(ErrorCode.NO_OVERCHANNEL_USES, "No Overchannel uses remaining", bonus)

    tier = attunement_tier(state.caster_level)
    if effective_level > tier:
        return _reject(
            ErrorCode.LEVEL_EXCEEDS_TIER,
            f"Miracle level {effective_level} exceeds attunement tier {tier}",
            bonus,
            level=effective_level,
            tier=tier,
        )

    cost = cost_for_level(miracle, effective_level)
    if not has_at_least(state.resonance_charges, cost):
        return _reject(
            ErrorCode.INSUFFICIENT_RESOURCE,
            f"Insufficient RC: need {cost}, have {state.resonance_charges.current}",
            bonus,
            need=cost,
            have=state.resonance_charges.current,
        )

    feedback = faith_feedback_for_cast(miracle, effective_level, overchanneled)
    total_feedback = state.faith_feedback + feedback
    if total_feedback > state.max_faith_feedback:
        return _reject(
            ErrorCode.FAITH_FEEDBACK_CEILING_EXCEEDED,
            f"Would exceed maximum faith feedback ({total_feedback}/{state.max_faith_feedback})",
            bonus,
            total=total_feedback,
            maximum=state.max_faith_feedback,
        )

    heat = heat_for_feedback(feedback)
    updated = state.model_copy(
        update={
            "resonance_charges": spend(state.resonance_charges, cost),
            "faith_feedback": min(total_feedback, state.max_faith_feedback),
            "heat": heat_feedback.add_heat(state.heat, heat, CasterKind.TEMPLAR),
            "overchannel_uses": (
                state.overchannel_uses - 1 if overchanneled else state.overchannel_uses
            ),
        }
    )

    if recent_casts is not None:
        updated = apply_harmony_update(updated, miracle.resonance_type, recent_casts, True)

    logger.debug(
        "Miracle cast",
        miracle=miracle.id,
        level=effective_level,
        cost=cost,
        faith_feedback=feedback,
        heat=heat,
        overchanneled=overchanneled,
        harmony_bonus=bonus,
    )
    return TemplarCastResult(
        success=True,
        cost=cost,
        faith_feedback_generated=feedback,
        heat_generated=heat,
        overchanneled=overchanneled,
        harmony_bonus=bonus,
        updated_state=updated,
    )


# =============================================================================
# Faith Feedback
# =============================================================================


def faith_feedback_penalties(current: int, maximum: int) -> FaithFeedbackPenalties:
    """Attack and DC penalties for the current faith feedback.

    Bands start at 50%, 75% and 100% of the maximum. A maximum of 0 is
    saturated as soon as any feedback is present.
    """
    if maximum <= 0:
        ratio = 1.0 if current > 0 else 0.0
    else:
        ratio = current / maximum

    for threshold, penalty, description in FAITH_FEEDBACK_BANDS:
        if ratio >= threshold:
            return FaithFeedbackPenalties(
                attack_penalty=penalty,
                dc_penalty=penalty,
                description=description,
            )

    return FaithFeedbackPenalties(
        attack_penalty=0,
        dc_penalty=0,
        description="Faith feedback within acceptable limits",
    )


def reduce_faith_feedback(state: TemplarState, amount: int) -> TemplarState:
    """Lower faith feedback by ``amount``, floored at 0."""
    return state.model_copy(
        update={"faith_feedback": max(0, state.faith_feedback - max(0, amount))}
    )


# =============================================================================
# Rest
# =============================================================================


def restore_overchannel_uses(state: TemplarState) -> TemplarState:
    """Reset overchannel uses to their maximum."""
    return state.model_copy(update={"overchannel_uses": state.max_overchannel_uses})


def apply_rest(state: TemplarState, kind: RestKind) -> TemplarState:
    """Apply a rest to a Templar.

    Heat dissipates on every rest. A short rest sheds faith feedback equal
    to the heat dissipation rate and recovers half the charge maximum; a
    long rest clears faith feedback, refills charges and restores
    overchannel uses.
    """
    rested = state.model_copy(update={"heat": heat_feedback.apply_rest(state.heat, kind)})

    if kind == RestKind.LONG:
        rested = restore_overchannel_uses(rested)
        return rested.model_copy(
            update={
                "faith_feedback": 0,
                "resonance_charges": set_current(
                    rested.resonance_charges, rested.resonance_charges.effective_maximum
                ),
            }
        )

    rested = reduce_faith_feedback(rested, state.heat.dissipation_rate)
    return rested.model_copy(
        update={
            "resonance_charges": restore(
                rested.resonance_charges, rested.resonance_charges.maximum // 2
            ),
        }
    )


# =============================================================================
# Construction & Validation
# =============================================================================


def create_templar_state(
    caster_level: int,
    wisdom_modifier: int,
    *,
    spellcasting_ability: Ability = Ability.WIS,
    max_heat: int | None = None,
    dissipation_rate: int | None = None,
) -> TemplarState:
    """Build a rested Templar state from level and wisdom modifier."""
    uses = max_overchannel_uses(caster_level)
    return TemplarState(
        caster_level=caster_level,
        spellcasting_ability=spellcasting_ability,
        resonance_charges=create_resource_pool(max(0, caster_level + wisdom_modifier)),
        overchannel_uses=uses,
        max_overchannel_uses=uses,
        faith_feedback=0,
        max_faith_feedback=max_faith_feedback(caster_level, wisdom_modifier),
        resonance_harmony=0,
        heat=heat_feedback.create_heat_feedback_state(
            max_heat,
            CasterKind.TEMPLAR,
            dissipation_rate=dissipation_rate,
        ),
    )


def validate_miracle(miracle: Miracle, context: str = "miracle") -> ValidationResult[Miracle]:
    """Validate a miracle built without model validation."""
    return ValidationResult.from_issues(miracle, collect_castable_issues(miracle, context))


def validate_templar_state(state: TemplarState) -> ValidationResult[TemplarState]:
    """Validate a Templar state, reporting every problem found."""
    issues: list[ValidationIssue] = []

    if not 0 <= state.caster_level <= MAX_CASTER_LEVEL:
        issues.append(
            ValidationIssue(
                field="caster_level",
                message="Caster level must be an integer between 0 and 20",
                code=ErrorCode.INVALID_CASTER_LEVEL,
            )
        )

    issues.extend(validate_resource_pool(state.resonance_charges, "resonance_charges").errors)

    if state.overchannel_uses < 0:
        issues.append(
            ValidationIssue(
                field="overchannel_uses",
                message="Overchannel uses must be a non-negative integer",
                code=ErrorCode.INVALID_OVERCHANNEL_USES,
            )
        )

    if state.max_overchannel_uses < 0:
        issues.append(
            ValidationIssue(
                field="max_overchannel_uses",
                message="Max overchannel uses must be a non-negative integer",
                code=ErrorCode.INVALID_MAX_OVERCHANNEL_USES,
            )
        )

    if state.overchannel_uses > state.max_overchannel_uses:
        issues.append(
            ValidationIssue(
                field="overchannel_uses",
                message="Current overchannel uses cannot exceed maximum",
                code=ErrorCode.OVERCHANNEL_USES_EXCEEDS_MAX,
            )
        )

    if state.faith_feedback < 0:
        issues.append(
            ValidationIssue(
                field="faith_feedback",
                message="Faith feedback must be a non-negative integer",
                code=ErrorCode.INVALID_FAITH_FEEDBACK,
            )
        )

    if state.max_faith_feedback < 0:
        issues.append(
            ValidationIssue(
                field="max_faith_feedback",
                message="Max faith feedback must be a non-negative integer",
                code=ErrorCode.INVALID_MAX_FAITH_FEEDBACK,
            )
        )

    if state.faith_feedback > state.max_faith_feedback:
        issues.append(
            ValidationIssue(
                field="faith_feedback",
                message="Current faith feedback cannot exceed maximum",
                code=ErrorCode.FAITH_FEEDBACK_EXCEEDS_MAX,
                context={
                    "current": state.faith_feedback,
                    "maximum": state.max_faith_feedback,
                },
            )
        )

    if not 0 <= state.resonance_harmony <= MAX_HARMONY:
        issues.append(
            ValidationIssue(
                field="resonance_harmony",
                message="Resonance harmony must be an integer between 0 and 20",
                code=ErrorCode.INVALID_RESONANCE_HARMONY,
            )
        )

    issues.extend(heat_feedback.collect_heat_feedback_issues(state.heat))

    return ValidationResult.from_issues(state, issues)


__all__ = [
    "attunement_tier",
    "max_overchannel_uses",
    "max_faith_feedback",
    "cost_for_level",
    "faith_feedback_for_cast",
    "heat_for_feedback",
    "harmony_bonus",
    "update_harmony",
    "apply_harmony_update",
    "cast",
    "faith_feedback_penalties",
    "reduce_faith_feedback",
    "restore_overchannel_uses",
    "apply_rest",
    "create_templar_state",
    "validate_miracle",
    "validate_templar_state",
]
