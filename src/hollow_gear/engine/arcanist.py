"""Arcanist spellcasting: Aether Flux Points, Equilibrium Tiers, Overclocking.

Arcanists pay for formulae from an AFP pool and build heat with every
cast. Overclocking multiplies the heat of a cast by a factor that shrinks
as the caster gains levels and intelligence, so experienced Arcanists
overclock more efficiently.

Casting validates in a fixed order and reports only the first violated
rule. Nothing changes unless every check passes.

Example:
    >>> state = create_arcanist_state(caster_level=5, ability_modifier=3)
    >>> bolt = AetherFormula(id="arc-bolt", name="Arc Bolt", level=1, base_cost=1)
    >>> result = cast(state, bolt, effective_level=2)
    >>> result.cost, result.heat_generated
    (2, 2)
"""

from __future__ import annotations

import math

from hollow_gear.core.constants import (
    MAX_OVERCLOCK_USES,
    MAX_SPELL_LEVEL,
    OVERCLOCK_ABILITY_INTERVAL,
    OVERCLOCK_ABILITY_STEP,
    OVERCLOCK_BASE_MULTIPLIER,
    OVERCLOCK_LEVEL_INTERVAL,
    OVERCLOCK_LEVEL_STEP,
    OVERCLOCK_MIN_MULTIPLIER,
    OVERCLOCK_USES_INTERVAL,
)
from hollow_gear.core.logging import get_logger
from hollow_gear.engine import heat_feedback
from hollow_gear.engine.shared import full_caster_tier
from hollow_gear.models.castables import AetherFormula, Castable
from hollow_gear.models.casting import ArcanistCastResult
from hollow_gear.models.enums import Ability, CasterKind, ErrorCode, RestKind
from hollow_gear.models.resources import (
    create_resource_pool,
    has_at_least,
    restore,
    set_current,
    spend,
    validate_resource_pool,
)
from hollow_gear.models.results import ValidationIssue, ValidationResult
from hollow_gear.models.state import ArcanistState


logger = get_logger(__name__)

MAX_CASTER_LEVEL = 20


# =============================================================================
# Progression
# =============================================================================


def equilibrium_tier(caster_level: int) -> int:
    """Highest formula level an Arcanist of this level may cast."""
    return full_caster_tier(caster_level)


def max_overclock_uses(caster_level: int) -> int:
    """Overclocks per long rest: 1, plus one every 4 levels from level 8."""
    return min(MAX_OVERCLOCK_USES, max(1, caster_level // OVERCLOCK_USES_INTERVAL))


def overclock_multiplier(caster_level: int, ability_modifier: int) -> float:
    """Heat multiplier for overclocked casts.

    Starts at 2.0, drops 0.1 per 3 caster levels and 0.05 per 2 points of
    ability modifier, and never goes below 1.2. The modifier steps use
    floor division, so a negative modifier raises the multiplier above
    2.0 (level 1 at -5 gives 2.15). There is no upper cap.
    """
    multiplier = (
        OVERCLOCK_BASE_MULTIPLIER
        - OVERCLOCK_LEVEL_STEP * (caster_level // OVERCLOCK_LEVEL_INTERVAL)
        - OVERCLOCK_ABILITY_STEP * (ability_modifier // OVERCLOCK_ABILITY_INTERVAL)
    )
    return max(OVERCLOCK_MIN_MULTIPLIER, round(multiplier, 2))


# =============================================================================
# Cost and Heat
# =============================================================================


def _levels_above_base(castable: Castable, effective_level: int) -> int:
    return max(0, effective_level - castable.level)


def cost_for_level(formula: Castable, effective_level: int) -> int:
    """AFP cost of casting ``formula`` at ``effective_level``."""
    return formula.base_cost + formula.cost_scaling * _levels_above_base(formula, effective_level)


def heat_for_cast(
    formula: Castable,
    effective_level: int,
    overclocked: bool,
    multiplier: float,
) -> int:
    """Heat generated by a cast.

    A normal cast scales like cost; an overclocked cast multiplies that
    and rounds down.
    """
    heat = formula.base_generation + formula.generation_scaling * _levels_above_base(
        formula, effective_level
    )
    if overclocked:
        # round first so products like 20 * 1.15 do not floor to 22
        heat = math.floor(round(heat * multiplier, 6))
    return heat


# =============================================================================
# Casting
# =============================================================================


def _reject(code: ErrorCode, message: str, **context: int) -> ArcanistCastResult:
    logger.debug("Formula rejected", code=code.value, reason=message)
    return ArcanistCastResult(
        success=False,
        errors=(
            ValidationIssue(field="cast", message=message, code=code, context=context or None),
        ),
    )


def cast(
    state: ArcanistState,
    formula: AetherFormula,
    effective_level: int,
    overclocked: bool = False,
) -> ArcanistCastResult:
    """Cast an Aether formula.

    Checks run in this order and the first failure is returned:
    overclock permitted, overclock use available, level within tier, AFP
    sufficient, heat ceiling respected.

    Args:
        state: Caster state before the cast.
        formula: The formula to cast.
        effective_level: Level the formula is cast at.
        overclocked: Whether to overclock.

    Returns:
        On success, the cost and heat applied and the new state. On
        failure, a single coded error and no state.
    """
    if overclocked and not formula.can_overclock:
        return _reject(ErrorCode.CANNOT_OVERCLOCK, "This formula cannot be Overclocked")

    if overclocked and state.overclock_uses <= 0:
        return _reject(ErrorCode.NO_OVERCLOCK_USES, "No Overclocking uses remaining")

    if effective_level > state.equilibrium_tier:
        return _reject(
            ErrorCode.LEVEL_EXCEEDS_TIER,
            f"Spell level {effective_level} exceeds Equilibrium Tier {state.equilibrium_tier}",
            level=effective_level,
            tier=state.equilibrium_tier,
        )

    cost = cost_for_level(formula, effective_level)
    if not has_at_least(state.aether_flux, cost):
        return _reject(
            ErrorCode.INSUFFICIENT_RESOURCE,
            f"Insufficient AFP: need {cost}, have {state.aether_flux.current}",
            need=cost,
            have=state.aether_flux.current,
        )

    heat = heat_for_cast(formula, effective_level, overclocked, state.overclock_multiplier)
    heat_points = state.heat.heat_points
    total_heat = heat_points.current + heat
    if total_heat > heat_points.maximum:
        return _reject(
            ErrorCode.HEAT_CEILING_EXCEEDED,
            f"Would exceed maximum heat points ({total_heat}/{heat_points.maximum})",
            total=total_heat,
            maximum=heat_points.maximum,
        )

    updated = state.model_copy(
        update={
            "aether_flux": spend(state.aether_flux, cost),
            "heat": heat_feedback.add_heat(state.heat, heat, CasterKind.ARCANIST),
            "overclock_uses": state.overclock_uses - 1 if overclocked else state.overclock_uses,
        }
    )

    logger.debug(
        "Formula cast",
        formula=formula.id,
        level=effective_level,
        cost=cost,
        heat=heat,
        overclocked=overclocked,
    )
    return ArcanistCastResult(
        success=True,
        cost=cost,
        heat_generated=heat,
        overclocked=overclocked,
        updated_state=updated,
    )


# =============================================================================
# Rest
# =============================================================================


def restore_overclock_uses(state: ArcanistState) -> ArcanistState:
    """Reset overclock uses to their maximum."""
    return state.model_copy(update={"overclock_uses": state.max_overclock_uses})


def apply_rest(state: ArcanistState, kind: RestKind) -> ArcanistState:
    """Apply a rest to an Arcanist.

    Heat dissipates on every rest. A short rest recovers half the AFP
    maximum; a long rest refills AFP and restores overclock uses.
    """
    rested = state.model_copy(update={"heat": heat_feedback.apply_rest(state.heat, kind)})

    if kind == RestKind.LONG:
        rested = restore_overclock_uses(rested)
        pool = set_current(rested.aether_flux, rested.aether_flux.effective_maximum)
    else:
        pool = restore(rested.aether_flux, rested.aether_flux.maximum // 2)

    return rested.model_copy(update={"aether_flux": pool})


# =============================================================================
# Construction & Validation
# =============================================================================


def create_arcanist_state(
    caster_level: int,
    ability_modifier: int,
    *,
    spellcasting_ability: Ability = Ability.INT,
    max_heat: int | None = None,
    dissipation_rate: int | None = None,
) -> ArcanistState:
    """Build a rested Arcanist state from level and ability modifier.

    The AFP maximum is caster level plus ability modifier.
    """
    uses = max_overclock_uses(caster_level)
    return ArcanistState(
        caster_level=caster_level,
        spellcasting_ability=spellcasting_ability,
        aether_flux=create_resource_pool(max(0, caster_level + ability_modifier)),
        equilibrium_tier=equilibrium_tier(caster_level),
        overclock_uses=uses,
        max_overclock_uses=uses,
        overclock_multiplier=overclock_multiplier(caster_level, ability_modifier),
        heat=heat_feedback.create_heat_feedback_state(
            max_heat,
            CasterKind.ARCANIST,
            dissipation_rate=dissipation_rate,
        ),
    )


def collect_castable_issues(castable: Castable, context: str) -> list[ValidationIssue]:
    """Check cost and generation fields of a formula or miracle."""
    issues: list[ValidationIssue] = []
    checks = (
        ("base_cost", ErrorCode.INVALID_COST, "Base cost"),
        ("cost_scaling", ErrorCode.INVALID_COST_SCALING, "Cost scaling"),
        ("base_generation", ErrorCode.INVALID_GENERATION, "Base generation"),
        ("generation_scaling", ErrorCode.INVALID_GENERATION_SCALING, "Generation scaling"),
    )
    for field_name, code, label in checks:
        if getattr(castable, field_name) < 0:
            issues.append(
                ValidationIssue(
                    field=f"{context}.{field_name}",
                    message=f"{label} must be a non-negative integer",
                    code=code,
                )
            )
    if not 0 <= castable.level <= MAX_SPELL_LEVEL:
        issues.append(
            ValidationIssue(
                field=f"{context}.level",
                message="Spell level must be an integer between 0 and 9",
                code=ErrorCode.INVALID_SPELL_LEVEL,
            )
        )
    return issues


def validate_formula(formula: AetherFormula, context: str = "formula") -> ValidationResult[AetherFormula]:
    """Validate a formula built without model validation (e.g. ``model_construct``)."""
    return ValidationResult.from_issues(formula, collect_castable_issues(formula, context))


def validate_arcanist_state(state: ArcanistState) -> ValidationResult[ArcanistState]:
    """Validate an Arcanist state, reporting every problem found."""
    issues: list[ValidationIssue] = []

    if not 0 <= state.caster_level <= MAX_CASTER_LEVEL:
        issues.append(
            ValidationIssue(
                field="caster_level",
                message="Caster level must be an integer between 0 and 20",
                code=ErrorCode.INVALID_CASTER_LEVEL,
            )
        )

    issues.extend(validate_resource_pool(state.aether_flux, "aether_flux").errors)

    if not 0 <= state.equilibrium_tier <= MAX_SPELL_LEVEL:
        issues.append(
            ValidationIssue(
                field="equilibrium_tier",
                message="Equilibrium Tier must be an integer between 0 and 9",
                code=ErrorCode.INVALID_EQUILIBRIUM_TIER,
            )
        )

    if state.overclock_uses < 0:
        issues.append(
            ValidationIssue(
                field="overclock_uses",
                message="Overclock uses must be a non-negative integer",
                code=ErrorCode.INVALID_OVERCLOCK_USES,
            )
        )

    if state.max_overclock_uses < 0:
        issues.append(
            ValidationIssue(
                field="max_overclock_uses",
                message="Max overclock uses must be a non-negative integer",
                code=ErrorCode.INVALID_MAX_OVERCLOCK_USES,
            )
        )

    if state.overclock_uses > state.max_overclock_uses:
        issues.append(
            ValidationIssue(
                field="overclock_uses",
                message="Current overclock uses cannot exceed maximum",
                code=ErrorCode.OVERCLOCK_USES_EXCEEDS_MAX,
            )
        )

    if state.overclock_multiplier < 1.0:
        issues.append(
            ValidationIssue(
                field="overclock_multiplier",
                message="Overclock multiplier must be a number >= 1.0",
                code=ErrorCode.INVALID_OVERCLOCK_MULTIPLIER,
            )
        )

    issues.extend(heat_feedback.collect_heat_feedback_issues(state.heat))

    return ValidationResult.from_issues(state, issues)


__all__ = [
    "equilibrium_tier",
    "max_overclock_uses",
    "overclock_multiplier",
    "cost_for_level",
    "heat_for_cast",
    "cast",
    "restore_overclock_uses",
    "apply_rest",
    "create_arcanist_state",
    "collect_castable_issues",
    "validate_formula",
    "validate_arcanist_state",
]
