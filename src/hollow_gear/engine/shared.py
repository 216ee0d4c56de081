"""Spellcasting helpers shared by both caster engines and by callers.

Covers heat threshold and dissipation math, component affordability,
spell level naming, and multiclass slot aggregation.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict

from hollow_gear.core.constants import MAX_SPELL_LEVEL, MIN_SPELL_LEVEL
from hollow_gear.models.castables import Castable, SpellComponents
from hollow_gear.models.enums import RestKind
from hollow_gear.models.progression import get_spell_slots


# =============================================================================
# Heat Math
# =============================================================================


def feedback_threshold(max_heat: int, ratio: float) -> int:
    """Heat value above which feedback penalties start."""
    return math.floor(max_heat * ratio)


def is_in_feedback_range(current: int, threshold: int) -> bool:
    """Check whether heat has reached the feedback threshold."""
    return current >= threshold


def heat_dissipation(kind: RestKind, current: int, rate: int) -> int:
    """Amount of heat a rest removes.

    A long rest removes everything; a short rest removes up to ``rate``.
    """
    if kind == RestKind.LONG:
        return max(0, current)
    return max(0, min(current, rate))


# =============================================================================
# Components
# =============================================================================


class ComponentCheck(BaseModel):
    """Whether a caster can supply a castable's components."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    can_cast: bool
    missing: tuple[str, ...] = ()


def can_provide_components(
    castable: Castable,
    has_focus: bool,
    has_materials: bool,
    available_funds: int = 0,
) -> ComponentCheck:
    """Check material component affordability.

    Verbal and somatic availability depend on conditions the caller tracks
    (silence, bound hands) and are not judged here.

    Args:
        castable: The formula or miracle being cast.
        has_focus: Whether the caster holds a spellcasting focus.
        has_materials: Whether the caster carries the material component.
        available_funds: Money available for a costly component.

    Returns:
        The check result with a description of anything missing.
    """
    components = castable.components
    missing: list[str] = []

    if components.material:
        if components.material_cost > 0:
            # Costly materials cannot be replaced by a focus
            if not has_materials or available_funds < components.material_cost:
                label = components.material_component or "costly component"
                missing.append(f"Material component: {label}")
        elif not has_focus and not has_materials:
            missing.append("Material component or spellcasting focus")

    return ComponentCheck(can_cast=not missing, missing=tuple(missing))


def component_description(components: SpellComponents) -> str:
    """Short component notation, e.g. ``"V, S, M (ruby dust)"``."""
    parts: list[str] = []
    if components.verbal:
        parts.append("V")
    if components.somatic:
        parts.append("S")
    if components.material:
        if components.material_component:
            parts.append(f"M ({components.material_component})")
        else:
            parts.append("M")
    return ", ".join(parts)


# =============================================================================
# Spell Levels
# =============================================================================


def is_valid_spell_level(level: int) -> bool:
    """Check that a level is an integer from 0 to 9."""
    return isinstance(level, int) and not isinstance(level, bool) and (
        MIN_SPELL_LEVEL <= level <= MAX_SPELL_LEVEL
    )


def spell_level_name(level: int) -> str:
    """Display name for a spell level ("cantrip", "1st level", ...)."""
    if level == 0:
        return "cantrip"
    suffixes = {1: "st", 2: "nd", 3: "rd"}
    return f"{level}{suffixes.get(level, 'th')} level"


def full_caster_tier(caster_level: int) -> int:
    """Highest spell level a full caster of this level may cast.

    Rises every two levels from 1 at level 1 to 9 at level 17.
    """
    if caster_level < 1:
        return 0
    return min(MAX_SPELL_LEVEL, (caster_level + 1) // 2)


# =============================================================================
# Multiclassing
# =============================================================================


def multiclass_caster_level(arcanist_levels: int, templar_levels: int) -> int:
    """Combined caster level; both classes count as full casters."""
    return max(0, arcanist_levels) + max(0, templar_levels)


def multiclass_spell_slots(arcanist_levels: int, templar_levels: int) -> dict[int, int]:
    """Spell slots for an Arcanist/Templar multiclass character."""
    return get_spell_slots(multiclass_caster_level(arcanist_levels, templar_levels))


__all__ = [
    "feedback_threshold",
    "is_in_feedback_range",
    "heat_dissipation",
    "ComponentCheck",
    "can_provide_components",
    "component_description",
    "is_valid_spell_level",
    "spell_level_name",
    "full_caster_tier",
    "multiclass_caster_level",
    "multiclass_spell_slots",
]
