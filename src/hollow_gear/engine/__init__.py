"""Spellcasting engines for Hollow Gear.

The Arcanist and Templar engines share operation names (``cast``,
``apply_rest``), so they are exposed as modules rather than flattened.

Submodules:
    dice: Dice rolling backed by the d20 library
    shared: Heat math, components, spell levels, multiclass slots
    heat_feedback: Heat accumulation, feedback effects, concentration
    arcanist: AFP, Equilibrium Tiers, Overclocking
    templar: Resonance Charges, Faith Feedback, Harmony

Example:
    >>> from hollow_gear.engine import arcanist
    >>> state = arcanist.create_arcanist_state(caster_level=5, ability_modifier=4)
    >>> state.overclock_multiplier
    1.8
"""

from __future__ import annotations

from hollow_gear.engine import arcanist, heat_feedback, templar

# =============================================================================
# Dice Rolling
# =============================================================================
from hollow_gear.engine.dice import (
    DiceRoller,
    RollFunction,
    default_roll,
)

# =============================================================================
# Shared Utilities
# =============================================================================
from hollow_gear.engine.shared import (
    ComponentCheck,
    can_provide_components,
    component_description,
    feedback_threshold,
    full_caster_tier,
    heat_dissipation,
    is_in_feedback_range,
    is_valid_spell_level,
    multiclass_caster_level,
    multiclass_spell_slots,
    spell_level_name,
)


__all__ = [
    # Engines
    "arcanist",
    "templar",
    "heat_feedback",
    # Dice
    "DiceRoller",
    "RollFunction",
    "default_roll",
    # Shared
    "ComponentCheck",
    "can_provide_components",
    "component_description",
    "feedback_threshold",
    "full_caster_tier",
    "heat_dissipation",
    "is_in_feedback_range",
    "is_valid_spell_level",
    "multiclass_caster_level",
    "multiclass_spell_slots",
    "spell_level_name",
]
