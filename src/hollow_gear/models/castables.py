"""Castable definitions: Arcanist formulae and Templar miracles.

These are catalog records. The engine receives a resolved castable as an
argument and never looks one up or modifies it.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from hollow_gear.core.constants import MAX_SPELL_LEVEL, MIN_SPELL_LEVEL
from hollow_gear.models.enums import ResonanceType, SpellSchool


SpellLevel = Annotated[
    int,
    Field(ge=MIN_SPELL_LEVEL, le=MAX_SPELL_LEVEL, description="Spell level (0-9)"),
]

NonNegative = Annotated[int, Field(ge=0)]


class SpellComponents(BaseModel):
    """Components required to cast.

    Attributes:
        verbal: Requires speech.
        somatic: Requires gestures.
        material: Requires a material component.
        material_component: Description of the material.
        material_cost: Cost of the material; costly materials cannot be
            replaced by a focus.
        material_consumed: Whether casting consumes the material.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    verbal: bool = False
    somatic: bool = False
    material: bool = False
    material_component: str | None = None
    material_cost: NonNegative = 0
    material_consumed: bool = False


class Castable(BaseModel):
    """Fields common to formulae and miracles.

    Attributes:
        id: Catalog identifier.
        name: Display name.
        level: Base spell level; casting higher scales cost and generation.
        school: School of magic.
        components: Casting components.
        concentration: Whether the effect is sustained by concentration.
        base_cost: Resource cost at base level.
        cost_scaling: Extra cost per level above base.
        base_generation: Heat or faith feedback generated at base level.
        generation_scaling: Extra generation per level above base.
        enhancement: Description of the overclocked/overchanneled effect.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    name: str
    level: SpellLevel
    school: SpellSchool = SpellSchool.EVOCATION
    components: SpellComponents = Field(default_factory=SpellComponents)
    concentration: bool = False
    base_cost: NonNegative
    cost_scaling: NonNegative = 1
    base_generation: NonNegative = 1
    generation_scaling: NonNegative = 1
    enhancement: str = ""


class AetherFormula(Castable):
    """An Arcanist spell, paid for in Aether Flux Points."""

    can_overclock: bool = True


class Miracle(Castable):
    """A Templar spell, paid for in Resonance Charges."""

    can_overchannel: bool = True
    resonance_type: ResonanceType = ResonanceType.DIVINE


__all__ = [
    "SpellLevel",
    "SpellComponents",
    "Castable",
    "AetherFormula",
    "Miracle",
]
