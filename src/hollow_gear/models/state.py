"""State records for casters and their heat/feedback trackers.

Every record is a frozen value owned by the caller's character record.
Engines return new records; nothing here is ever mutated in place.

Example:
    >>> from hollow_gear.engine.arcanist import create_arcanist_state
    >>> state = create_arcanist_state(caster_level=5, ability_modifier=3)
    >>> state.equilibrium_tier
    3
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from hollow_gear.models.enums import Ability, CasterKind, FeedbackEffectKind
from hollow_gear.models.resources import ResourcePool


# =============================================================================
# Heat / Feedback
# =============================================================================


class FeedbackEffect(BaseModel):
    """A penalty derived from the current feedback level.

    Attributes:
        kind: Which roll or mechanic the effect touches.
        severity: Signed magnitude; negative for roll penalties, positive
            for increases and for the failure percentage.
        description: Display text.
        active: Whether the effect currently applies.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: FeedbackEffectKind
    severity: int
    description: str
    active: bool = True


class FeedbackState(BaseModel):
    """Derived feedback level and the effects it produces."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: int = 0
    effects: tuple[FeedbackEffect, ...] = ()
    source: CasterKind
    recovery_time: int = 0


class ConcentrationEffect(BaseModel):
    """Reference to the spell being sustained."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    name: str
    level: int
    duration: str = ""


class ConcentrationState(BaseModel):
    """Concentration flag, effect, and saves made this turn."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    is_concentrating: bool = False
    effect: ConcentrationEffect | None = None
    saves_this_turn: int = 0


class HeatFeedbackState(BaseModel):
    """Heat accumulation, derived feedback, and concentration for one caster.

    Attributes:
        heat_points: Heat tracker; ``maximum`` is the hard ceiling.
        dissipation_rate: Heat removed by a short rest.
        feedback_threshold: Heat above which feedback begins.
        feedback: Derived level and effects.
        concentration: Concentration sub-state.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    heat_points: ResourcePool
    dissipation_rate: int
    feedback_threshold: int
    feedback: FeedbackState
    concentration: ConcentrationState = Field(default_factory=ConcentrationState)


# =============================================================================
# Casters
# =============================================================================


class ArcanistState(BaseModel):
    """Spellcasting state of an overclocking (Arcanist) caster.

    Attributes:
        caster_level: Arcanist level.
        spellcasting_ability: Primary ability.
        aether_flux: Aether Flux Points pool.
        equilibrium_tier: Highest castable spell level.
        overclock_uses: Overclocks left before the next long rest.
        max_overclock_uses: Overclocks restored by a long rest.
        overclock_multiplier: Heat multiplier for overclocked casts.
        heat: Heat/feedback tracker; its maximum is the heat ceiling.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    caster_level: int
    spellcasting_ability: Ability = Ability.INT
    aether_flux: ResourcePool
    equilibrium_tier: int
    overclock_uses: int
    max_overclock_uses: int
    overclock_multiplier: float
    heat: HeatFeedbackState

    @property
    def kind(self) -> CasterKind:
        return CasterKind.ARCANIST


class TemplarState(BaseModel):
    """Spellcasting state of a harmonic (Templar) caster.

    Attributes:
        caster_level: Templar level.
        spellcasting_ability: Primary ability.
        resonance_charges: Resonance Charge pool.
        overchannel_uses: Overchannels left before the next long rest.
        max_overchannel_uses: Overchannels restored by a long rest.
        faith_feedback: Accumulated faith feedback.
        max_faith_feedback: Faith feedback ceiling.
        resonance_harmony: Running measure of thematic consistency.
        heat: Heat/feedback tracker fed by each miracle's heat.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    caster_level: int
    spellcasting_ability: Ability = Ability.WIS
    resonance_charges: ResourcePool
    overchannel_uses: int
    max_overchannel_uses: int
    faith_feedback: int = 0
    max_faith_feedback: int
    resonance_harmony: int = 0
    heat: HeatFeedbackState

    @property
    def kind(self) -> CasterKind:
        return CasterKind.TEMPLAR


__all__ = [
    "FeedbackEffect",
    "FeedbackState",
    "ConcentrationEffect",
    "ConcentrationState",
    "HeatFeedbackState",
    "ArcanistState",
    "TemplarState",
]
