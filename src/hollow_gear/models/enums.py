"""Enumeration types for the Hollow Gear spellcasting engine.

These enums are plain strings on the wire so state records serialize to
readable JSON and load back without any custom codec.
"""

from __future__ import annotations

from enum import StrEnum


class Ability(StrEnum):
    """The six core abilities."""

    STR = "strength"
    DEX = "dexterity"
    CON = "constitution"
    INT = "intelligence"
    WIS = "wisdom"
    CHA = "charisma"

    @property
    def abbreviation(self) -> str:
        """Get the three-letter abbreviation (e.g., 'INT')."""
        return self.name


class SpellSchool(StrEnum):
    """Schools of magic."""

    ABJURATION = "abjuration"
    CONJURATION = "conjuration"
    DIVINATION = "divination"
    ENCHANTMENT = "enchantment"
    EVOCATION = "evocation"
    ILLUSION = "illusion"
    NECROMANCY = "necromancy"
    TRANSMUTATION = "transmutation"


class CasterKind(StrEnum):
    """The two spellcasting archetypes.

    Arcanists burn Aether Flux Points and build heat; Templars spend
    Resonance Charges and build faith feedback.
    """

    ARCANIST = "arcanist"
    TEMPLAR = "templar"

    @property
    def resource_label(self) -> str:
        """Short name of the caster's spendable resource."""
        return "AFP" if self is CasterKind.ARCANIST else "RC"

    @property
    def feedback_label(self) -> str:
        """Name of the side effect that drives feedback for this caster."""
        return "heat" if self is CasterKind.ARCANIST else "faith"


class RestKind(StrEnum):
    """Types of rest."""

    SHORT = "short"
    LONG = "long"


class ResonanceType(StrEnum):
    """Thematic resonance of a Templar miracle, used for harmony."""

    DIVINE = "divine"
    HARMONIC = "harmonic"
    PROTECTIVE = "protective"
    RESTORATIVE = "restorative"
    RIGHTEOUS = "righteous"
    REVELATORY = "revelatory"


class FeedbackEffectKind(StrEnum):
    """Penalties produced by accumulated heat or faith feedback."""

    SPELL_ATTACK_PENALTY = "spell_attack_penalty"
    SPELL_DC_PENALTY = "spell_dc_penalty"
    CONCENTRATION_PENALTY = "concentration_penalty"
    HEAT_GENERATION_INCREASE = "heat_generation_increase"
    RESOURCE_COST_INCREASE = "resource_cost_increase"
    CASTING_TIME_INCREASE = "casting_time_increase"
    SPELL_FAILURE_CHANCE = "spell_failure_chance"


class ErrorCode(StrEnum):
    """Stable codes for cast failures and state validation issues."""

    # Cast failures, in the order casts check them
    CANNOT_OVERCLOCK = "CANNOT_OVERCLOCK"
    CANNOT_OVERCHANNEL = "CANNOT_OVERCHANNEL"
    NO_OVERCLOCK_USES = "NO_OVERCLOCK_USES"
    NO_OVERCHANNEL_USES = "NO_OVERCHANNEL_USES"
    LEVEL_EXCEEDS_TIER = "LEVEL_EXCEEDS_TIER"
    INSUFFICIENT_RESOURCE = "INSUFFICIENT_RESOURCE"
    HEAT_CEILING_EXCEEDED = "HEAT_CEILING_EXCEEDED"
    FAITH_FEEDBACK_CEILING_EXCEEDED = "FAITH_FEEDBACK_CEILING_EXCEEDED"

    # Resource pools
    INVALID_CURRENT = "INVALID_CURRENT"
    INVALID_MAXIMUM = "INVALID_MAXIMUM"
    CURRENT_EXCEEDS_MAXIMUM = "CURRENT_EXCEEDS_MAXIMUM"

    # Castables
    INVALID_SPELL_LEVEL = "INVALID_SPELL_LEVEL"
    INVALID_COST = "INVALID_COST"
    INVALID_COST_SCALING = "INVALID_COST_SCALING"
    INVALID_GENERATION = "INVALID_GENERATION"
    INVALID_GENERATION_SCALING = "INVALID_GENERATION_SCALING"

    # Caster states
    INVALID_CASTER_LEVEL = "INVALID_CASTER_LEVEL"
    INVALID_EQUILIBRIUM_TIER = "INVALID_EQUILIBRIUM_TIER"
    INVALID_OVERCLOCK_USES = "INVALID_OVERCLOCK_USES"
    INVALID_MAX_OVERCLOCK_USES = "INVALID_MAX_OVERCLOCK_USES"
    OVERCLOCK_USES_EXCEEDS_MAX = "OVERCLOCK_USES_EXCEEDS_MAX"
    INVALID_OVERCLOCK_MULTIPLIER = "INVALID_OVERCLOCK_MULTIPLIER"
    INVALID_OVERCHANNEL_USES = "INVALID_OVERCHANNEL_USES"
    INVALID_MAX_OVERCHANNEL_USES = "INVALID_MAX_OVERCHANNEL_USES"
    OVERCHANNEL_USES_EXCEEDS_MAX = "OVERCHANNEL_USES_EXCEEDS_MAX"
    INVALID_FAITH_FEEDBACK = "INVALID_FAITH_FEEDBACK"
    INVALID_MAX_FAITH_FEEDBACK = "INVALID_MAX_FAITH_FEEDBACK"
    FAITH_FEEDBACK_EXCEEDS_MAX = "FAITH_FEEDBACK_EXCEEDS_MAX"
    INVALID_RESONANCE_HARMONY = "INVALID_RESONANCE_HARMONY"

    # Heat / feedback
    INVALID_CURRENT_HEAT = "INVALID_CURRENT_HEAT"
    INVALID_MAX_HEAT = "INVALID_MAX_HEAT"
    HEAT_EXCEEDS_MAX = "HEAT_EXCEEDS_MAX"
    INVALID_DISSIPATION_RATE = "INVALID_DISSIPATION_RATE"
    INVALID_FEEDBACK_THRESHOLD = "INVALID_FEEDBACK_THRESHOLD"
    INVALID_FEEDBACK_LEVEL = "INVALID_FEEDBACK_LEVEL"
    INVALID_RECOVERY_TIME = "INVALID_RECOVERY_TIME"
    INVALID_SAVE_COUNT = "INVALID_SAVE_COUNT"
    CONCENTRATION_EFFECT_MISMATCH = "CONCENTRATION_EFFECT_MISMATCH"


__all__ = [
    "Ability",
    "SpellSchool",
    "CasterKind",
    "RestKind",
    "ResonanceType",
    "FeedbackEffectKind",
    "ErrorCode",
]
