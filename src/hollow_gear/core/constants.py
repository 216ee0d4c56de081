"""Rules constants for the Hollow Gear spellcasting engine.

The per-level step functions of both caster engines are built from these
values. Tunable defaults for new states live in ``core.config`` instead.
"""

from __future__ import annotations

# =============================================================================
# Spell Levels
# =============================================================================

MIN_SPELL_LEVEL = 0
"""Cantrips are level 0."""

MAX_SPELL_LEVEL = 9
"""Highest castable spell level and the cap for every tier table."""

# =============================================================================
# Arcanist (Overclocking)
# =============================================================================

OVERCLOCK_BASE_MULTIPLIER = 2.0
"""Heat multiplier for an overclocked cast before level/ability reductions."""

OVERCLOCK_LEVEL_STEP = 0.1
"""Multiplier reduction per OVERCLOCK_LEVEL_INTERVAL caster levels."""

OVERCLOCK_LEVEL_INTERVAL = 3

OVERCLOCK_ABILITY_STEP = 0.05
"""Multiplier reduction per OVERCLOCK_ABILITY_INTERVAL points of modifier."""

OVERCLOCK_ABILITY_INTERVAL = 2

OVERCLOCK_MIN_MULTIPLIER = 1.2
"""Floor for the overclock multiplier."""

OVERCLOCK_USES_INTERVAL = 4
"""Caster levels per additional overclock use."""

MAX_OVERCLOCK_USES = 5

# =============================================================================
# Templar (Overchannel / Faith Feedback / Harmony)
# =============================================================================

OVERCHANNEL_MULTIPLIER = 2
"""Overchanneled miracles generate exactly double faith feedback."""

OVERCHANNEL_USES_INTERVAL = 3

MAX_OVERCHANNEL_USES = 6

FAITH_FEEDBACK_BASE = 10
"""Max faith feedback is this plus caster level plus wisdom modifier."""

MIN_TEMPLAR_HEAT = 1
"""Every successful miracle generates at least this much heat."""

MAX_HARMONY = 20

HARMONY_FAILURE_PENALTY = 2

HARMONY_SAME_TYPE_CAP = 3
"""Most bonus earned from repeating the same resonance type."""

HARMONY_LEVEL_DIVISOR = 5
"""Every this many harmony points add +1 to the harmony bonus."""

HARMONY_DIVERSITY_CAP = 2
"""Most harmony gained from one successful cast."""

# Faith feedback penalty bands as (ratio, attack/DC penalty, description)
FAITH_FEEDBACK_BANDS: tuple[tuple[float, int, str], ...] = (
    (1.0, -4, "Severe faith feedback: major penalties to all spellcasting"),
    (0.75, -2, "High faith feedback: penalties to spellcasting"),
    (0.5, -1, "Moderate faith feedback: minor penalties to spellcasting"),
)

# =============================================================================
# Heat / Feedback
# =============================================================================

MAX_FEEDBACK_LEVEL = 100

FEEDBACK_MINOR_BAND = 25
FEEDBACK_MODERATE_BAND = 50
FEEDBACK_SEVERE_BAND = 75
FEEDBACK_EXTREME_BAND = 90

MINOR_PENALTY = -1
SEVERE_PENALTY = -2

SPELL_FAILURE_PERCENT = 10
"""Percent chance of spell failure at extreme feedback."""

# =============================================================================
# Concentration
# =============================================================================

CONCENTRATION_BASE_DC = 10
"""Minimum concentration save DC (or half the damage, whichever is higher)."""


__all__ = [
    "MIN_SPELL_LEVEL",
    "MAX_SPELL_LEVEL",
    "OVERCLOCK_BASE_MULTIPLIER",
    "OVERCLOCK_LEVEL_STEP",
    "OVERCLOCK_LEVEL_INTERVAL",
    "OVERCLOCK_ABILITY_STEP",
    "OVERCLOCK_ABILITY_INTERVAL",
    "OVERCLOCK_MIN_MULTIPLIER",
    "OVERCLOCK_USES_INTERVAL",
    "MAX_OVERCLOCK_USES",
    "OVERCHANNEL_MULTIPLIER",
    "OVERCHANNEL_USES_INTERVAL",
    "MAX_OVERCHANNEL_USES",
    "FAITH_FEEDBACK_BASE",
    "MIN_TEMPLAR_HEAT",
    "MAX_HARMONY",
    "HARMONY_FAILURE_PENALTY",
    "HARMONY_SAME_TYPE_CAP",
    "HARMONY_LEVEL_DIVISOR",
    "HARMONY_DIVERSITY_CAP",
    "FAITH_FEEDBACK_BANDS",
    "MAX_FEEDBACK_LEVEL",
    "FEEDBACK_MINOR_BAND",
    "FEEDBACK_MODERATE_BAND",
    "FEEDBACK_SEVERE_BAND",
    "FEEDBACK_EXTREME_BAND",
    "MINOR_PENALTY",
    "SEVERE_PENALTY",
    "SPELL_FAILURE_PERCENT",
    "CONCENTRATION_BASE_DC",
]
