"""Level progression tables consumed by the caster engines.

Both Arcanists and Templars are full casters, so multiclass slots come
from the full caster table at the combined caster level.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# =============================================================================
# Proficiency Bonus
# =============================================================================

PROFICIENCY_BONUS: Mapping[int, int] = MappingProxyType(
    {level: 2 + (level - 1) // 4 for level in range(1, 21)}
)


def get_proficiency_bonus(level: int) -> int:
    """Get the proficiency bonus for a character level.

    Levels outside 1-20 are clamped to the table.
    """
    return PROFICIENCY_BONUS[max(1, min(20, level))]


# =============================================================================
# Spell Slots by Level (Full Casters)
# =============================================================================

FULL_CASTER_SLOTS: Mapping[int, Mapping[int, int]] = MappingProxyType({
    level: MappingProxyType(row)
    for level, row in {
        1:  {1: 2},
        2:  {1: 3},
        3:  {1: 4, 2: 2},
        4:  {1: 4, 2: 3},
        5:  {1: 4, 2: 3, 3: 2},
        6:  {1: 4, 2: 3, 3: 3},
        7:  {1: 4, 2: 3, 3: 3, 4: 1},
        8:  {1: 4, 2: 3, 3: 3, 4: 2},
        9:  {1: 4, 2: 3, 3: 3, 4: 3, 5: 1},
        10: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2},
        11: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1},
        12: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1},
        13: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1},
        14: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1},
        15: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1, 8: 1},
        16: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1, 8: 1},
        17: {1: 4, 2: 3, 3: 3, 4: 3, 5: 2, 6: 1, 7: 1, 8: 1, 9: 1},
        18: {1: 4, 2: 3, 3: 3, 4: 3, 5: 3, 6: 1, 7: 1, 8: 1, 9: 1},
        19: {1: 4, 2: 3, 3: 3, 4: 3, 5: 3, 6: 2, 7: 1, 8: 1, 9: 1},
        20: {1: 4, 2: 3, 3: 3, 4: 3, 5: 3, 6: 2, 7: 2, 8: 1, 9: 1},
    }.items()
})


def get_spell_slots(caster_level: int) -> dict[int, int]:
    """Get full caster spell slots as ``{spell_level: num_slots}``.

    Levels above 20 use the level 20 row; level 0 or below has no slots.
    """
    if caster_level < 1:
        return {}
    return dict(FULL_CASTER_SLOTS[min(20, caster_level)])


__all__ = [
    "PROFICIENCY_BONUS",
    "get_proficiency_bonus",
    "FULL_CASTER_SLOTS",
    "get_spell_slots",
]
