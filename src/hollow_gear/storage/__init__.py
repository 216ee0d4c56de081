"""Storage module for Hollow Gear state persistence.

Provides structural round-tripping for:
- Arcanist and Templar caster states
- Standalone heat/feedback trackers
"""

from hollow_gear.storage.serialization import (
    StatePayload,
    dump_state,
    load_arcanist_state,
    load_heat_feedback_state,
    load_templar_state,
    to_json,
)

__all__ = [
    "StatePayload",
    "dump_state",
    "to_json",
    "load_arcanist_state",
    "load_templar_state",
    "load_heat_feedback_state",
]
