"""Hollow Gear - spellcasting resource and heat-feedback engine.

Two caster archetypes spend limited pools of energy and build up heat as
a side effect:

- Arcanists burn Aether Flux Points and may Overclock a formula for a
  level-scaled heat multiplier.
- Templars spend Resonance Charges, accumulate faith feedback, and earn a
  harmony bonus for thematically consistent casting.

Every operation is a pure transform over frozen pydantic records. The
caller owns the state; engines only return new values.

Example:
    >>> from hollow_gear import AetherFormula, arcanist
    >>> state = arcanist.create_arcanist_state(caster_level=5, ability_modifier=3)
    >>> bolt = AetherFormula(id="arc-bolt", name="Arc Bolt", level=1, base_cost=1)
    >>> result = arcanist.cast(state, bolt, effective_level=2, overclocked=True)
    >>> result.heat_generated
    3

Modules:
    core: Configuration, logging, constants and base exceptions.
    models: Pydantic V2 records and resource pool operations.
    engine: Arcanist, Templar and heat/feedback engines, dice, shared helpers.
    storage: Structural serialization with validation on load.
"""

from __future__ import annotations

# Core
from hollow_gear.core.config import Settings, get_settings
from hollow_gear.core.exceptions import HollowGearError, StateValidationError
from hollow_gear.core.logging import configure_logging, get_logger

# Engines
from hollow_gear.engine import arcanist, heat_feedback, templar

# Records
from hollow_gear.models import (
    AetherFormula,
    ArcanistCastResult,
    ArcanistState,
    CasterKind,
    ErrorCode,
    HeatFeedbackState,
    Miracle,
    ResonanceType,
    ResourcePool,
    RestKind,
    TemplarCastResult,
    TemplarState,
    ValidationIssue,
    ValidationResult,
)

# Storage
from hollow_gear.storage import (
    dump_state,
    load_arcanist_state,
    load_heat_feedback_state,
    load_templar_state,
    to_json,
)


__version__ = "0.1.0"
__all__ = [
    # Version info
    "__version__",
    # Core
    "HollowGearError",
    "StateValidationError",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Engines
    "arcanist",
    "templar",
    "heat_feedback",
    # Records
    "AetherFormula",
    "ArcanistCastResult",
    "ArcanistState",
    "CasterKind",
    "ErrorCode",
    "HeatFeedbackState",
    "Miracle",
    "ResonanceType",
    "ResourcePool",
    "RestKind",
    "TemplarCastResult",
    "TemplarState",
    "ValidationIssue",
    "ValidationResult",
    # Storage
    "dump_state",
    "to_json",
    "load_arcanist_state",
    "load_templar_state",
    "load_heat_feedback_state",
]
