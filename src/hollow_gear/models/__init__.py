"""Pydantic V2 records for the Hollow Gear spellcasting engine.

Submodules:
    enums: Enumeration types (Ability, CasterKind, RestKind, ErrorCode, etc.)
    resources: Resource pools and their pure operations.
    castables: Formula and miracle catalog records.
    state: Caster and heat/feedback state records.
    casting: Cast and concentration save results.
    results: Coded validation results.
    progression: Proficiency and spell slot tables.

Example:
    >>> from hollow_gear.models import AetherFormula, create_resource_pool
    >>> pool = create_resource_pool(8)
    >>> bolt = AetherFormula(id="arc-bolt", name="Arc Bolt", level=1, base_cost=1)
"""

from __future__ import annotations

# =============================================================================
# Enumerations
# =============================================================================
from hollow_gear.models.enums import (
    Ability,
    CasterKind,
    ErrorCode,
    FeedbackEffectKind,
    ResonanceType,
    RestKind,
    SpellSchool,
)

# =============================================================================
# Results
# =============================================================================
from hollow_gear.models.results import ValidationIssue, ValidationResult

# =============================================================================
# Resources
# =============================================================================
from hollow_gear.models.resources import (
    ResourcePool,
    create_resource_pool,
    effective_maximum,
    has_at_least,
    percent_remaining,
    restore,
    set_current,
    spend,
    validate_resource_pool,
)

# =============================================================================
# Castables
# =============================================================================
from hollow_gear.models.castables import (
    AetherFormula,
    Castable,
    Miracle,
    SpellComponents,
)

# =============================================================================
# State
# =============================================================================
from hollow_gear.models.state import (
    ArcanistState,
    ConcentrationEffect,
    ConcentrationState,
    FeedbackEffect,
    FeedbackState,
    HeatFeedbackState,
    TemplarState,
)
from hollow_gear.models.casting import (
    ArcanistCastResult,
    ConcentrationSaveResult,
    FaithFeedbackPenalties,
    TemplarCastResult,
)

# =============================================================================
# Progression
# =============================================================================
from hollow_gear.models.progression import get_proficiency_bonus, get_spell_slots


__all__ = [
    # Enums
    "Ability",
    "CasterKind",
    "ErrorCode",
    "FeedbackEffectKind",
    "ResonanceType",
    "RestKind",
    "SpellSchool",
    # Results
    "ValidationIssue",
    "ValidationResult",
    # Resources
    "ResourcePool",
    "create_resource_pool",
    "effective_maximum",
    "has_at_least",
    "percent_remaining",
    "restore",
    "set_current",
    "spend",
    "validate_resource_pool",
    # Castables
    "AetherFormula",
    "Castable",
    "Miracle",
    "SpellComponents",
    # State
    "ArcanistState",
    "ConcentrationEffect",
    "ConcentrationState",
    "FeedbackEffect",
    "FeedbackState",
    "HeatFeedbackState",
    "TemplarState",
    "ArcanistCastResult",
    "ConcentrationSaveResult",
    "FaithFeedbackPenalties",
    "TemplarCastResult",
    # Progression
    "get_proficiency_bonus",
    "get_spell_slots",
]
