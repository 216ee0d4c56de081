"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Hollow Gear engine test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from hollow_gear.engine.arcanist import create_arcanist_state
from hollow_gear.engine.dice import DiceRoller, RollFunction
from hollow_gear.engine.heat_feedback import create_heat_feedback_state
from hollow_gear.engine.templar import create_templar_state
from hollow_gear.models import (
    AetherFormula,
    ArcanistState,
    CasterKind,
    HeatFeedbackState,
    Miracle,
    ResonanceType,
    TemplarState,
    create_resource_pool,
)


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from hollow_gear.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "HOLLOW_GEAR_DEBUG": "true",
        "HOLLOW_GEAR_LOG_LEVEL": "DEBUG",
        "HOLLOW_GEAR_RULES__DEFAULT_MAX_HEAT": "20",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Castable Fixtures
# =============================================================================


@pytest.fixture
def arc_bolt() -> AetherFormula:
    """A level 1 formula with unit cost and heat scaling."""
    return AetherFormula(
        id="arc-bolt",
        name="Arc Bolt",
        level=1,
        base_cost=1,
        cost_scaling=1,
        base_generation=1,
        generation_scaling=1,
        enhancement="Chains to a second target",
    )


@pytest.fixture
def sealed_formula() -> AetherFormula:
    """A formula that cannot be overclocked."""
    return AetherFormula(
        id="gear-lock",
        name="Gear Lock",
        level=1,
        base_cost=1,
        can_overclock=False,
    )


@pytest.fixture
def ward_miracle() -> Miracle:
    """A level 1 protective miracle with unit scaling."""
    return Miracle(
        id="brass-ward",
        name="Brass Ward",
        level=1,
        base_cost=1,
        cost_scaling=1,
        base_generation=1,
        generation_scaling=1,
        resonance_type=ResonanceType.PROTECTIVE,
    )


# =============================================================================
# State Fixtures
# =============================================================================


@pytest.fixture
def heat_state() -> HeatFeedbackState:
    """A cold heat tracker: ceiling 10, threshold 6, dissipation 2."""
    return create_heat_feedback_state(
        10,
        CasterKind.ARCANIST,
        dissipation_rate=2,
        feedback_threshold=6,
    )


@pytest.fixture
def arcanist_state(heat_state: HeatFeedbackState) -> ArcanistState:
    """A level 5 Arcanist with an 8 AFP pool and a 1.8 multiplier."""
    return ArcanistState(
        caster_level=5,
        aether_flux=create_resource_pool(8),
        equilibrium_tier=3,
        overclock_uses=1,
        max_overclock_uses=1,
        overclock_multiplier=1.8,
        heat=heat_state,
    )


@pytest.fixture
def templar_state() -> TemplarState:
    """A fresh level 5 Templar with a +3 wisdom modifier."""
    return create_templar_state(
        caster_level=5,
        wisdom_modifier=3,
        max_heat=10,
        dissipation_rate=2,
    )


@pytest.fixture
def fresh_arcanist() -> ArcanistState:
    """A fresh level 5 Arcanist built from the step functions."""
    return create_arcanist_state(caster_level=5, ability_modifier=4, max_heat=10)


# =============================================================================
# Dice Fixtures
# =============================================================================


@pytest.fixture
def dice_roller() -> DiceRoller:
    """Create a DiceRoller with a fixed seed for reproducible tests."""
    return DiceRoller(seed=42)


def fixed_roll(value: int) -> RollFunction:
    """Build a roll function that always returns ``value``."""

    def _roll() -> int:
        return value

    return _roll


@pytest.fixture
def roll_ten() -> RollFunction:
    """A roll function that always returns a natural 10."""
    return fixed_roll(10)


@pytest.fixture
def roll_twenty() -> RollFunction:
    """A roll function that always returns a natural 20."""
    return fixed_roll(20)


@pytest.fixture
def roll_one() -> RollFunction:
    """A roll function that always returns a natural 1."""
    return fixed_roll(1)
