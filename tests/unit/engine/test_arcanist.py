"""Tests for the Arcanist (Overclocking) engine."""

from __future__ import annotations

import pytest

from hollow_gear.engine.arcanist import (
    apply_rest,
    cast,
    cost_for_level,
    create_arcanist_state,
    equilibrium_tier,
    heat_for_cast,
    max_overclock_uses,
    overclock_multiplier,
    restore_overclock_uses,
    validate_arcanist_state,
    validate_formula,
)
from hollow_gear.engine.heat_feedback import add_heat
from hollow_gear.models import (
    Ability,
    AetherFormula,
    ArcanistState,
    ErrorCode,
    ResourcePool,
    RestKind,
    create_resource_pool,
)


class TestProgression:
    """Tests for the Arcanist step functions."""

    @pytest.mark.parametrize(
        ("level", "tier"),
        [(1, 1), (2, 1), (3, 2), (5, 3), (9, 5), (17, 9), (20, 9)],
    )
    def test_equilibrium_tier(self, level: int, tier: int) -> None:
        """Test tier rises every two levels to 9."""
        assert equilibrium_tier(level) == tier

    @pytest.mark.parametrize(
        ("level", "uses"),
        [(1, 1), (7, 1), (8, 2), (12, 3), (16, 4), (20, 5)],
    )
    def test_max_overclock_uses(self, level: int, uses: int) -> None:
        """Test overclock uses start at 1 and grow every 4 levels."""
        assert max_overclock_uses(level) == uses

    @pytest.mark.parametrize(
        ("level", "modifier", "multiplier"),
        [(1, 0, 2.0), (3, 0, 1.9), (5, 3, 1.85), (5, 4, 1.8), (20, 5, 1.3)],
    )
    def test_overclock_multiplier(self, level: int, modifier: int, multiplier: float) -> None:
        """Test the multiplier shrinks with level and ability."""
        assert overclock_multiplier(level, modifier) == multiplier

    def test_multiplier_floor(self) -> None:
        """Test the multiplier never drops below 1.2."""
        assert overclock_multiplier(20, 10) == 1.2
        assert overclock_multiplier(100, 100) == 1.2

    def test_multiplier_monotonic(self) -> None:
        """Test the multiplier never increases with level or ability."""
        by_level = [overclock_multiplier(level, 3) for level in range(1, 21)]
        by_modifier = [overclock_multiplier(10, modifier) for modifier in range(0, 11)]
        assert by_level == sorted(by_level, reverse=True)
        assert by_modifier == sorted(by_modifier, reverse=True)

    def test_negative_modifier_raises_multiplier(self) -> None:
        """Test a negative modifier pushes the multiplier above the 2.0 base."""
        assert overclock_multiplier(1, -1) == 2.05
        assert overclock_multiplier(1, -5) == 2.15
        assert overclock_multiplier(3, -5) == 2.05


class TestCostAndHeat:
    """Tests for per-cast scaling."""

    def test_cost_scales_above_base(self, arc_bolt: AetherFormula) -> None:
        """Test cost rises per level above base."""
        assert cost_for_level(arc_bolt, 1) == 1
        assert cost_for_level(arc_bolt, 3) == 3

    def test_cost_never_below_base(self, arc_bolt: AetherFormula) -> None:
        """Test casting below base level does not discount."""
        assert cost_for_level(arc_bolt, 0) == 1

    def test_normal_heat(self, arc_bolt: AetherFormula) -> None:
        """Test heat scales like cost."""
        assert heat_for_cast(arc_bolt, 2, False, 1.8) == 2

    def test_overclocked_heat_floors(self, arc_bolt: AetherFormula) -> None:
        """Test overclocked heat is floored."""
        assert heat_for_cast(arc_bolt, 2, True, 1.8) == 3
        assert heat_for_cast(arc_bolt, 1, True, 1.2) == 1

    def test_overclocked_heat_exact_product(self) -> None:
        """Test products landing on an integer are not floored below it."""
        formula = AetherFormula(
            id="surge", name="Surge", level=0, base_cost=1, base_generation=20
        )
        assert heat_for_cast(formula, 0, True, 1.15) == 23


class TestCast:
    """Tests for casting and its ordered validation."""

    def test_normal_cast(self, arcanist_state: ArcanistState, arc_bolt: AetherFormula) -> None:
        """Test a level 2 cast costs 2 AFP and 2 heat."""
        result = cast(arcanist_state, arc_bolt, 2)

        assert result.success
        assert result.cost == 2
        assert result.heat_generated == 2
        assert result.overclocked is False
        assert result.errors == ()
        assert result.updated_state is not None
        assert result.updated_state.aether_flux == ResourcePool(current=6, maximum=8, temporary=0)
        assert result.updated_state.heat.heat_points.current == 2
        assert result.updated_state.overclock_uses == 1

    def test_overclocked_cast(self, arcanist_state: ArcanistState, arc_bolt: AetherFormula) -> None:
        """Test overclocking multiplies heat and uses a charge."""
        result = cast(arcanist_state, arc_bolt, 2, overclocked=True)

        assert result.success
        assert result.cost == 2
        assert result.heat_generated == 3
        assert result.overclocked is True
        assert result.updated_state is not None
        assert result.updated_state.overclock_uses == 0
        assert result.updated_state.heat.heat_points.current == 3

    def test_cannot_overclock(
        self,
        arcanist_state: ArcanistState,
        sealed_formula: AetherFormula,
    ) -> None:
        """Test formulae that forbid overclocking."""
        result = cast(arcanist_state, sealed_formula, 1, overclocked=True)

        assert not result.success
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.CANNOT_OVERCLOCK
        assert result.errors[0].message == "This formula cannot be Overclocked"

    def test_no_overclock_uses(self, arcanist_state: ArcanistState, arc_bolt: AetherFormula) -> None:
        """Test overclocking with no uses left."""
        spent = arcanist_state.model_copy(update={"overclock_uses": 0})

        result = cast(spent, arc_bolt, 1, overclocked=True)

        assert result.errors[0].code == ErrorCode.NO_OVERCLOCK_USES
        assert result.errors[0].message == "No Overclocking uses remaining"

    def test_level_exceeds_tier(self, arcanist_state: ArcanistState, arc_bolt: AetherFormula) -> None:
        """Test casting above the Equilibrium Tier."""
        result = cast(arcanist_state, arc_bolt, 4)

        assert result.errors[0].code == ErrorCode.LEVEL_EXCEEDS_TIER
        assert result.errors[0].message == "Spell level 4 exceeds Equilibrium Tier 3"

    def test_insufficient_afp(self, arcanist_state: ArcanistState, arc_bolt: AetherFormula) -> None:
        """Test casting without enough AFP."""
        poor = arcanist_state.model_copy(update={"aether_flux": create_resource_pool(8, current=1)})

        result = cast(poor, arc_bolt, 2)

        assert result.errors[0].code == ErrorCode.INSUFFICIENT_RESOURCE
        assert result.errors[0].message == "Insufficient AFP: need 2, have 1"

    def test_heat_ceiling(self, arcanist_state: ArcanistState, arc_bolt: AetherFormula) -> None:
        """Test casting that would overheat."""
        hot = arcanist_state.model_copy(update={"heat": add_heat(arcanist_state.heat, 9)})

        result = cast(hot, arc_bolt, 2)

        assert result.errors[0].code == ErrorCode.HEAT_CEILING_EXCEEDED
        assert result.errors[0].message == "Would exceed maximum heat points (11/10)"

    def test_heat_exactly_at_ceiling_allowed(
        self,
        arcanist_state: ArcanistState,
        arc_bolt: AetherFormula,
    ) -> None:
        """Test reaching the ceiling exactly is permitted."""
        warm = arcanist_state.model_copy(update={"heat": add_heat(arcanist_state.heat, 8)})

        result = cast(warm, arc_bolt, 2)

        assert result.success
        assert result.updated_state is not None
        assert result.updated_state.heat.heat_points.current == 10
        assert result.updated_state.heat.feedback.level == 100

    def test_first_failure_wins(self, arcanist_state: ArcanistState, sealed_formula: AetherFormula) -> None:
        """Test only the first violated rule is reported."""
        broken = arcanist_state.model_copy(
            update={
                "overclock_uses": 0,
                "aether_flux": create_resource_pool(8, current=0),
            }
        )

        result = cast(broken, sealed_formula, 9, overclocked=True)

        assert [issue.code for issue in result.errors] == [ErrorCode.CANNOT_OVERCLOCK]

    def test_failed_cast_leaves_state_unchanged(
        self,
        arcanist_state: ArcanistState,
        arc_bolt: AetherFormula,
    ) -> None:
        """Test failure reports zeros and no state."""
        before = arcanist_state.model_dump()

        result = cast(arcanist_state, arc_bolt, 5, overclocked=True)

        assert not result.success
        assert result.cost == 0
        assert result.heat_generated == 0
        assert result.overclocked is False
        assert result.updated_state is None
        assert arcanist_state.model_dump() == before


class TestRest:
    """Tests for Arcanist rests."""

    def test_restore_overclock_uses(self, arcanist_state: ArcanistState) -> None:
        """Test uses reset to maximum."""
        spent = arcanist_state.model_copy(update={"overclock_uses": 0})
        assert restore_overclock_uses(spent).overclock_uses == 1

    def test_short_rest(self, arcanist_state: ArcanistState) -> None:
        """Test short rest restores half AFP and dissipates heat."""
        tired = arcanist_state.model_copy(
            update={
                "aether_flux": create_resource_pool(8, current=1),
                "heat": add_heat(arcanist_state.heat, 8),
                "overclock_uses": 0,
            }
        )

        rested = apply_rest(tired, RestKind.SHORT)

        assert rested.aether_flux.current == 5
        assert rested.heat.heat_points.current == 6
        assert rested.heat.feedback.level == 0
        assert rested.overclock_uses == 0

    def test_long_rest(self, arcanist_state: ArcanistState) -> None:
        """Test long rest refills AFP, clears heat and restores overclocks."""
        tired = arcanist_state.model_copy(
            update={
                "aether_flux": create_resource_pool(8, current=0, temporary=2),
                "heat": add_heat(arcanist_state.heat, 10),
                "overclock_uses": 0,
            }
        )

        rested = apply_rest(tired, RestKind.LONG)

        assert rested.aether_flux.current == 10
        assert rested.heat.heat_points.current == 0
        assert rested.overclock_uses == 1


class TestCreateArcanistState:
    """Tests for state construction."""

    def test_level_five(self) -> None:
        """Test a level 5 Arcanist with +4 intelligence."""
        state = create_arcanist_state(caster_level=5, ability_modifier=4)

        assert state.spellcasting_ability == Ability.INT
        assert state.aether_flux == ResourcePool(current=9, maximum=9, temporary=0)
        assert state.equilibrium_tier == 3
        assert state.overclock_uses == 1
        assert state.max_overclock_uses == 1
        assert state.overclock_multiplier == 1.8
        assert state.heat.heat_points.maximum == 10
        assert validate_arcanist_state(state).success

    def test_pool_never_negative(self) -> None:
        """Test a large negative modifier empties the pool."""
        state = create_arcanist_state(caster_level=1, ability_modifier=-3)
        assert state.aether_flux.maximum == 0

    def test_custom_heat(self) -> None:
        """Test heat options are passed through."""
        state = create_arcanist_state(
            caster_level=3, ability_modifier=2, max_heat=15, dissipation_rate=3
        )
        assert state.heat.heat_points.maximum == 15
        assert state.heat.dissipation_rate == 3


class TestValidation:
    """Tests for Arcanist state and formula validation."""

    def test_valid_state(self, arcanist_state: ArcanistState) -> None:
        """Test the fixture state is valid."""
        result = validate_arcanist_state(arcanist_state)
        assert result.success
        assert result.data == arcanist_state

    def test_collects_all_issues(self, arcanist_state: ArcanistState) -> None:
        """Test every violation is reported."""
        broken = arcanist_state.model_copy(
            update={
                "caster_level": 25,
                "aether_flux": ResourcePool(current=12, maximum=8),
                "equilibrium_tier": 10,
                "overclock_uses": 3,
                "overclock_multiplier": 0.5,
            }
        )

        result = validate_arcanist_state(broken)

        assert not result.success
        assert result.codes == [
            ErrorCode.INVALID_CASTER_LEVEL,
            ErrorCode.CURRENT_EXCEEDS_MAXIMUM,
            ErrorCode.INVALID_EQUILIBRIUM_TIER,
            ErrorCode.OVERCLOCK_USES_EXCEEDS_MAX,
            ErrorCode.INVALID_OVERCLOCK_MULTIPLIER,
        ]

    def test_negative_uses(self, arcanist_state: ArcanistState) -> None:
        """Test negative use counters."""
        result = validate_arcanist_state(
            arcanist_state.model_copy(update={"overclock_uses": -1, "max_overclock_uses": -2})
        )
        assert ErrorCode.INVALID_OVERCLOCK_USES in result.codes
        assert ErrorCode.INVALID_MAX_OVERCLOCK_USES in result.codes

    def test_nested_heat_issues(self, arcanist_state: ArcanistState) -> None:
        """Test heat tracker problems surface on the caster."""
        heat = arcanist_state.heat.model_copy(update={"dissipation_rate": -1})
        result = validate_arcanist_state(arcanist_state.model_copy(update={"heat": heat}))
        assert result.codes == [ErrorCode.INVALID_DISSIPATION_RATE]
        assert result.errors[0].field == "heat.dissipation_rate"

    def test_valid_formula(self, arc_bolt: AetherFormula) -> None:
        """Test catalog formula passes."""
        assert validate_formula(arc_bolt).success

    def test_unvalidated_formula(self) -> None:
        """Test a formula built without validation is checked."""
        formula = AetherFormula.model_construct(
            id="bad",
            name="Bad",
            level=12,
            base_cost=-1,
            cost_scaling=1,
            base_generation=-2,
            generation_scaling=1,
        )

        result = validate_formula(formula, "catalog.bad")

        assert result.codes == [
            ErrorCode.INVALID_COST,
            ErrorCode.INVALID_GENERATION,
            ErrorCode.INVALID_SPELL_LEVEL,
        ]
        assert result.errors[0].field == "catalog.bad.base_cost"
