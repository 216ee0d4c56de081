"""The natural d20 behind concentration saves.

Rolls go through the d20 library. The engine never calls this module
directly from its pure logic: it receives a roll function, and
``DiceRoller.natural_d20`` is the default one.
"""

from __future__ import annotations

import random
from typing import Callable

import d20

from hollow_gear.core.exceptions import DiceRollError
from hollow_gear.core.logging import get_logger


logger = get_logger(__name__)

RollFunction = Callable[[], int]
"""Zero-argument callable returning a natural d20 result (1-20)."""

NATURAL_D20 = "1d20"


class DiceRoller:
    """Natural d20 rolls backed by the d20 library.

    Example:
        >>> roller = DiceRoller(seed=42)
        >>> 1 <= roller.natural_d20() <= 20
        True
    """

    def __init__(self, *, seed: int | None = None) -> None:
        """Initialize the dice roller.

        Args:
            seed: Optional random seed for reproducible rolls.
        """
        self._seed = seed
        if seed is not None:
            random.seed(seed)
        logger.debug("DiceRoller initialized", seed=seed)

    def natural_d20(self) -> int:
        """Roll a single unmodified d20.

        Raises:
            DiceRollError: If the d20 library rejects the roll.
        """
        try:
            result = d20.roll(NATURAL_D20)
        except d20.RollError as exc:
            raise DiceRollError(
                f"Invalid dice expression: {exc}",
                expression=NATURAL_D20,
            ) from exc

        logger.debug("Natural d20 rolled", total=result.total)
        return result.total


_default_roller: DiceRoller | None = None


def default_roll() -> int:
    """Roll a natural d20 with the shared module-level roller."""
    global _default_roller  # noqa: PLW0603
    if _default_roller is None:
        _default_roller = DiceRoller()
    return _default_roller.natural_d20()


__all__ = [
    "RollFunction",
    "DiceRoller",
    "default_roll",
]
