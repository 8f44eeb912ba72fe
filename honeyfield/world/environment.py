"""Environment — the global temperature process.

Updated first in each simulation tick so that bees, flowers and crops
react to the current day's temperature.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from numpy.random import Generator

TEMPERATURE_STEP = 0.25
LETHAL_COLD = 10.0
LETHAL_HEAT = 35.0
REGROWTH_BAND = (15.0, 30.0)


@dataclass
class Environment:
    """Global environmental state that changes each tick.

    Attributes:
        temperature: Current air temperature in degrees Celsius.
    """

    temperature: float = 25.0

    @property
    def is_lethal(self) -> bool:
        """Return True if today's temperature kills every bee."""
        return self.temperature < LETHAL_COLD or self.temperature > LETHAL_HEAT

    @property
    def in_regrowth_band(self) -> bool:
        """Return True if pollinated flowers can regrow nectar today."""
        lo, hi = REGROWTH_BAND
        return lo <= self.temperature <= hi

    def advance_temperature(self, rng: Generator) -> float:
        """Take one step of the unbounded temperature random walk.

        Args:
            rng: Seeded random generator.

        Returns:
            The new temperature.
        """
        self.temperature += float(rng.uniform(-TEMPERATURE_STEP, TEMPERATURE_STEP))
        return self.temperature
