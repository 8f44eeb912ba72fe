"""Bee — individual forager with a two-state lifecycle.

A bee is either *searching* (``full`` is False) or *returning*
(``full`` is True).  While searching it flies greedily toward the
nearest flower, pollinating and drinking from whatever it lands on.
Once it carries ``FULL_LOAD`` nectar it stops moving and foraging until
the return phase flies it home and empties its crop.

Key movement model:

- **Nearest-flower attraction**: each day the bee faces the closest
  flower (measured across field edges when the field wraps) and flies
  one unit toward it.  Bees therefore cluster around flower patches.
- **Random turn**: with no flowers left anywhere the bee wanders,
  turning by the difference of two integer draws in ``0..50`` degrees.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.random import Generator

    from honeyfield.colony.hive import Hive
    from honeyfield.flora.plants import Flower
    from honeyfield.world.environment import Environment
    from honeyfield.world.field import SpatialField

# -- Constants ---------------------------------------------------------------

FLIGHT_STEP = 1.0
NECTAR_PER_VISIT = 3.0
FULL_LOAD = 10.0
MAX_AGE = 49
_MAX_TURN_DEGREES = 50


@dataclass
class Bee:
    """A single bee agent.

    Attributes:
        uid: Registry identity.
        x: Position along x.
        y: Position along y.
        heading: Flight direction in radians (0 = +x, pi/2 = +y).
        carrying_nectar: Nectar currently held.
        age: Days since the bee was created.
        full: True once ``carrying_nectar`` reaches ``FULL_LOAD``.
        days_since_food: Days since the bee last collected nectar or
            unloaded at a hive.
        home_hive: uid of the hive this bee unloads into, or None.
    """

    uid: int
    x: float
    y: float
    heading: float = 0.0
    carrying_nectar: float = 0.0
    age: int = 0
    full: bool = False
    days_since_food: int = 0
    home_hive: int | None = None

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    def move(
        self,
        space: SpatialField,
        flowers: Sequence[Flower],
        rng: Generator,
    ) -> None:
        """Fly one step: toward the nearest flower, or wander if none exist.

        Full bees do not move here; they are flown home by ``return_home``.

        Args:
            space: The plane the bee flies over.
            flowers: Every flower currently on the field.
            rng: Seeded random generator.
        """
        if self.full:
            return

        target = space.nearest(self.position, flowers)
        if target is not None:
            if space.delta(self.position, target.position) != (0.0, 0.0):
                self.heading = space.heading_towards(self.position, target.position)
        else:
            left = int(rng.integers(0, _MAX_TURN_DEGREES + 1))
            right = int(rng.integers(0, _MAX_TURN_DEGREES + 1))
            self.heading = (self.heading + math.radians(left - right)) % (
                2.0 * math.pi
            )

        self.x, self.y = space.advance(self.x, self.y, self.heading, FLIGHT_STEP)

    def collect_nectar(self, flower: Flower) -> float:
        """Drink up to ``NECTAR_PER_VISIT`` from a flower.

        Returns:
            Amount of nectar transferred to the bee.
        """
        taken = flower.take_nectar(NECTAR_PER_VISIT)
        if taken > 0:
            self.carrying_nectar += taken
            self.days_since_food = 0
        if self.carrying_nectar >= FULL_LOAD:
            self.full = True
        return taken

    def grow_older(self) -> None:
        """Advance the bee's age and hunger counters by one day."""
        self.age += 1
        self.days_since_food += 1

    def should_die(self, environment: Environment, starvation_threshold: int) -> bool:
        """Return True if any mortality condition holds today.

        Old age and starvation are individual; lethal temperature
        applies to every bee alike.
        """
        return (
            self.age > MAX_AGE
            or environment.is_lethal
            or self.days_since_food > starvation_threshold
        )

    def return_home(self, hive: Hive) -> float:
        """Fly to ``hive`` and unload everything carried.

        Returns:
            Amount deposited into the hive's stores.
        """
        self.x, self.y = hive.x, hive.y
        deposited = self.carrying_nectar
        hive.receive(deposited)
        self.carrying_nectar = 0.0
        self.days_since_food = 0
        self.full = False
        return deposited
