"""Population dynamics — seeding bees and resource-gated reproduction.

Aging and death happen per bee inside the foraging sweep (see
``Bee.grow_older`` and ``Bee.should_die``); this module handles the
colony-level side: turning pooled nectar into new bees.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from honeyfield.colony.bee import Bee
    from honeyfield.simulation.state import SimulationState

_LOGGER = logging.getLogger(__name__)

BROOD_COST = 20.0
BROOD_SIZE = 20


def spawn_bees(state: SimulationState, count: int) -> list[Bee]:
    """Create ``count`` bees at random positions with random headings.

    Each bee is homed to the hive nearest its spawn point.

    Args:
        state: Current simulation state.
        count: Number of bees to create.

    Returns:
        The new bees.
    """
    bees = []
    for _ in range(count):
        x, y = state.space.random_position(state.rng)
        heading = float(state.rng.uniform(0.0, 2.0 * math.pi))
        bees.append(state.registry.spawn_bee(x, y, heading))
    return bees


def reproduce(state: SimulationState) -> list[Bee]:
    """Spend one brood's worth of pooled nectar on new bees.

    At most one batch of ``BROOD_SIZE`` bees is raised per tick, however
    much nectar is pooled.

    Args:
        state: Current simulation state.

    Returns:
        The bees hatched this tick (empty if resources were short).
    """
    if state.hive_resources < BROOD_COST:
        return []

    state.hive_resources -= BROOD_COST
    brood = spawn_bees(state, BROOD_SIZE)
    _LOGGER.debug(
        "tick %d: raised %d bees, %.1f resources left",
        state.tick,
        len(brood),
        state.hive_resources,
    )
    return brood
