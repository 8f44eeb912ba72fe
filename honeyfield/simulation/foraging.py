"""Foraging & pollination sweep, and the return-to-hive phase.

The two phases run back to back but never interleave: every bee moves,
forages and ages first, and only then do full bees fly home.  A bee
therefore cannot fill up and unload on the same day.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from honeyfield.flora.plants import pollinate

if TYPE_CHECKING:
    from honeyfield.colony.bee import Bee
    from honeyfield.colony.hive import Hive
    from honeyfield.simulation.state import SimulationState

_LOGGER = logging.getLogger(__name__)


def forage(bee: Bee, state: SimulationState) -> None:
    """Work whatever plant shares the bee's patch.

    A flower takes priority: it is pollinated, then drunk from.  With no
    flower here, a crop is pollinated (crops yield no nectar).

    Args:
        bee: The foraging bee.
        state: Current simulation state.
    """
    if bee.full:
        return

    registry = state.registry
    flowers = registry.flowers_at(bee.x, bee.y)
    if flowers:
        flower = flowers[0]
        pollinate(flower)
        bee.collect_nectar(flower)
        return

    crops = registry.crops_at(bee.x, bee.y)
    if crops:
        pollinate(crops[0])


def forage_pass(state: SimulationState) -> int:
    """Move, forage and age every bee once, removing those that die.

    Bees are visited in registry order.  Flowers that a bee flies toward
    are read afresh for each bee so nectar taken earlier in the sweep is
    visible to later bees.

    Args:
        state: Current simulation state.

    Returns:
        Number of bees that died during the sweep.
    """
    registry = state.registry
    deaths = 0
    for bee in registry.bees:
        bee.move(state.space, registry.flowers, state.rng)
        forage(bee, state)
        bee.grow_older()
        if bee.should_die(state.environment, state.starvation_threshold):
            registry.remove(bee)
            deaths += 1
    return deaths


def resolve_home(bee: Bee, state: SimulationState) -> Hive | None:
    """Return the bee's hive, re-homing it to the nearest hive if needed.

    Returns None if there is no hive anywhere on the field.
    """
    registry = state.registry
    hive = registry.hive(bee.home_hive)
    if hive is None:
        hive = registry.nearest_hive(bee.position)
        bee.home_hive = hive.uid if hive is not None else None
    return hive


def return_to_hive(bee: Bee, state: SimulationState) -> float:
    """Fly a full bee home and unload it.

    The load is added to the hive's own ``stores`` and to the pooled
    ``hive_resources`` from the same amount.

    Returns:
        Nectar deposited, 0.0 if the bee had no hive to go to.
    """
    if not bee.full:
        return 0.0
    hive = resolve_home(bee, state)
    if hive is None:
        _LOGGER.debug("bee %d is full with no hive to return to", bee.uid)
        return 0.0
    deposited = bee.return_home(hive)
    state.hive_resources += deposited
    return deposited


def return_pass(state: SimulationState) -> float:
    """Unload every full bee.

    Returns:
        Total nectar deposited this tick.
    """
    total = 0.0
    for bee in state.registry.bees:
        if bee.full:
            total += return_to_hive(bee, state)
    return total
