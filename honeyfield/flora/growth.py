"""Flower nectar regrowth and crop growth / harvest.

Kept apart from ``plants.py`` so the growth rules can change without
touching the plant data model.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from honeyfield.flora.plants import MAX_NECTAR

if TYPE_CHECKING:
    from honeyfield.simulation.state import SimulationState

_LOGGER = logging.getLogger(__name__)

NECTAR_REGROWTH = 1.0
CROP_GROWTH_RATE = 0.1


def regenerate_flowers(state: SimulationState) -> int:
    """Regrow nectar on pollinated flowers when the day is mild.

    Only pollinated flowers below ``MAX_NECTAR`` regrow, by
    ``NECTAR_REGROWTH`` each, and only inside the regrowth temperature
    band.  Unpollinated flowers never regrow.

    Args:
        state: Current simulation state.

    Returns:
        Number of flowers that regrew.
    """
    if not state.environment.in_regrowth_band:
        return 0

    regrown = 0
    for flower in state.registry.flowers:
        if flower.pollinated and flower.nectar < MAX_NECTAR:
            flower.regrow(NECTAR_REGROWTH)
            regrown += 1
    return regrown


def grow_crops(state: SimulationState) -> int:
    """Grow pollinated crops and harvest the ripe ones.

    Growth does not depend on temperature.  A harvested crop bumps
    ``crop_yield`` and leaves the registry for good.

    Args:
        state: Current simulation state.

    Returns:
        Number of crops harvested this tick.
    """
    registry = state.registry
    harvested = 0
    for crop in registry.crops:
        if crop.pollinated and not crop.is_ripe:
            crop.growth += CROP_GROWTH_RATE
        if crop.is_ripe:
            registry.remove(crop)
            state.crop_yield += 1
            harvested += 1

    if harvested:
        _LOGGER.debug("harvested %d crop(s), yield now %d", harvested, state.crop_yield)
    return harvested
