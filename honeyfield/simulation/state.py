"""SimulationState — everything one run mutates, in one place.

Every phase function takes the state explicitly; nothing lives in
module-level globals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from honeyfield.simulation.registry import EntityRegistry

if TYPE_CHECKING:
    from numpy.random import Generator

    from honeyfield.world.environment import Environment
    from honeyfield.world.field import SpatialField


@dataclass
class SimulationState:
    """Registries, environment and colony-wide counters for a run.

    Attributes:
        space: The plane every agent occupies.
        environment: Global temperature process.
        rng: Seeded random generator used by every stochastic step.
        starvation_threshold: Days without food after which a bee dies.
        registry: All live agents.
        hive_resources: Pooled nectar gating reproduction.  Separate
            from the per-hive ``stores`` totals.
        pollination_success: Number of pollinated flowers, recomputed
            each tick.
        crop_yield: Crops harvested so far.
        tick: Completed ticks.
    """

    space: SpatialField
    environment: Environment
    rng: Generator
    starvation_threshold: int = 10
    registry: EntityRegistry = field(init=False)
    hive_resources: float = 0.0
    pollination_success: int = 0
    crop_yield: int = 0
    tick: int = 0

    def __post_init__(self) -> None:
        self.registry = EntityRegistry(space=self.space)

    @property
    def temperature(self) -> float:
        return self.environment.temperature
