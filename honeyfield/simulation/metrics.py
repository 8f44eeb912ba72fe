"""Metrics — derived counters and read-only snapshots for observers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from honeyfield.simulation.state import SimulationState


@dataclass(frozen=True)
class Observables:
    """One tick's worth of values a UI or plot may display.

    Attributes:
        tick: Completed ticks.
        bees: Live bee count.
        hive_resources: Pooled nectar.
        pollination_success: Pollinated flowers.
        crop_yield: Crops harvested so far.
        temperature: Current temperature.
        mean_flower_nectar: Average nectar per flower (0.0 with no flowers).
    """

    tick: int
    bees: int
    hive_resources: float
    pollination_success: int
    crop_yield: int
    temperature: float
    mean_flower_nectar: float


def recompute(state: SimulationState) -> int:
    """Recount pollinated flowers into ``state.pollination_success``."""
    state.pollination_success = sum(1 for f in state.registry.flowers if f.pollinated)
    return state.pollination_success


def mean_flower_nectar(state: SimulationState) -> float:
    flowers = state.registry.flowers
    if not flowers:
        return 0.0
    return sum(f.nectar for f in flowers) / len(flowers)


def observe(state: SimulationState) -> Observables:
    """Snapshot the current observables."""
    return Observables(
        tick=state.tick,
        bees=len(state.registry.bees),
        hive_resources=state.hive_resources,
        pollination_success=state.pollination_success,
        crop_yield=state.crop_yield,
        temperature=state.temperature,
        mean_flower_nectar=mean_flower_nectar(state),
    )
