"""SimulationEngine — the main tick loop.

Owns the simulation state and advances it one day at a time in a fixed
phase order:

1. Update environment (temperature random walk)
2. Every bee moves, forages and ages; dead bees are removed
3. Full bees fly home and unload
4. Pollinated flowers regrow nectar
5. Pollinated crops grow; ripe crops are harvested
6. Pooled nectar raises a brood of new bees
7. Derived metrics are recomputed

The order matters: phase 3 must see every bee's foraging result, and
phase 6 must see every deposit made in phase 3.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from numpy.random import Generator

from honeyfield.flora.growth import grow_crops, regenerate_flowers
from honeyfield.simulation import metrics
from honeyfield.simulation.config import SimulationConfig, check_range, check_type
from honeyfield.simulation.foraging import forage_pass, return_pass
from honeyfield.simulation.metrics import Observables
from honeyfield.simulation.population import reproduce, spawn_bees
from honeyfield.simulation.state import SimulationState
from honeyfield.world.environment import Environment
from honeyfield.world.field import SpatialField

_LOGGER = logging.getLogger(__name__)

_FLOWER_NECTAR_RANGE = (5, 9)


@dataclass
class SimulationEngine:
    """Drives the simulation forward tick by tick.

    Attributes:
        config: Loaded simulation configuration.
        rng: Random generator.  An injected generator is rewound to the
            state it was passed in with on every ``setup``; without one,
            ``setup`` seeds a fresh generator from ``config.seed``.
        state: Registries and counters of the current run.
        history: One Observables snapshot per completed tick, plus the
            initial snapshot taken at setup.
    """

    config: SimulationConfig = field(default_factory=SimulationConfig)
    rng: Generator | None = None
    state: SimulationState = field(init=False)
    history: list[Observables] = field(init=False, default_factory=list)
    _rng_start: dict | None = field(init=False, default=None, repr=False)
    _extinction_logged: bool = field(init=False, default=False, repr=False)

    def __post_init__(self) -> None:
        """Build the first run from config."""
        if self.rng is not None:
            self._rng_start = self.rng.bit_generator.state
        self.setup()

    # -- Host operations --

    def setup(self, config: SimulationConfig | None = None) -> None:
        """Discard the current run and build a fresh one.

        Calling ``setup`` twice with the same config and seed yields the
        same initial state.

        Args:
            config: Replacement configuration; keeps the current one if
                omitted.

            ConfigError: If the configuration is mistyped or out of range.
            ConfigError: If the configuration is out of range.
        """
        if config is not None:
            self.config = config
        cfg = self.config.validate()

        if self._rng_start is None or self.rng is None:
            self.rng = np.random.default_rng(cfg.seed)
        else:
            self.rng.bit_generator.state = self._rng_start

        space = SpatialField(
            width=cfg.world_width,
            height=cfg.world_height,
            wrap=cfg.wrap,
        )
        self.state = SimulationState(
            space=space,
            environment=Environment(temperature=cfg.initial_temperature),
            rng=self.rng,
            starvation_threshold=cfg.starvation_threshold,
        )
        self._populate()
        metrics.recompute(self.state)
        self.history = [metrics.observe(self.state)]
        self._extinction_logged = False

        _LOGGER.info(
            "setup: %d bees, %d flowers, %d crops, %d hives at %.1f degrees",
            cfg.initial_bees,
            cfg.initial_flowers,
            cfg.initial_crops,
            cfg.initial_hives,
            cfg.initial_temperature,
        )

    def step(self) -> Observables:
        """Advance the simulation by exactly one tick.

        Returns:
            The observables at the end of the tick.
        """
        state = self.state

        # 1. Environment
        state.environment.advance_temperature(state.rng)

        # 2-3. Foraging sweep, then return-to-hive sweep
        forage_pass(state)
        return_pass(state)

        # 4-5. Growth
        regenerate_flowers(state)
        grow_crops(state)

        # 6. Reproduction
        reproduce(state)

        # 7. Metrics
        metrics.recompute(state)
        state.tick += 1

        snapshot = metrics.observe(state)
        self.history.append(snapshot)
        self._check_extinction(snapshot)
        return snapshot

    def run(self, ticks: int) -> Observables:
        """Run the simulation for a fixed number of ticks.

        Args:
            ticks: Number of ticks to advance.

        Returns:
            The observables after the last tick.
        """
        snapshot = self.observables
        for _ in range(ticks):
            snapshot = self.step()
        return snapshot

    # -- Live controls and read-only views --

    def set_starvation_threshold(self, days: int) -> None:
        """Change the starvation threshold of the running simulation.

        Raises:
            ConfigError: If ``days`` is not an integer or is out of range.
        """
        check_type("starvation_threshold", days, "int")
        lo, hi = SimulationConfig.RANGES["starvation_threshold"]
        check_range("starvation_threshold", days, lo, hi)
        self.config.starvation_threshold = days
        self.state.starvation_threshold = days

    @property
    def tick(self) -> int:
        return self.state.tick

    @property
    def observables(self) -> Observables:
        return metrics.observe(self.state)

    @property
    def extinct(self) -> bool:
        """Return True once no bee is left alive."""
        return not self.state.registry.bees

    # -- Setup helpers --

    def _populate(self) -> None:
        """Place hives first so every initial bee can find a home."""
        cfg = self.config
        state = self.state
        registry = state.registry
        lo, hi = _FLOWER_NECTAR_RANGE

        for _ in range(cfg.initial_hives):
            registry.spawn_hive(*state.space.random_position(state.rng))
        for _ in range(cfg.initial_flowers):
            x, y = state.space.random_position(state.rng)
            registry.spawn_flower(x, y, nectar=float(state.rng.integers(lo, hi + 1)))
        for _ in range(cfg.initial_crops):
            registry.spawn_crop(*state.space.random_position(state.rng))
        spawn_bees(state, cfg.initial_bees)

    def _check_extinction(self, snapshot: Observables) -> None:
        if snapshot.bees == 0 and not self._extinction_logged:
            _LOGGER.info(
                "colony extinct at tick %d (temperature %.2f)",
                snapshot.tick,
                snapshot.temperature,
            )
            self._extinction_logged = True
        elif snapshot.bees > 0:
            self._extinction_logged = False
