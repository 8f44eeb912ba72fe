"""Shared fixtures for the Honeyfield test suite."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.random import Generator

from honeyfield.simulation.config import SimulationConfig
from honeyfield.simulation.state import SimulationState
from honeyfield.world.environment import Environment
from honeyfield.world.field import SpatialField


@pytest.fixture
def rng() -> Generator:
    """A deterministic random generator for reproducible tests."""
    return np.random.default_rng(seed=12345)


@pytest.fixture
def small_space() -> SpatialField:
    """A small 10x10 wrapping field for fast tests."""
    return SpatialField(width=10.0, height=10.0)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default simulation config (no YAML file needed)."""
    return SimulationConfig()


@pytest.fixture
def state(small_space: SpatialField, rng: Generator) -> SimulationState:
    """An empty state on a 10x10 field at a mild 20 degrees."""
    return SimulationState(
        space=small_space,
        environment=Environment(temperature=20.0),
        rng=rng,
        starvation_threshold=10,
    )
