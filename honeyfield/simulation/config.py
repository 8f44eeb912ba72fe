"""Config — load simulation parameters from YAML files.

The scalar inputs a run starts from (population sizes, starting
temperature, starvation threshold, field size) live in YAML and are
parsed into a typed dataclass here.  Each input has an allowed range;
``validate`` rejects anything outside it.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import ClassVar

import yaml


class ConfigError(ValueError):
    """A configuration value is missing, mistyped, or out of range."""


@dataclass
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        world_width: Field extent along x.
        world_height: Field extent along y.
        wrap: If True the field is a torus, otherwise edges clamp.
        initial_bees: Bees created at setup.
        initial_flowers: Flowers created at setup.
        initial_crops: Crops created at setup.
        initial_hives: Hives created at setup.
        initial_temperature: Temperature on day zero.
        starvation_threshold: Days without food after which a bee dies.
            May be changed while the simulation runs.
    """

    seed: int = 42
    world_width: float = 33.0
    world_height: float = 33.0
    wrap: bool = True

    initial_bees: int = 50
    initial_flowers: int = 100
    initial_crops: int = 50
    initial_hives: int = 3
    initial_temperature: float = 25.0
    starvation_threshold: int = 10

    RANGES: ClassVar[dict[str, tuple[float, float]]] = {
        "initial_bees": (1, 100),
        "initial_flowers": (0, 200),
        "initial_crops": (0, 100),
        "initial_hives": (1, 10),
        "initial_temperature": (0, 40),
        "starvation_threshold": (1, 20),
    }

    def validate(self) -> SimulationConfig:
        """Check every input against its declared type and allowed range.

        Returns:
            This config, so calls can be chained.

        Raises:
            ConfigError: If a value has the wrong type, is out of range,
                or the field is empty.
        """
        for f in fields(self):
            check_type(f.name, getattr(self, f.name), f.type)
        for name, (lo, hi) in self.RANGES.items():
            check_range(name, getattr(self, name), lo, hi)
        if self.world_width <= 0 or self.world_height <= 0:
            msg = (
                f"world size must be positive, got "
                f"{self.world_width}x{self.world_height}"
            )
            raise ConfigError(msg)
        return self

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Missing keys keep their defaults.  Values are not coerced, so a
        quoted ``"false"`` or a fractional bee count is rejected rather
        than silently converted.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated, validated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ConfigError: If the file holds unknown keys or bad values.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            msg = f"{path}: expected a mapping at the top level"
            raise ConfigError(msg)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            msg = f"{path}: unknown config key(s): {', '.join(unknown)}"
            raise ConfigError(msg)

        return cls(**data).validate()


def check_type(name: str, value: object, kind: str) -> None:
    """Raise ConfigError unless ``value`` is a plain ``kind``.

    ``bool`` never counts as a number, and an ``int`` is accepted where a
    ``float`` is declared.
    """
    match kind:
        case "bool":
            ok = isinstance(value, bool)
        case "int":
            ok = isinstance(value, int) and not isinstance(value, bool)
        case "float":
            ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        case _:
            ok = True
    if not ok:
        msg = f"{name} must be {kind}, got {value!r}"
        raise ConfigError(msg)


def check_range(name: str, value: float, lo: float, hi: float) -> None:
    """Raise ConfigError unless ``lo <= value <= hi``."""
    if not lo <= value <= hi:
        msg = f"{name}={value} outside allowed range [{lo}, {hi}]"
        raise ConfigError(msg)
