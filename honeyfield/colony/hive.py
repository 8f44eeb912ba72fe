"""Hive — where bees unload nectar."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Hive:
    """A hive on the field.

    Attributes:
        uid: Registry identity.
        x: Position along x.
        y: Position along y.
        stores: Nectar deposited into this hive over the run.
    """

    uid: int
    x: float
    y: float
    stores: float = 0.0

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    def receive(self, amount: float) -> None:
        """Add a bee's load to this hive's stores."""
        self.stores += amount
