"""SpatialField — the continuous 2D plane every agent lives on.

Positions are floats in ``[0, width) x [0, height)``.  By default the
plane wraps at its edges (a torus); with ``wrap=False`` positions are
clamped instead.  Agents share a *patch* when they have the same
integer-floored coordinates, which is what "co-located" means for
foraging.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeVar

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterable

    from numpy.random import Generator


class Located(Protocol):
    """Anything with a position on the field."""

    x: float
    y: float


T = TypeVar("T", bound=Located)


@dataclass
class SpatialField:
    """A bounded plane with wrapping or clamped edges.

    Attributes:
        width: Extent along x.
        height: Extent along y.
        wrap: If True the plane is toroidal, otherwise edges clamp.
    """

    width: float
    height: float
    wrap: bool = True

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            msg = f"field size must be positive, got {self.width}x{self.height}"
            raise ValueError(msg)

    def normalise(self, x: float, y: float) -> tuple[float, float]:
        """Bring a point back inside the field bounds."""
        if self.wrap:
            x %= self.width
            y %= self.height
            # -1e-17 % w rounds to w itself
            if x >= self.width:
                x = 0.0
            if y >= self.height:
                y = 0.0
            return x, y
        return (
            min(max(x, 0.0), math.nextafter(self.width, 0.0)),
            min(max(y, 0.0), math.nextafter(self.height, 0.0)),
        )

    def contains(self, x: float, y: float) -> bool:
        """Return True if ``(x, y)`` lies within the field bounds."""
        return 0.0 <= x < self.width and 0.0 <= y < self.height

    def patch_of(self, x: float, y: float) -> tuple[int, int]:
        """Return the integer patch containing ``(x, y)``."""
        return int(math.floor(x)), int(math.floor(y))

    def delta(
        self,
        origin: tuple[float, float],
        target: tuple[float, float],
    ) -> tuple[float, float]:
        """Shortest displacement from ``origin`` to ``target``.

        On a wrapping field the displacement may cross an edge.
        """
        dx = target[0] - origin[0]
        dy = target[1] - origin[1]
        if self.wrap:
            dx = (dx + self.width / 2) % self.width - self.width / 2
            dy = (dy + self.height / 2) % self.height - self.height / 2
        return dx, dy

    def distance(
        self,
        origin: tuple[float, float],
        target: tuple[float, float],
    ) -> float:
        """Euclidean distance, measured across edges when wrapping."""
        dx, dy = self.delta(origin, target)
        return math.hypot(dx, dy)

    def nearest(self, origin: tuple[float, float], entities: Iterable[T]) -> T | None:
        """Return the entity closest to ``origin``.

        Ties go to the entity seen first.  Returns None when
        ``entities`` is empty.

        Args:
            origin: Query point.
            entities: Candidates, each with ``x`` and ``y``.
        """
        candidates = list(entities)
        if not candidates:
            return None

        xs = np.fromiter((e.x for e in candidates), dtype=np.float64)
        ys = np.fromiter((e.y for e in candidates), dtype=np.float64)
        dx = xs - origin[0]
        dy = ys - origin[1]
        if self.wrap:
            dx = (dx + self.width / 2) % self.width - self.width / 2
            dy = (dy + self.height / 2) % self.height - self.height / 2
        # argmin returns the first minimum
        return candidates[int(np.argmin(dx * dx + dy * dy))]

    def heading_towards(
        self,
        origin: tuple[float, float],
        target: tuple[float, float],
    ) -> float:
        """Heading in radians (0 = +x, pi/2 = +y) from origin to target."""
        dx, dy = self.delta(origin, target)
        return math.atan2(dy, dx)

    def advance(
        self,
        x: float,
        y: float,
        heading: float,
        step: float = 1.0,
    ) -> tuple[float, float]:
        """Move ``step`` units along ``heading`` and normalise the result."""
        return self.normalise(
            x + step * math.cos(heading),
            y + step * math.sin(heading),
        )

    def random_position(self, rng: Generator) -> tuple[float, float]:
        """Draw a uniformly random point on the field."""
        return self.normalise(
            float(rng.uniform(0.0, self.width)),
            float(rng.uniform(0.0, self.height)),
        )
