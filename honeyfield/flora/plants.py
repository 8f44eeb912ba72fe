"""Plants — flowers and crops that bees visit.

Both kinds share a ``pollinated`` flag that only ever flips from False
to True.  Flowers hold nectar that bees collect; crops hold growth that
accumulates until harvest.  ``pollinate`` matches on the plant's class to
apply the kind-specific effect of a first visit.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

MAX_NECTAR = 10.0
HARVEST_GROWTH = 5.0
POLLINATION_GROWTH_BONUS = 1.0


class PlantKind(Enum):
    """Which variant a plant is."""

    FLOWER = auto()
    CROP = auto()


@dataclass
class Plant:
    """Common state of a flower or crop.

    Attributes:
        uid: Registry identity.
        x: Position along x.
        y: Position along y.
        kind: Variant tag.
        pollinated: Whether a bee has visited since setup.
    """

    uid: int
    x: float
    y: float
    kind: PlantKind
    pollinated: bool = False

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y


@dataclass
class Flower(Plant):
    """A nectar source.  ``nectar`` stays within ``[0, MAX_NECTAR]``."""

    kind: PlantKind = PlantKind.FLOWER
    nectar: float = 0.0

    def take_nectar(self, limit: float) -> float:
        """Remove up to ``limit`` nectar and return the amount removed."""
        taken = min(self.nectar, limit)
        if taken <= 0:
            return 0.0
        self.nectar -= taken
        return taken

    def regrow(self, amount: float) -> None:
        self.nectar = min(MAX_NECTAR, self.nectar + amount)


@dataclass
class Crop(Plant):
    """A field crop that grows once pollinated and is harvested at maturity."""

    kind: PlantKind = PlantKind.CROP
    growth: float = 0.0

    @property
    def is_ripe(self) -> bool:
        return self.growth >= HARVEST_GROWTH


def pollinate(plant: Flower | Crop) -> bool:
    """Mark a plant as pollinated and apply its first-visit effect.

    Crops receive a one-off growth bonus; flowers only gain the flag,
    which makes them eligible for nectar regrowth.

    Args:
        plant: The flower or crop being visited.

    Returns:
        True if this call pollinated the plant, False if it already was.
    """
    if plant.pollinated:
        return False
    plant.pollinated = True

    match plant:
        case Crop():
            plant.growth += POLLINATION_GROWTH_BONUS
        case Flower():
            pass
    return True
