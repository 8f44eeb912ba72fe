"""EntityRegistry — owns every bee, flower, crop and hive in a run.

Each kind lives in its own insertion-ordered mapping keyed by uid.  One
counter issues uids for all kinds, so an identity is unique across the
whole run and never reused after removal.

Bees refer to their hive by uid only.  Removing a hive clears that uid
from every bee homed to it, so no bee is left pointing at a hive that
no longer exists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, TypeVar

from honeyfield.colony.bee import Bee
from honeyfield.colony.hive import Hive
from honeyfield.flora.plants import Crop, Flower

if TYPE_CHECKING:
    from collections.abc import Iterable

    from honeyfield.world.field import SpatialField

Entity = Bee | Flower | Crop | Hive
_E = TypeVar("_E", bound=Entity)


class Kind(Enum):
    """Agent kinds held by the registry."""

    BEE = auto()
    FLOWER = auto()
    CROP = auto()
    HIVE = auto()


_KIND_OF: dict[type, Kind] = {
    Bee: Kind.BEE,
    Flower: Kind.FLOWER,
    Crop: Kind.CROP,
    Hive: Kind.HIVE,
}


@dataclass
class EntityRegistry:
    """Collections of every live agent, by kind.

    Attributes:
        space: The plane agents are placed on (used for patch and
            nearest-neighbour queries).
    """

    space: SpatialField
    _next_uid: int = field(default=0, init=False)
    _stores: dict[Kind, dict[int, Entity]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._stores = {kind: {} for kind in Kind}

    # -- Spawning --

    def _issue_uid(self) -> int:
        uid = self._next_uid
        self._next_uid += 1
        return uid

    def spawn_hive(self, x: float, y: float) -> Hive:
        hive = Hive(uid=self._issue_uid(), x=x, y=y)
        self._stores[Kind.HIVE][hive.uid] = hive
        return hive

    def spawn_flower(self, x: float, y: float, nectar: float) -> Flower:
        flower = Flower(uid=self._issue_uid(), x=x, y=y, nectar=nectar)
        self._stores[Kind.FLOWER][flower.uid] = flower
        return flower

    def spawn_crop(self, x: float, y: float) -> Crop:
        crop = Crop(uid=self._issue_uid(), x=x, y=y)
        self._stores[Kind.CROP][crop.uid] = crop
        return crop

    def spawn_bee(self, x: float, y: float, heading: float = 0.0) -> Bee:
        """Create a bee homed to the nearest hive (if any hive exists).

        Args:
            x: Spawn position along x.
            y: Spawn position along y.
            heading: Initial flight direction in radians.

        Returns:
            The new Bee, already registered.
        """
        bee = Bee(uid=self._issue_uid(), x=x, y=y, heading=heading)
        hive = self.nearest_hive(bee.position)
        bee.home_hive = hive.uid if hive is not None else None
        self._stores[Kind.BEE][bee.uid] = bee
        return bee

    # -- Queries --

    @property
    def bees(self) -> list[Bee]:
        return list(self._stores[Kind.BEE].values())

    @property
    def flowers(self) -> list[Flower]:
        return list(self._stores[Kind.FLOWER].values())

    @property
    def crops(self) -> list[Crop]:
        return list(self._stores[Kind.CROP].values())

    @property
    def hives(self) -> list[Hive]:
        return list(self._stores[Kind.HIVE].values())

    def of_kind(self, kind: Kind) -> list[Entity]:
        return list(self._stores[kind].values())

    def count(self, kind: Kind) -> int:
        return len(self._stores[kind])

    def get(self, kind: Kind, uid: int | None) -> Entity | None:
        """Look up an entity by uid, returning None if absent."""
        if uid is None:
            return None
        return self._stores[kind].get(uid)

    def hive(self, uid: int | None) -> Hive | None:
        return self.get(Kind.HIVE, uid)

    def nearest_hive(self, position: tuple[float, float]) -> Hive | None:
        return self.space.nearest(position, self._stores[Kind.HIVE].values())

    def at_patch(self, kind: Kind, x: float, y: float) -> list[Entity]:
        """Return entities of ``kind`` sharing the patch containing ``(x, y)``."""
        return self._on_patch(self._stores[kind].values(), x, y)

    def flowers_at(self, x: float, y: float) -> list[Flower]:
        return self._on_patch(self.flowers, x, y)

    def crops_at(self, x: float, y: float) -> list[Crop]:
        return self._on_patch(self.crops, x, y)

    def _on_patch(self, entities: Iterable[_E], x: float, y: float) -> list[_E]:
        patch = self.space.patch_of(x, y)
        return [e for e in entities if self.space.patch_of(e.x, e.y) == patch]

    def __contains__(self, entity: object) -> bool:
        kind = _KIND_OF.get(type(entity))
        if kind is None:
            return False
        return self._stores[kind].get(entity.uid) is entity

    # -- Removal --

    def remove(self, entity: Entity) -> None:
        """Remove an entity from the registry.

        Removing a hive also unsets ``home_hive`` on every bee that
        referred to it.

        Raises:
            KeyError: If the entity is not registered.
        """
        kind = _KIND_OF[type(entity)]
        del self._stores[kind][entity.uid]
        if kind is Kind.HIVE:
            for bee in self._stores[Kind.BEE].values():
                if bee.home_hive == entity.uid:
                    bee.home_hive = None
