"""Tests for honeyfield.colony and the foraging / return phases."""

import math

import pytest
from numpy.random import Generator

from honeyfield.colony.bee import Bee
from honeyfield.colony.hive import Hive
from honeyfield.flora.plants import Flower
from honeyfield.simulation.foraging import (
    forage,
    forage_pass,
    resolve_home,
    return_pass,
    return_to_hive,
)
from honeyfield.simulation.state import SimulationState
from honeyfield.world.environment import Environment
from honeyfield.world.field import SpatialField


class TestBeeMovement:
    """Tests for nearest-flower flight and random wandering."""

    def test_flies_one_step_toward_nearest_flower(
        self,
        small_space: SpatialField,
        rng: Generator,
    ) -> None:
        bee = Bee(uid=0, x=1.5, y=1.5)
        near = Flower(uid=1, x=4.5, y=1.5, nectar=5.0)
        far = Flower(uid=2, x=1.5, y=6.0, nectar=5.0)
        bee.move(small_space, [far, near], rng)
        assert bee.x == pytest.approx(2.5)
        assert bee.y == pytest.approx(1.5)

    def test_wanders_one_unit_without_flowers(
        self,
        small_space: SpatialField,
        rng: Generator,
    ) -> None:
        bee = Bee(uid=0, x=5.0, y=5.0, heading=0.0)
        bee.move(small_space, [], rng)
        assert small_space.distance((5.0, 5.0), bee.position) == pytest.approx(1.0)
        turn = (bee.heading + math.pi) % (2 * math.pi) - math.pi
        assert abs(turn) <= math.radians(50) + 1e-9

    def test_full_bee_does_not_move(
        self,
        small_space: SpatialField,
        rng: Generator,
    ) -> None:
        bee = Bee(uid=0, x=1.5, y=1.5, full=True, carrying_nectar=10.0)
        bee.move(small_space, [Flower(uid=1, x=4.5, y=1.5)], rng)
        assert bee.position == (1.5, 1.5)


class TestCollectNectar:
    """Tests for drinking from flowers."""

    def test_collect_resets_hunger(self) -> None:
        bee = Bee(uid=0, x=0.0, y=0.0, days_since_food=4)
        flower = Flower(uid=1, x=0.0, y=0.0, nectar=9.0)
        assert bee.collect_nectar(flower) == 3.0
        assert bee.days_since_food == 0
        assert not bee.full

    def test_empty_flower_leaves_hunger(self) -> None:
        bee = Bee(uid=0, x=0.0, y=0.0, days_since_food=4)
        flower = Flower(uid=1, x=0.0, y=0.0, nectar=0.0)
        assert bee.collect_nectar(flower) == 0.0
        assert bee.days_since_food == 4

    def test_full_at_exactly_ten(self) -> None:
        bee = Bee(uid=0, x=0.0, y=0.0, carrying_nectar=7.0)
        bee.collect_nectar(Flower(uid=1, x=0.0, y=0.0, nectar=9.0))
        assert bee.carrying_nectar == 10.0
        assert bee.full

    def test_not_full_below_ten(self) -> None:
        bee = Bee(uid=0, x=0.0, y=0.0, carrying_nectar=6.0)
        bee.collect_nectar(Flower(uid=1, x=0.0, y=0.0, nectar=9.0))
        assert bee.carrying_nectar == 9.0
        assert not bee.full


class TestForage:
    """Tests for pollinating and drinking on the bee's patch."""

    def test_flower_scenario(self, state: SimulationState) -> None:
        flower = state.registry.spawn_flower(2.5, 2.5, nectar=9.0)
        bee = state.registry.spawn_bee(2.5, 2.5)
        forage(bee, state)
        assert flower.nectar == 6.0
        assert bee.carrying_nectar == 3.0
        assert flower.pollinated

    def test_same_patch_counts_as_colocated(self, state: SimulationState) -> None:
        flower = state.registry.spawn_flower(2.1, 2.9, nectar=9.0)
        bee = state.registry.spawn_bee(2.8, 2.2)
        forage(bee, state)
        assert flower.pollinated

    def test_crop_pollinated_without_nectar(self, state: SimulationState) -> None:
        crop = state.registry.spawn_crop(2.5, 2.5)
        bee = state.registry.spawn_bee(2.5, 2.5)
        forage(bee, state)
        assert crop.pollinated
        assert crop.growth == 1.0
        assert bee.carrying_nectar == 0.0

    def test_flower_takes_priority_over_crop(self, state: SimulationState) -> None:
        crop = state.registry.spawn_crop(2.5, 2.5)
        flower = state.registry.spawn_flower(2.5, 2.5, nectar=5.0)
        bee = state.registry.spawn_bee(2.5, 2.5)
        forage(bee, state)
        assert flower.pollinated
        assert not crop.pollinated

    def test_full_bee_does_not_forage(self, state: SimulationState) -> None:
        flower = state.registry.spawn_flower(2.5, 2.5, nectar=9.0)
        bee = state.registry.spawn_bee(2.5, 2.5)
        bee.carrying_nectar = 10.0
        bee.full = True
        forage(bee, state)
        assert flower.nectar == 9.0
        assert not flower.pollinated

    def test_nothing_here(self, state: SimulationState) -> None:
        state.registry.spawn_flower(7.5, 7.5, nectar=9.0)
        bee = state.registry.spawn_bee(2.5, 2.5)
        forage(bee, state)
        assert bee.carrying_nectar == 0.0


class TestAgingAndMortality:
    """Tests for per-bee aging inside the foraging sweep."""

    def test_old_bee_dies(self, state: SimulationState) -> None:
        bee = state.registry.spawn_bee(2.5, 2.5)
        bee.age = 50
        assert forage_pass(state) == 1
        assert bee not in state.registry

    def test_bee_at_max_age_survives_one_more_day(self, state: SimulationState) -> None:
        bee = state.registry.spawn_bee(2.5, 2.5)
        bee.age = 48
        forage_pass(state)
        assert bee.age == 49
        assert bee in state.registry

    def test_starvation(self, state: SimulationState) -> None:
        hungry = state.registry.spawn_bee(2.5, 2.5)
        hungry.days_since_food = 10
        peckish = state.registry.spawn_bee(2.5, 2.5)
        peckish.days_since_food = 9
        forage_pass(state)
        assert hungry not in state.registry
        assert peckish in state.registry
        assert peckish.days_since_food == 10

    def test_lethal_temperature_kills_everyone(self, state: SimulationState) -> None:
        for _ in range(5):
            state.registry.spawn_bee(2.5, 2.5)
        state.environment.temperature = 9.0
        assert forage_pass(state) == 5
        assert state.registry.bees == []

    def test_should_die_conditions(self) -> None:
        mild = Environment(temperature=20.0)
        assert not Bee(uid=0, x=0.0, y=0.0, age=49).should_die(mild, 10)
        assert Bee(uid=0, x=0.0, y=0.0, age=50).should_die(mild, 10)
        assert Bee(uid=0, x=0.0, y=0.0, days_since_food=11).should_die(mild, 10)
        assert Bee(uid=0, x=0.0, y=0.0).should_die(Environment(temperature=36.0), 10)


class TestReturnToHive:
    """Tests for the return-to-hive phase."""

    def test_deposit_scenario(self, state: SimulationState) -> None:
        hive = state.registry.spawn_hive(7.0, 7.0)
        bee = state.registry.spawn_bee(2.5, 2.5)
        bee.carrying_nectar = 10.0
        bee.full = True
        bee.days_since_food = 3

        assert return_pass(state) == 10.0
        assert hive.stores == 10.0
        assert state.hive_resources == 10.0
        assert bee.carrying_nectar == 0.0
        assert not bee.full
        assert bee.days_since_food == 0
        assert bee.position == hive.position

    def test_searching_bees_stay_put(self, state: SimulationState) -> None:
        state.registry.spawn_hive(7.0, 7.0)
        bee = state.registry.spawn_bee(2.5, 2.5)
        bee.carrying_nectar = 6.0
        assert return_pass(state) == 0.0
        assert bee.position == (2.5, 2.5)

    def test_deposits_into_home_hive(self, state: SimulationState) -> None:
        near = state.registry.spawn_hive(3.0, 3.0)
        home = state.registry.spawn_hive(8.0, 8.0)
        bee = state.registry.spawn_bee(2.5, 2.5)
        bee.home_hive = home.uid
        bee.carrying_nectar = 12.0
        bee.full = True
        return_to_hive(bee, state)
        assert home.stores == 12.0
        assert near.stores == 0.0

    def test_stale_home_is_reresolved(self, state: SimulationState) -> None:
        hive = state.registry.spawn_hive(3.0, 3.0)
        bee = state.registry.spawn_bee(2.5, 2.5)
        bee.home_hive = 999
        assert resolve_home(bee, state) is hive
        assert bee.home_hive == hive.uid

    def test_bee_without_any_hive_stays_full(self, state: SimulationState) -> None:
        bee = state.registry.spawn_bee(2.5, 2.5)
        assert bee.home_hive is None
        bee.carrying_nectar = 10.0
        bee.full = True

        assert return_pass(state) == 0.0
        assert bee.full
        assert state.hive_resources == 0.0

        # Stuck: a full bee neither flies nor forages while no hive exists
        state.registry.spawn_flower(5.5, 5.5, nectar=9.0)
        forage_pass(state)
        assert bee.position == (2.5, 2.5)
        assert bee.carrying_nectar == 10.0

    def test_removing_hive_clears_home(self, state: SimulationState) -> None:
        hive = state.registry.spawn_hive(3.0, 3.0)
        bee = state.registry.spawn_bee(2.5, 2.5)
        assert bee.home_hive == hive.uid
        state.registry.remove(hive)
        assert bee.home_hive is None


class TestHive:
    """Tests for the Hive dataclass."""

    def test_receive(self) -> None:
        hive = Hive(uid=0, x=0.0, y=0.0)
        hive.receive(4.0)
        hive.receive(6.0)
        assert hive.stores == 10.0
