"""Unit tests for the survival and birth rules."""

import pytest

from sparselife.core.coordinate import Coordinate
from sparselife.core.rules import (
    BirthRule,
    SurvivalRule,
    count_live_neighbors,
    create_default_rules,
)
from sparselife.core.world import World


class TestCountLiveNeighbors:
    """Tests for neighbor counting."""

    def test_middle_of_blinker(self, blinker):
        assert count_live_neighbors(blinker, Coordinate(1, 2)) == 2

    def test_end_of_blinker(self, blinker):
        assert count_live_neighbors(blinker, Coordinate(1, 1)) == 1

    def test_dead_cell_next_to_blinker(self, blinker):
        assert count_live_neighbors(blinker, Coordinate(0, 2)) == 3

    def test_does_not_count_self(self):
        world = World.from_cells([(0, 0)])
        assert count_live_neighbors(world, Coordinate(0, 0)) == 0


class TestSurvivalRule:
    """Tests for SurvivalRule."""

    def test_keeps_cell_with_two_live_neighbors(self, blinker):
        assert SurvivalRule().evaluate(blinker) == [Coordinate(1, 2)]

    def test_keeps_cells_with_three_live_neighbors(self):
        world = World.from_cells([(1, 1), (1, 2), (1, 3), (2, 2)])
        result = SurvivalRule().evaluate(world)
        assert set(result) == world.live_cells
        assert len(result) == 4

    def test_never_emits_dead_cells(self, blinker):
        result = SurvivalRule().evaluate(blinker)
        assert all(cell in blinker for cell in result)

    def test_overcrowded_cell_dies(self):
        # Center of a plus sign has 4 live neighbors
        world = World.from_cells([(1, 1), (0, 1), (2, 1), (1, 0), (1, 2)])
        assert Coordinate(1, 1) not in SurvivalRule().evaluate(world)

    def test_empty_world(self):
        assert SurvivalRule().evaluate(World()) == []

    def test_does_not_mutate_world(self, blinker):
        before = blinker.live_cells
        SurvivalRule().evaluate(blinker)
        assert blinker.live_cells == before


class TestBirthRule:
    """Tests for BirthRule."""

    def test_dead_cell_with_three_live_neighbors_comes_alive(self):
        world = World.from_cells([(1, 2), (2, 1), (3, 2)])
        assert BirthRule().evaluate(world) == [Coordinate(2, 2)]

    def test_blinker_births(self, blinker):
        assert BirthRule().evaluate(blinker) == [Coordinate(0, 2), Coordinate(2, 2)]

    def test_reemits_live_cell_with_three_live_neighbors(self):
        world = World.from_cells([(1, 1), (1, 2), (1, 3), (2, 2)])
        assert Coordinate(1, 2) in BirthRule().evaluate(world)

    def test_each_candidate_emitted_once(self):
        world = World.from_cells([(0, 0), (1, 0), (0, 1), (1, 1)])
        result = BirthRule().evaluate(world)
        assert len(result) == len(set(result))

    def test_empty_world(self):
        assert BirthRule().evaluate(World()) == []

    def test_independent_of_insertion_order(self):
        a = World.from_cells([(1, 2), (2, 1), (3, 2), (2, 3)])
        b = World.from_cells([(2, 3), (3, 2), (2, 1), (1, 2)])
        assert BirthRule().evaluate(a) == BirthRule().evaluate(b)


class TestDefaultRules:
    """Tests for the default rule factory."""

    def test_survival_then_birth(self):
        rules = create_default_rules()
        assert [type(rule) for rule in rules] == [SurvivalRule, BirthRule]

    @pytest.mark.parametrize("rule", [SurvivalRule(), BirthRule()])
    def test_rules_are_pure(self, rule, blinker):
        assert rule.evaluate(blinker) == rule.evaluate(blinker)
