"""
Pytest configuration and shared fixtures.
"""

from dataclasses import dataclass

import pytest


@dataclass(frozen=True)
class FixedCellRule:
    """Rule that always proposes the same single cell."""

    x: int = 2
    y: int = 2

    def evaluate(self, world):
        from sparselife.core import Coordinate
        return [Coordinate(self.x, self.y)]


@pytest.fixture
def fixed_cell_rule():
    """A rule that ignores the world and returns Coordinate(2, 2)."""
    return FixedCellRule()


@pytest.fixture
def blinker():
    """Vertical blinker at (1, 1), (1, 2), (1, 3)."""
    from sparselife.core import World
    return World.from_cells([(1, 1), (1, 2), (1, 3)])


@pytest.fixture
def rules():
    """The canonical [SurvivalRule, BirthRule] rule set."""
    from sparselife.core import create_default_rules
    return create_default_rules()
