"""
Rules propose which cells are alive in the next generation.

A rule is any object with evaluate(world) -> list[Coordinate]. Rules are
pure: they read the world, never modify it, and return the same sequence
for equal worlds. Duplicates inside or across rule outputs are fine; the
engine removes them when it builds the next World.

The two classic Conway rules are split into separate objects:
- SurvivalRule: a live cell with 2 or 3 live neighbors stays alive
- BirthRule: any cell with exactly 3 live neighbors is alive

BirthRule does not check whether its candidate was dead. A live cell with
3 live neighbors is proposed by both rules and collapses to one cell in
tick().
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from sparselife.core.coordinate import Coordinate
    from sparselife.core.world import World


class Rule(Protocol):
    """Protocol for next-generation rules."""

    def evaluate(self, world: "World") -> list["Coordinate"]:
        """
        Propose cells that should be alive in the next generation.

        Args:
            world: Current generation (must not be modified)

        Returns:
            Candidate coordinates, possibly with duplicates
        """
        ...


def count_live_neighbors(world: "World", coordinate: "Coordinate") -> int:
    """Count how many of the 8 neighbors of `coordinate` are live in `world`."""
    return sum(1 for neighbor in coordinate.neighbors() if neighbor in world)


@dataclass(frozen=True)
class SurvivalRule:
    """
    Keeps live cells that have exactly 2 or 3 live neighbors.

    Only ever emits cells that are currently alive; it decides survival,
    never birth.
    """

    def evaluate(self, world: "World") -> list["Coordinate"]:
        return [
            cell
            for cell in sorted(world.live_cells)
            if count_live_neighbors(world, cell) in (2, 3)
        ]


@dataclass(frozen=True)
class BirthRule:
    """
    Brings to life every cell adjacent to life that has exactly 3 live neighbors.

    Candidates are the neighbors of all live cells. A cell next to several
    live cells shows up several times in that neighborhood, but each distinct
    candidate is counted and emitted once.
    """

    def evaluate(self, world: "World") -> list["Coordinate"]:
        candidates: dict["Coordinate", None] = {}
        for cell in sorted(world.live_cells):
            for neighbor in cell.neighbors():
                candidates.setdefault(neighbor, None)

        return [
            candidate
            for candidate in candidates
            if count_live_neighbors(world, candidate) == 3
        ]


def create_default_rules() -> list[Rule]:
    """
    Factory for the canonical Conway rule set.

    Returns:
        [SurvivalRule(), BirthRule()], in that order
    """
    return [SurvivalRule(), BirthRule()]
