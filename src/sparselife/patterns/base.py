"""
Base class for patterns.

A pattern is a shape, not a position: its cells are stored normalized so
the top-left of its bounding box sits at (0, 0). Placing a pattern
translates that shape into a World.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from sparselife.core.coordinate import Coordinate
from sparselife.core.world import World


def _normalize(cells: Iterable[Coordinate]) -> tuple[Coordinate, ...]:
    cells = set(cells)
    if not cells:
        return ()
    min_x = min(c.x for c in cells)
    min_y = min(c.y for c in cells)
    return tuple(sorted(c.offset(-min_x, -min_y) for c in cells))


@dataclass(frozen=True)
class Pattern:
    """A named cell shape."""

    name: str
    cells: tuple[Coordinate, ...]
    period: int | None = None  # None: not periodic (or unknown)
    displacement: tuple[int, int] = (0, 0)  # Translation per period

    def __post_init__(self):
        object.__setattr__(self, "cells", _normalize(self.cells))

    @classmethod
    def from_pairs(
        cls,
        name: str,
        pairs: Iterable[tuple[int, int]],
        period: int | None = None,
        displacement: tuple[int, int] = (0, 0),
    ) -> Pattern:
        """Convenience constructor from plain (x, y) pairs."""
        return cls(name, tuple(Coordinate(x, y) for x, y in pairs), period, displacement)

    @property
    def width(self) -> int:
        return max((c.x for c in self.cells), default=-1) + 1

    @property
    def height(self) -> int:
        return max((c.y for c in self.cells), default=-1) + 1

    def add_to(self, world: World, x: int = 0, y: int = 0) -> World:
        """Add this pattern to an existing world with its top-left at (x, y)."""
        for cell in self.cells:
            world.add(cell.offset(x, y))
        return world

    def place(self, x: int = 0, y: int = 0) -> World:
        """Return a new world containing only this pattern, top-left at (x, y)."""
        return self.add_to(World(), x, y)

    def __len__(self) -> int:
        return len(self.cells)
