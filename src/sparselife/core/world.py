"""
World: the set of live cells for one generation.

A World is built by adding cells one at a time and is then treated as
read-only input to the rules. tick() always returns a brand-new World, so
generations are never shared.
"""

from __future__ import annotations
from typing import Iterable, Iterator

from sparselife.core.coordinate import Coordinate


class World:
    """
    Sparse collection of live coordinates.

    There is no removal: a generation only grows while it is being
    constructed.
    """

    __hash__ = None  # mutable during construction

    def __init__(self):
        self._cells: set[Coordinate] = set()

    @classmethod
    def from_cells(cls, cells: Iterable[Coordinate | tuple[int, int]]) -> World:
        """Build a world from Coordinates or plain (x, y) pairs."""
        world = cls()
        for cell in cells:
            if not isinstance(cell, Coordinate):
                cell = Coordinate(*cell)
            world.add(cell)
        return world

    def is_empty(self) -> bool:
        return not self._cells

    def add(self, coordinate: Coordinate) -> None:
        """Mark a cell live. Adding a live cell again is a no-op."""
        self._cells.add(coordinate)

    def contains(self, coordinate: Coordinate) -> bool:
        return coordinate in self._cells

    __contains__ = contains

    @property
    def live_cells(self) -> frozenset[Coordinate]:
        """Read-only view of the live cells."""
        return frozenset(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, World):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        cells = ", ".join(f"({c.x}, {c.y})" for c in sorted(self._cells))
        return f"World({{{cells}}})"
