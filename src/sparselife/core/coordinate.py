"""
Coordinate: a cell address on the unbounded integer plane.

Coordinates are values. Two coordinates with the same x and y are equal and
hash the same, so they can be used directly as set members and dict keys.
"""

from __future__ import annotations
from dataclasses import dataclass


# Moore neighborhood, dx outer and dy inner, both ascending
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy)
    for dx in (-1, 0, 1)
    for dy in (-1, 0, 1)
    if (dx, dy) != (0, 0)
)


@dataclass(frozen=True, order=True)
class Coordinate:
    """An immutable (x, y) integer pair."""

    x: int
    y: int

    def neighbors(self) -> list[Coordinate]:
        """
        Return the 8 coordinates adjacent to this one.

        The order is fixed (dx outer, dy inner, both ascending) so that
        anything built on top of it is reproducible.
        """
        return [Coordinate(self.x + dx, self.y + dy) for dx, dy in NEIGHBOR_OFFSETS]

    def offset(self, dx: int, dy: int) -> Coordinate:
        """Return this coordinate translated by (dx, dy)."""
        return Coordinate(self.x + dx, self.y + dy)

    def __repr__(self) -> str:
        return f"Coordinate({self.x}, {self.y})"
