"""
Dense views and simple statistics of sparse worlds.

Arrays here are indexed [y, x] relative to an origin, which is returned
alongside the array so the view can be mapped back onto the plane.
"""

from __future__ import annotations
from typing import Sequence

import numpy as np

from sparselife.core.coordinate import Coordinate
from sparselife.core.world import World


def bounding_box(world: World) -> tuple[int, int, int, int] | None:
    """
    Smallest box containing every live cell.

    Returns:
        (min_x, min_y, max_x, max_y), inclusive, or None for an empty world
    """
    if world.is_empty():
        return None
    xs = [c.x for c in world]
    ys = [c.y for c in world]
    return min(xs), min(ys), max(xs), max(ys)


def to_array(world: World, padding: int = 0) -> tuple[np.ndarray, tuple[int, int]]:
    """
    Dense 0/1 view of a world's bounding box.

    Args:
        world: World to convert
        padding: Dead border added on every side

    Returns:
        (array, origin) where array[y - oy, x - ox] == 1 for each live (x, y)
        and origin = (ox, oy). An empty world gives a (2p, 2p) array at (0, 0).
    """
    if padding < 0:
        raise ValueError(f"padding must be non-negative, got {padding}")

    box = bounding_box(world)
    if box is None:
        size = 2 * padding
        return np.zeros((size, size), dtype=np.uint8), (0, 0)

    min_x, min_y, max_x, max_y = box
    ox, oy = min_x - padding, min_y - padding
    width = max_x - min_x + 1 + 2 * padding
    height = max_y - min_y + 1 + 2 * padding

    array = np.zeros((height, width), dtype=np.uint8)
    for cell in world:
        array[cell.y - oy, cell.x - ox] = 1
    return array, (ox, oy)


def from_array(array: np.ndarray, origin: tuple[int, int] = (0, 0)) -> World:
    """Inverse of to_array: every non-zero entry becomes a live cell."""
    ox, oy = origin
    ys, xs = np.nonzero(array)
    return World.from_cells(
        Coordinate(int(x) + ox, int(y) + oy) for x, y in zip(xs, ys)
    )


def population_series(history: Sequence[World]) -> np.ndarray:
    """Live-cell count of each generation."""
    return np.array([len(world) for world in history], dtype=np.int64)


def center_of_mass(world: World) -> np.ndarray | None:
    """Mean (x, y) of the live cells, or None for an empty world."""
    if world.is_empty():
        return None
    points = np.array([(c.x, c.y) for c in world], dtype=np.float64)
    return points.mean(axis=0)
