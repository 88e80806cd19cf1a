"""
Validate the sparse engine against a dense reference step.

The reference counts neighbors with a 2D convolution. Live cells are first
grouped into clusters: two cells more than 2 apart (Chebyshev distance)
share no neighbor, so clusters never influence each other and each one is
convolved over its own bounding box, padded by one dead cell on each side.
Every cell that could be born lies within one cell of a live cell, so the
padded boxes are enough and the result matches an unbounded plane exactly,
however far apart the clusters are.

If the sparse rules and the dense step agree, the engine is computing
standard B3/S23 Life.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, TYPE_CHECKING

import numpy as np
from scipy.signal import convolve2d
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import connected_components

from sparselife.analysis.statistics import to_array, from_array
from sparselife.core.engine import tick
from sparselife.core.rules import create_default_rules
from sparselife.core.world import World

if TYPE_CHECKING:
    from sparselife.core.coordinate import Coordinate
    from sparselife.core.rules import Rule

NEIGHBOR_KERNEL = np.array([[1, 1, 1],
                            [1, 0, 1],
                            [1, 1, 1]], dtype=np.int64)

# Offsets within Chebyshev distance 2; cells this close can share a neighbor
CLUSTER_OFFSETS = tuple(
    (dx, dy)
    for dx in range(-2, 3)
    for dy in range(-2, 3)
    if (dx, dy) != (0, 0)
)


@dataclass
class ComparisonResult:
    """Results of comparing the engine's next generation with the reference."""

    expected: World  # Dense reference step
    actual: World    # Sparse engine step

    missing: frozenset["Coordinate"]     # In expected, not produced by the engine
    unexpected: frozenset["Coordinate"]  # Produced by the engine, not expected

    @property
    def matches(self) -> bool:
        return not self.missing and not self.unexpected


def reference_step(world: World) -> World:
    """
    Compute the next B3/S23 generation with per-cluster dense arrays.

    Args:
        world: Current generation

    Returns:
        Next generation as a new World
    """
    next_world = World()
    for cluster in split_clusters(world):
        for cell in _dense_step(cluster):
            next_world.add(cell)
    return next_world


def split_clusters(world: World) -> list[World]:
    """
    Group live cells into clusters that cannot affect each other in one tick.

    Cells within Chebyshev distance 2 of each other are linked; each
    connected component of that graph is one cluster.

    Returns:
        One World per cluster (empty list for an empty world)
    """
    cells = sorted(world.live_cells)
    if not cells:
        return []

    index = {cell: i for i, cell in enumerate(cells)}
    rows, cols = [], []
    for i, cell in enumerate(cells):
        for dx, dy in CLUSTER_OFFSETS:
            j = index.get(cell.offset(dx, dy))
            if j is not None:
                rows.append(i)
                cols.append(j)

    n = len(cells)
    graph = coo_matrix((np.ones(len(rows), dtype=np.int8), (rows, cols)), shape=(n, n))
    n_clusters, labels = connected_components(graph, directed=False)

    clusters = [World() for _ in range(n_clusters)]
    for cell, label in zip(cells, labels):
        clusters[label].add(cell)
    return clusters


def _dense_step(cluster: World) -> World:
    grid, origin = to_array(cluster, padding=1)
    counts = convolve2d(
        grid.astype(np.int64), NEIGHBOR_KERNEL, mode="same", boundary="fill", fillvalue=0
    )

    alive = grid == 1
    survivors = alive & ((counts == 2) | (counts == 3))
    births = ~alive & (counts == 3)
    return from_array(survivors | births, origin)


def compare_with_reference(
    world: World,
    rules: Sequence["Rule"] | None = None,
) -> ComparisonResult:
    """
    Tick `world` with `rules` and compare against reference_step.

    Args:
        world: Current generation
        rules: Rules for the engine (default: create_default_rules())

    Returns:
        ComparisonResult with both generations and their differences
    """
    if rules is None:
        rules = create_default_rules()

    expected = reference_step(world)
    actual = tick(world, rules)

    return ComparisonResult(
        expected=expected,
        actual=actual,
        missing=expected.live_cells - actual.live_cells,
        unexpected=actual.live_cells - expected.live_cells,
    )
