"""
Core engine primitives.

This layer knows NOTHING about patterns, arrays, or periods.
It only knows:
- Coordinates and their 8-neighborhoods
- Worlds as sets of live coordinates
- Rules that propose live cells for the next generation
- tick: the deduplicated union of rule proposals

The Simulation driver adds a generation counter and optional history on
top of the stateless tick.
"""

from sparselife.core.coordinate import Coordinate, NEIGHBOR_OFFSETS
from sparselife.core.world import World
from sparselife.core.rules import (
    Rule,
    SurvivalRule,
    BirthRule,
    count_live_neighbors,
    create_default_rules,
)
from sparselife.core.engine import tick, generations
from sparselife.core.simulation import Simulation, SimulationConfig

__all__ = [
    "Coordinate",
    "NEIGHBOR_OFFSETS",
    "World",
    "Rule",
    "SurvivalRule",
    "BirthRule",
    "count_live_neighbors",
    "create_default_rules",
    "tick",
    "generations",
    "Simulation",
    "SimulationConfig",
]
