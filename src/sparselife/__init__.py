"""
sparselife: a sparse, rule-composable Game of Life engine.

The simulation runs on an unbounded integer plane. Only live cells are
stored, so a generation is just a set of coordinates.

Core concepts:
- Coordinate: an immutable (x, y) pair that knows its 8 neighbors
- World: the set of live cells for one generation
- Rule: anything with evaluate(world) -> candidate cells for next generation
- tick: unions the output of an ordered rule list into a fresh World

Analysis (dense views, period detection, reference stepping) and a small
pattern library are layered on top and never feed back into the engine.
"""

__version__ = "0.1.0"
