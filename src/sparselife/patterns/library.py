"""
Library of well-known Life patterns.

Shapes are written in plaintext (x = column, y = row).
"""

from __future__ import annotations

from sparselife.core.world import World
from sparselife.patterns.base import Pattern
from sparselife.patterns.plaintext import parse_plaintext


def _pattern(name, text, period=None, displacement=(0, 0)) -> Pattern:
    return Pattern(name, tuple(parse_plaintext(text)), period, displacement)


# Still lifes
BLOCK = _pattern("block", """
OO
OO
""", period=1)

BEEHIVE = _pattern("beehive", """
.OO.
O..O
.OO.
""", period=1)

# Oscillators
BLINKER = _pattern("blinker", """
O
O
O
""", period=2)

TOAD = _pattern("toad", """
.OOO
OOO.
""", period=2)

BEACON = _pattern("beacon", """
OO..
OO..
..OO
..OO
""", period=2)

# Spaceships
GLIDER = _pattern("glider", """
.O.
..O
OOO
""", period=4, displacement=(1, 1))

# Methuselahs
R_PENTOMINO = _pattern("r-pentomino", """
.OO
OO.
.O.
""")

PATTERNS: dict[str, Pattern] = {
    p.name: p
    for p in (BLOCK, BEEHIVE, BLINKER, TOAD, BEACON, GLIDER, R_PENTOMINO)
}


def get_pattern(name: str) -> Pattern:
    """Look up a pattern by name."""
    try:
        return PATTERNS[name]
    except KeyError:
        raise ValueError(f"Unknown pattern: {name}") from None


def create_pattern(name: str, x: int = 0, y: int = 0) -> World:
    """
    Convenience factory for a world seeded with one named pattern.

    Args:
        name: Pattern name (see PATTERNS)
        x, y: Where to put the pattern's top-left corner

    Returns:
        New World containing the pattern
    """
    return get_pattern(name).place(x, y)
