"""
Patterns: well-known seed configurations for the engine.

Patterns only produce Worlds. They don't know about rules or ticks.
- Pattern: a named, normalized cell shape with its known period
- BLINKER, TOAD, BEACON: period-2 oscillators
- BLOCK, BEEHIVE: still lifes
- GLIDER: the smallest spaceship
- parse_plaintext / to_plaintext: the ".O" text format
"""

from sparselife.patterns.base import Pattern
from sparselife.patterns.plaintext import parse_plaintext, to_plaintext
from sparselife.patterns.library import (
    BLOCK,
    BEEHIVE,
    BLINKER,
    TOAD,
    BEACON,
    GLIDER,
    R_PENTOMINO,
    PATTERNS,
    get_pattern,
    create_pattern,
)

__all__ = [
    "Pattern",
    "parse_plaintext",
    "to_plaintext",
    "BLOCK",
    "BEEHIVE",
    "BLINKER",
    "TOAD",
    "BEACON",
    "GLIDER",
    "R_PENTOMINO",
    "PATTERNS",
    "get_pattern",
    "create_pattern",
]
