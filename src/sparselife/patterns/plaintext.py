"""
Plaintext pattern format.

One text row per y, one character per x:
    !Name: Glider
    .O.
    ..O
    OOO

'O' (or '*') is a live cell, '.' is dead, lines starting with '!' are
comments. Trailing dead cells may be omitted.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from sparselife.core.coordinate import Coordinate

if TYPE_CHECKING:
    from sparselife.core.world import World

LIVE_CHARS = frozenset("O*")
DEAD_CHARS = frozenset(".")


def parse_plaintext(text: str) -> set[Coordinate]:
    """
    Parse plaintext into a set of live coordinates.

    Raises:
        ValueError: on any character other than a live or dead marker
    """
    cells = set()
    y = 0
    for line in text.splitlines():
        line = line.rstrip()
        if line.startswith("!"):
            continue
        for x, char in enumerate(line):
            if char in LIVE_CHARS:
                cells.add(Coordinate(x, y))
            elif char not in DEAD_CHARS:
                raise ValueError(f"Unexpected character {char!r} at row {y}, column {x}")
        y += 1
    return cells


def to_plaintext(world: "World", live: str = "O", dead: str = ".") -> str:
    """Render the bounding box of a world as plaintext rows (empty world -> "")."""
    if world.is_empty():
        return ""

    cells = world.live_cells
    min_x = min(c.x for c in cells)
    max_x = max(c.x for c in cells)
    min_y = min(c.y for c in cells)
    max_y = max(c.y for c in cells)

    rows = []
    for y in range(min_y, max_y + 1):
        rows.append("".join(
            live if Coordinate(x, y) in cells else dead
            for x in range(min_x, max_x + 1)
        ))
    return "\n".join(rows)
