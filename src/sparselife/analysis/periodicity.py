"""
Detect oscillators and spaceships from a generation history.

Two generations have the same "shape" when one is a translation of the
other. A shape that recurs after p generations with no net translation is
an oscillator of period p (a still life when p == 1); a shape that recurs
shifted is a spaceship.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, TYPE_CHECKING

from sparselife.analysis.statistics import bounding_box
from sparselife.core.engine import generations
from sparselife.core.rules import create_default_rules

if TYPE_CHECKING:
    from sparselife.core.rules import Rule
    from sparselife.core.world import World


@dataclass(frozen=True)
class PeriodResult:
    """A detected cycle in a generation history."""

    period: int                     # Generations per cycle
    start: int                      # First generation that is part of the cycle
    displacement: tuple[int, int]   # (dx, dy) translation per cycle

    @property
    def is_moving(self) -> bool:
        return self.displacement != (0, 0)


def normalize(world: "World") -> tuple[frozenset[tuple[int, int]], tuple[int, int]]:
    """
    Split a world into its shape and its position.

    Returns:
        (shape, origin): cells translated so the bounding box starts at
        (0, 0), and the (x, y) of the original bounding box corner.
        An empty world is (frozenset(), (0, 0)).
    """
    box = bounding_box(world)
    if box is None:
        return frozenset(), (0, 0)
    ox, oy = box[0], box[1]
    shape = frozenset((c.x - ox, c.y - oy) for c in world)
    return shape, (ox, oy)


def detect_period(history: Sequence["World"]) -> PeriodResult | None:
    """
    Find the first shape that repeats in `history`.

    Args:
        history: Consecutive generations, oldest first

    Returns:
        PeriodResult for the earliest repeat, or None if no shape repeats
    """
    seen: dict[frozenset, tuple[int, tuple[int, int]]] = {}
    for index, world in enumerate(history):
        shape, origin = normalize(world)
        if shape in seen:
            first, first_origin = seen[shape]
            return PeriodResult(
                period=index - first,
                start=first,
                displacement=(origin[0] - first_origin[0], origin[1] - first_origin[1]),
            )
        seen[shape] = (index, origin)
    return None


def classify(
    world: "World",
    rules: Sequence["Rule"] | None = None,
    max_generations: int = 64,
) -> str:
    """
    Evolve `world` and name what it turns into.

    Args:
        world: Seed generation
        rules: Rules to evolve with (default: create_default_rules())
        max_generations: How many ticks to try before giving up

    Returns:
        "extinct", "still_life", "oscillator", "spaceship" or "unknown"
    """
    if rules is None:
        rules = create_default_rules()

    history = []
    for generation in generations(world, rules):
        history.append(generation)
        if generation.is_empty():
            return "extinct"
        result = detect_period(history)
        if result is not None:
            if result.is_moving:
                return "spaceship"
            return "still_life" if result.period == 1 else "oscillator"
        if len(history) > max_generations:
            break
    return "unknown"
