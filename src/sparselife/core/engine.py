"""
The tick engine: one generation in, the next generation out.

tick() is a pure function of (world, rules). It holds no state between
calls; the caller decides whether to keep old generations around.
"""

from __future__ import annotations
from typing import Iterator, Sequence, TYPE_CHECKING

from sparselife.core.world import World

if TYPE_CHECKING:
    from sparselife.core.rules import Rule


def tick(world: World, rules: Sequence["Rule"]) -> World:
    """
    Compute the next generation.

    Every rule is evaluated against the same, unmodified input world. Their
    outputs are concatenated in rule order and deduplicated, so the result
    does not depend on which rule proposed a cell first.

    With no rules nothing is ever proposed, and the result is empty even if
    the input world was not.

    Args:
        world: Current generation
        rules: Ordered rules to apply

    Returns:
        A new World; the input is left untouched
    """
    candidates = []
    for rule in rules:
        candidates.extend(rule.evaluate(world))

    next_world = World()
    for coordinate in dict.fromkeys(candidates):
        next_world.add(coordinate)
    return next_world


def generations(world: World, rules: Sequence["Rule"]) -> Iterator[World]:
    """
    Yield the trajectory world, tick(world), tick(tick(world)), ...

    The iterator never ends on its own; bound it with itertools.islice or
    break out of the loop.
    """
    current = world
    while True:
        yield current
        current = tick(current, rules)
