"""
Simulation: drives the stateless tick engine over many generations.

tick() knows nothing about time. The Simulation keeps the generation
counter, optional history, and stop conditions that a driving loop needs:
- stop when the world dies out
- stop when an exact earlier generation comes back (a cycle)
- otherwise stop at a generation limit
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Sequence

from sparselife.core.engine import tick
from sparselife.core.rules import Rule, create_default_rules
from sparselife.core.world import World

log = logging.getLogger(__name__)


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    max_generations: int = 100  # Default tick budget for run()
    keep_history: bool = True  # Store every generation, seed included
    stop_when_empty: bool = True  # An empty world stays empty forever
    stop_on_cycle: bool = False  # Stop once an earlier generation recurs exactly

    def __post_init__(self):
        if self.max_generations < 0:
            raise ValueError(
                f"max_generations must be non-negative, got {self.max_generations}"
            )


@dataclass
class Simulation:
    """
    A world plus the rules that evolve it.

    Each step replaces `world` with a new World from tick(); earlier
    generations are only retained in `history` when the config asks for it.
    """

    world: World
    rules: Sequence[Rule] = field(default_factory=create_default_rules)
    config: SimulationConfig = field(default_factory=SimulationConfig)

    # Simulation state
    generation: int = field(default=0, init=False)
    history: list[World] = field(default_factory=list, init=False)

    # live cells -> generation first seen, for cycle detection
    _seen: dict[frozenset, int] = field(default_factory=dict, init=False, repr=False)
    _repeat_of: int | None = field(default=None, init=False, repr=False)

    def __post_init__(self):
        self._record(self.world)

    def reset(self, world: World) -> None:
        """Start over from a new seed world."""
        self.world = world
        self.generation = 0
        self.history = []
        self._seen = {}
        self._repeat_of = None
        self._record(world)

    def step(self) -> World:
        """Advance one generation and return the new world."""
        self.world = tick(self.world, self.rules)
        self.generation += 1
        self._repeat_of = self._record(self.world)
        log.debug("generation %d population=%d", self.generation, len(self.world))
        return self.world

    def run(self, n_generations: int | None = None) -> dict:
        """
        Run up to n generations.

        Args:
            n_generations: Tick budget (defaults to config.max_generations)

        Returns:
            Statistics dictionary
        """
        if n_generations is None:
            n_generations = self.config.max_generations
        if n_generations < 0:
            raise ValueError(f"n_generations must be non-negative, got {n_generations}")

        populations = [len(self.world)]
        stop_reason = "limit"
        cycle_period = None
        start = self.generation

        for _ in range(n_generations):
            if self.config.stop_when_empty and self.world.is_empty():
                stop_reason = "empty"
                break

            world = self.step()
            populations.append(len(world))

            if self.config.stop_on_cycle and self._repeat_of is not None:
                stop_reason = "cycle"
                cycle_period = self.generation - self._repeat_of
                break
        else:
            if self.config.stop_when_empty and self.world.is_empty():
                stop_reason = "empty"

        if stop_reason != "limit":
            log.info("simulation stopped at generation %d: %s", self.generation, stop_reason)

        return {
            "n_generations": self.generation - start,
            "generation": self.generation,
            "population": len(self.world),
            "min_population": min(populations),
            "max_population": max(populations),
            "stop_reason": stop_reason,
            "cycle_period": cycle_period,
        }

    def _record(self, world: World) -> int | None:
        """Store `world` and return the generation it was first seen at, if any."""
        if self.config.keep_history:
            self.history.append(world)

        if not self.config.stop_on_cycle:
            return None

        key = world.live_cells
        first_seen = self._seen.get(key)
        if first_seen is None:
            self._seen[key] = self.generation
        return first_seen
