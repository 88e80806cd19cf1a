"""
Demo: Track a glider and validate the engine.

The demo:
1. Seeds a world with a glider
2. Runs a Simulation and checks every step against the dense reference
3. Detects the glider's period and displacement from the history
4. Classifies every pattern in the library
"""

import logging

from sparselife.analysis import (
    center_of_mass,
    classify,
    compare_with_reference,
    detect_period,
    population_series,
)
from sparselife.core import Simulation, SimulationConfig
from sparselife.patterns import GLIDER, PATTERNS, to_plaintext


def main():
    """Run the glider demo."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    n_generations = 20

    print("=" * 60)
    print("Glider Demo")
    print("=" * 60)

    print("\n1. Seeding world with a glider...")
    config = SimulationConfig(max_generations=n_generations)
    sim = Simulation(GLIDER.place(0, 0), config=config)
    print(to_plaintext(sim.world))

    print(f"\n2. Running {n_generations} generations with reference checks...")
    mismatches = 0
    for _ in range(n_generations):
        if not compare_with_reference(sim.world, sim.rules).matches:
            mismatches += 1
        sim.step()
    print(f"   Reference mismatches: {mismatches}")
    print(f"   Populations: {population_series(sim.history).tolist()}")
    print(f"   Center of mass: {center_of_mass(sim.world)}")

    print("\n3. Detecting period...")
    result = detect_period(sim.history)
    if result is None:
        print("   No period found")
    else:
        print(f"   Period: {result.period}, displacement: {result.displacement}")

    print("\n4. Classifying library patterns...")
    for name, pattern in PATTERNS.items():
        print(f"   {name:>12}: {classify(pattern.place())}")


if __name__ == "__main__":
    main()
