"""
Demo: Play a blinker.

The blinker is the smallest oscillator: three cells in a line that flip
between vertical and horizontal every generation.

The demo:
1. Seeds a world with a vertical blinker at (1, 1)-(1, 3)
2. Ticks it 10 times with the canonical rule set
3. Prints every generation's live cells and its plaintext picture
"""

from itertools import islice

from sparselife.core import Coordinate, World, create_default_rules, generations
from sparselife.patterns import to_plaintext


def main():
    """Run the blinker demo."""
    print("=" * 60)
    print("Blinker Demo")
    print("=" * 60)

    world = World()
    world.add(Coordinate(1, 1))
    world.add(Coordinate(1, 2))
    world.add(Coordinate(1, 3))

    rules = create_default_rules()
    for index, generation in enumerate(islice(generations(world, rules), 11)):
        cells = ", ".join(f"({c.x}, {c.y})" for c in sorted(generation.live_cells))
        print(f"\nGeneration {index}: {cells}")
        print(to_plaintext(generation))


if __name__ == "__main__":
    main()
