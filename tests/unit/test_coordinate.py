"""Unit tests for Coordinate."""

from sparselife.core.coordinate import Coordinate, NEIGHBOR_OFFSETS


class TestCoordinate:
    """Tests for Coordinate value semantics."""

    def test_equal_coordinates(self):
        assert Coordinate(1, 1) == Coordinate(1, 1)

    def test_unequal_coordinates(self):
        assert Coordinate(1, 1) != Coordinate(1, 2)

    def test_hash_matches_equality(self):
        cells = {Coordinate(1, 1), Coordinate(1, 1), Coordinate(-3, 7)}
        assert len(cells) == 2

    def test_ordering_by_x_then_y(self):
        cells = [Coordinate(1, 0), Coordinate(0, 5), Coordinate(0, -1)]
        assert sorted(cells) == [Coordinate(0, -1), Coordinate(0, 5), Coordinate(1, 0)]

    def test_offset(self):
        assert Coordinate(1, 2).offset(-3, 4) == Coordinate(-2, 6)


class TestNeighbors:
    """Tests for the 8-neighborhood."""

    def test_returns_eight_distinct_neighbors(self):
        neighbors = Coordinate(1, 2).neighbors()
        assert len(neighbors) == 8
        assert len(set(neighbors)) == 8

    def test_excludes_self(self):
        assert Coordinate(1, 2) not in Coordinate(1, 2).neighbors()

    def test_neighbors_are_adjacent(self):
        center = Coordinate(-4, 9)
        for n in center.neighbors():
            assert max(abs(n.x - center.x), abs(n.y - center.y)) == 1

    def test_deterministic_order(self):
        neighbors = Coordinate(0, 0).neighbors()
        assert neighbors == [
            Coordinate(-1, -1), Coordinate(-1, 0), Coordinate(-1, 1),
            Coordinate(0, -1), Coordinate(0, 1),
            Coordinate(1, -1), Coordinate(1, 0), Coordinate(1, 1),
        ]

    def test_offsets_match_neighbors(self):
        assert len(NEIGHBOR_OFFSETS) == 8
        assert (0, 0) not in NEIGHBOR_OFFSETS
