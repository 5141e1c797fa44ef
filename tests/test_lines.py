"""
Tests for the line catalogs.
"""

from tictac.game import CLASSIC, INFINITE, SCORING
from tictac.lines import (
    CLASSIC_LINES,
    coord_to_index,
    generate_lines,
    index_to_coord,
    lines_for,
    lines_through,
)


class TestClassicCatalog:
    """3x3 lines."""

    def test_generated_matches_fixed_triples(self):
        """Generating size 3 reproduces the 8 classic lines in catalog order."""
        assert generate_lines(3) == CLASSIC_LINES

    def test_classic_and_infinite_share_catalog(self):
        assert lines_for(CLASSIC) == CLASSIC_LINES
        assert lines_for(INFINITE) == CLASSIC_LINES

    def test_lines_through_center_and_corner(self):
        assert len(lines_through(CLASSIC, 4)) == 4
        assert len(lines_through(CLASSIC, 0)) == 3
        assert len(lines_through(CLASSIC, 1)) == 2


class TestScoringCatalog:
    """5x5 lines: every run of 3 along rows, columns and diagonals."""

    def test_line_count(self):
        # 15 horizontal + 15 vertical + 9 diagonal + 9 anti-diagonal
        assert len(lines_for(SCORING)) == 48

    def test_lines_are_unique(self):
        lines = lines_for(SCORING)
        assert len(set(lines)) == len(lines)

    def test_lines_in_bounds_without_wraparound(self):
        """Each step along a line moves by the same (row, col) delta."""
        allowed = {(0, 1), (1, 0), (1, 1), (1, -1)}
        for line in lines_for(SCORING):
            assert len(line) == 3
            assert all(0 <= i < 25 for i in line), f"Out of bounds: {line}"
            coords = [index_to_coord(i, 5) for i in line]
            deltas = {
                (coords[k + 1][0] - coords[k][0], coords[k + 1][1] - coords[k][1])
                for k in range(2)
            }
            assert len(deltas) == 1, f"Bent line: {line}"
            assert deltas <= allowed, f"Wrapped line: {line}"

    def test_expected_strides(self):
        lines = set(lines_for(SCORING))
        assert (0, 1, 2) in lines
        assert (2, 7, 12) in lines
        assert (0, 6, 12) in lines
        assert (2, 6, 10) in lines
        # Row-wrapping run is not a line
        assert (3, 4, 5) not in lines

    def test_center_belongs_to_twelve_lines(self):
        assert len(lines_through(SCORING, 12)) == 12
        assert len(lines_through(SCORING, 0)) == 3


class TestCoordinates:

    def test_roundtrip_helpers(self):
        assert coord_to_index(2, 3, 5) == 13
        assert index_to_coord(13, 5) == (2, 3)
