"""
Line catalogs for the 3x3 and 5x5 grids.

A line is a triple of flat board indices. On 3x3 there are the 8 classic
lines; on 5x5 every run of 3 consecutive cells along rows, columns and both
diagonal directions counts (48 lines).
"""

from typing import Dict, List, Tuple

import numpy as np

Line = Tuple[int, ...]

# Winning lines (rows, columns, diagonals)
CLASSIC_LINES: List[Line] = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
]

LINE_LENGTH = 3


def index_to_coord(index: int, size: int) -> Tuple[int, int]:
    """Convert flat index to (row, col)."""
    return index // size, index % size


def coord_to_index(row: int, col: int, size: int) -> int:
    """Convert (row, col) to flat index."""
    return row * size + col


def generate_lines(size: int, length: int = LINE_LENGTH) -> List[Line]:
    """
    Enumerate every run of `length` cells on a size x size grid.

    Order: rows, columns, diagonals (top-left to bottom-right), then
    anti-diagonals (top-right to bottom-left). Runs never wrap across rows.
    """
    grid = np.arange(size * size).reshape(size, size)
    span = size - length + 1
    lines: List[Line] = []

    # Horizontal
    for r in range(size):
        for c in range(span):
            lines.append(tuple(int(i) for i in grid[r, c:c + length]))

    # Vertical
    for r in range(span):
        for c in range(size):
            lines.append(tuple(int(i) for i in grid[r:r + length, c]))

    # Diagonal
    for r in range(span):
        for c in range(span):
            window = grid[r:r + length, c:c + length]
            lines.append(tuple(int(i) for i in np.diagonal(window)))

    # Anti-diagonal
    for r in range(span):
        for c in range(span):
            window = grid[r:r + length, c:c + length]
            lines.append(tuple(int(i) for i in np.diagonal(np.fliplr(window))))

    return lines


def _build_catalogs() -> Dict[int, List[Line]]:
    return {3: list(CLASSIC_LINES), 5: generate_lines(5)}


def _build_index(catalogs: Dict[int, List[Line]]) -> Dict[int, List[List[Line]]]:
    """Map each cell to the lines passing through it."""
    index = {}
    for size, lines in catalogs.items():
        through: List[List[Line]] = [[] for _ in range(size * size)]
        for line in lines:
            for i in line:
                through[i].append(line)
        index[size] = through
    return index


# Pre-computed catalogs, keyed by board side length
LINE_CATALOGS = _build_catalogs()
_LINES_THROUGH = _build_index(LINE_CATALOGS)


def lines_for(variant) -> List[Line]:
    """Return the line catalog for a variant (or a bare board side length)."""
    size = variant if isinstance(variant, int) else variant.size
    try:
        return LINE_CATALOGS[size]
    except KeyError:
        raise ValueError(f"Unsupported board size: {size}") from None


def lines_through(variant, index: int) -> List[Line]:
    """Return the catalog lines that contain `index`."""
    size = variant if isinstance(variant, int) else variant.size
    return _LINES_THROUGH[size][index]
