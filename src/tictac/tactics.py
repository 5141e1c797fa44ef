"""
One-ply tactical checks: take an immediate win, else block the opponent's.

Placements are simulated through make_move/unmake_move so the infinite
variant's eviction is taken into account (a piece that would vanish cannot
help complete a line).
"""

from typing import List, Optional

from .game import EMPTY, Histories, Variant, make_move, unmake_move
from .lines import lines_through


def completes_line(
    board: List[int],
    histories: Histories,
    side: int,
    index: int,
    variant: Variant,
) -> bool:
    """True if placing `side` at `index` completes a line through `index`."""
    evicted = make_move(board, histories, side, index, variant)
    try:
        return any(
            all(board[i] == side for i in line)
            for line in lines_through(variant, index)
        )
    finally:
        unmake_move(board, histories, side, index, evicted)


def find_winning_move(
    board: List[int],
    histories: Histories,
    side: int,
    variant: Variant,
) -> Optional[int]:
    """Lowest empty index that completes a line for `side`."""
    for i, v in enumerate(board):
        if v == EMPTY and completes_line(board, histories, side, i, variant):
            return i
    return None


def find_blocking_move(
    board: List[int],
    histories: Histories,
    side: int,
    variant: Variant,
) -> Optional[int]:
    """Lowest empty index where the opponent of `side` would complete a line."""
    return find_winning_move(board, histories, -side, variant)


def quick_move(
    board: List[int],
    histories: Histories,
    side: int,
    variant: Variant,
) -> Optional[int]:
    """Immediate win, else immediate block, else None."""
    move = find_winning_move(board, histories, side, variant)
    if move is None:
        move = find_blocking_move(board, histories, side, variant)
    return move
