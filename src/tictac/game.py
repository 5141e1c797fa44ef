"""
Tic-tac-toe rules for three variants and the move simulator.

Board representation: list[int] of length 9 (3x3) or 25 (5x5)
  - 0: empty
  - +1: X (moves first)
  - -1: O

Variants:
  - classic:  3x3, first completed line wins
  - scoring:  5x5, most completed three-in-a-rows wins once the board is
              (nearly) full
  - infinite: 3x3, each side keeps at most 3 live pieces; placing a 4th
              removes that side's oldest piece before the win check
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Tuple

from .lines import Line, lines_for

logger = logging.getLogger(__name__)

EMPTY = 0
X = +1
O = -1

SIDE_NAMES = {X: "X", O: "O"}

EASY = "easy"
HARD = "hard"
DIFFICULTIES = (EASY, HARD)

# Per-side placement order, oldest on the left
Histories = Dict[int, Deque[int]]


@dataclass(frozen=True)
class Variant:
    """Rule set parameters every component dispatches on."""
    name: str
    size: int
    scoring: bool = False
    max_pieces: Optional[int] = None  # live-piece cap (FIFO eviction)
    easy_depth: int = 6
    hard_depth: int = 6
    opening_cells: Tuple[int, ...] = ()

    @property
    def cells(self) -> int:
        return self.size * self.size

    @property
    def evicts(self) -> bool:
        return self.max_pieces is not None

    def depth_for(self, difficulty: str) -> int:
        return self.easy_depth if difficulty == EASY else self.hard_depth


CLASSIC = Variant(
    "classic", 3,
    easy_depth=6, hard_depth=6,
    opening_cells=(0, 2, 6, 8, 4),
)
SCORING = Variant(
    "scoring", 5, scoring=True,
    easy_depth=3, hard_depth=3,
    opening_cells=(12, 6, 7, 8, 11, 13, 16, 17, 18),
)
INFINITE = Variant(
    "infinite", 3, max_pieces=3,
    easy_depth=4, hard_depth=8,
    opening_cells=(0, 2, 6, 8, 4),
)

VARIANTS = {v.name: v for v in (CLASSIC, SCORING, INFINITE)}


def get_variant(name: str) -> Variant:
    """Look up a variant by name."""
    try:
        return VARIANTS[name]
    except KeyError:
        raise ValueError(f"Unknown variant {name!r}; expected one of {sorted(VARIANTS)}") from None


def check_difficulty(difficulty: str) -> str:
    if difficulty not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty {difficulty!r}; expected one of {DIFFICULTIES}")
    return difficulty


@dataclass
class Outcome:
    """
    Result of evaluating a board.

    winner is X, O, or 0 (draw or still ongoing). For the scoring variant
    `lines` holds every completed line and `counts` the per-side totals.
    """
    done: bool
    winner: int = 0
    lines: List[Line] = field(default_factory=list)
    counts: Optional[Dict[int, int]] = None

    @property
    def ongoing(self) -> bool:
        return not self.done

    @property
    def is_draw(self) -> bool:
        return self.done and self.winner == 0


def empty_board(variant: Variant) -> List[int]:
    return [EMPTY] * variant.cells


def new_histories() -> Histories:
    return {X: deque(), O: deque()}


def copy_histories(histories: Histories) -> Histories:
    return {side: deque(moves) for side, moves in histories.items()}


def check_board(board: List[int], variant: Variant) -> None:
    """Raise ValueError if the board does not fit the variant."""
    if len(board) != variant.cells:
        raise ValueError(
            f"{variant.name} board needs {variant.cells} cells, got {len(board)}"
        )


def check_histories(board: List[int], histories: Histories, variant: Variant) -> None:
    """
    Raise ValueError unless each side's history lists exactly its pieces on
    the board, within the live-piece cap. Only enforced for evicting variants.
    """
    if not variant.evicts:
        return
    for side in (X, O):
        moves = histories.get(side, ())
        on_board = {i for i, v in enumerate(board) if v == side}
        if len(moves) != len(on_board) or set(moves) != on_board:
            raise ValueError(f"Move history for {SIDE_NAMES[side]} does not match the board")
        if len(moves) > variant.max_pieces:
            raise ValueError(
                f"{SIDE_NAMES[side]} has {len(moves)} live pieces, cap is {variant.max_pieces}"
            )


def legal_moves(board: List[int]) -> List[int]:
    """Return list of legal move indices (empty squares)."""
    return [i for i, v in enumerate(board) if v == EMPTY]


def side_to_move(board: List[int]) -> int:
    """Infer side to move from board state (X plays first)."""
    x_cnt = sum(1 for v in board if v == X)
    o_cnt = sum(1 for v in board if v == O)
    return X if x_cnt == o_cnt else O


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

def classic_outcome(board: List[int]) -> Outcome:
    """
    Evaluate a 3x3 board.

    The first fully occupied line in catalog order wins; after an eviction two
    lines can exist at once and only the first one is reported.
    """
    for line in lines_for(3):
        a, b, c = line
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return Outcome(True, board[a], [line])
    if all(v != EMPTY for v in board):
        return Outcome(True, 0)
    return Outcome(False)


def count_three_in_a_row(board: List[int], variant: Variant = SCORING) -> Tuple[Dict[int, int], List[Line]]:
    """
    Count every completed line per side.

    Lines sharing a cell are counted independently.

    Returns:
        ({X: n, O: m}, completed_lines)
    """
    counts = {X: 0, O: 0}
    completed: List[Line] = []
    for line in lines_for(variant):
        first = board[line[0]]
        if first != EMPTY and all(board[i] == first for i in line[1:]):
            counts[first] += 1
            completed.append(line)
    return counts, completed


def is_scoring_terminal(board: List[int]) -> bool:
    # One vacancy also ends the game.
    return sum(1 for v in board if v == EMPTY) <= 1


def scoring_outcome(board: List[int], variant: Variant = SCORING) -> Outcome:
    """Evaluate a scoring-variant board; counts are reported even mid-game."""
    counts, completed = count_three_in_a_row(board, variant)
    if not is_scoring_terminal(board):
        return Outcome(False, 0, completed, counts)
    if counts[X] > counts[O]:
        winner = X
    elif counts[O] > counts[X]:
        winner = O
    else:
        winner = 0
    return Outcome(True, winner, completed, counts)


def evaluate(board: List[int], variant: Variant) -> Outcome:
    """Rules entry point: call after every placement."""
    check_board(board, variant)
    if variant.scoring:
        return scoring_outcome(board, variant)
    return classic_outcome(board)


# ---------------------------------------------------------------------------
# Move simulation
# ---------------------------------------------------------------------------

def make_move(
    board: List[int],
    histories: Histories,
    side: int,
    index: int,
    variant: Variant,
) -> Optional[int]:
    """
    Place `side` at `index` in place.

    Under a live-piece cap the side's oldest piece is removed first when the
    cap is already reached. The target must be empty before any eviction.

    Returns:
        The evicted index, or None.
    """
    if board[index] != EMPTY:
        raise ValueError(f"Position {index} is not empty")

    moves = histories[side]
    evicted = None
    if variant.evicts and len(moves) >= variant.max_pieces:
        evicted = moves.popleft()
        board[evicted] = EMPTY

    board[index] = side
    moves.append(index)
    return evicted


def unmake_move(
    board: List[int],
    histories: Histories,
    side: int,
    index: int,
    evicted: Optional[int],
) -> None:
    """Exact inverse of make_move."""
    board[index] = EMPTY
    histories[side].pop()
    if evicted is not None:
        board[evicted] = side
        histories[side].appendleft(evicted)


def apply_move(
    board: List[int],
    histories: Histories,
    side: int,
    index: int,
    variant: Variant,
) -> Tuple[List[int], Histories, Optional[int]]:
    """Apply move and return (new_board, new_histories, evicted)."""
    new_board = board[:]
    new_histories = copy_histories(histories)
    evicted = make_move(new_board, new_histories, side, index, variant)
    if evicted is not None:
        logger.debug("%s evicted %d placing %d", SIDE_NAMES[side], evicted, index)
    return new_board, new_histories, evicted
