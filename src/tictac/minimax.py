"""
Depth-limited minimax search with alpha-beta pruning.

The search runs on a private copy of the board and move histories, applying
and undoing moves in place. Scores are from the searching side's point of
view:
  - classic / infinite: 10 - depth for a win, depth - 10 for a loss, 0 for
    a draw or an undecided position at the depth limit
  - scoring: (own lines - opponent lines) * 10
"""

import logging
import math
import random
from typing import Dict, List, Optional, Tuple

from .game import (
    EMPTY, HARD, O, SIDE_NAMES, X,
    Histories, Variant,
    check_board, check_difficulty, check_histories, classic_outcome, copy_histories,
    count_three_in_a_row, is_scoring_terminal, legal_moves, make_move,
    new_histories, unmake_move,
)
from .tactics import quick_move

logger = logging.getLogger(__name__)

NO_MOVE = -1
WIN_SCORE = 10
LINE_WEIGHT = 10


def _static_score(board: List[int], variant: Variant, side: int, depth: int, limit: int) -> Optional[int]:
    """Score a terminal or cut-off node; None if the search should go deeper."""
    if variant.scoring:
        if depth >= limit or is_scoring_terminal(board):
            counts, _ = count_three_in_a_row(board, variant)
            return (counts[side] - counts[-side]) * LINE_WEIGHT
        return None

    outcome = classic_outcome(board)
    if outcome.done:
        if outcome.winner == side:
            return WIN_SCORE - depth
        if outcome.winner == -side:
            return depth - WIN_SCORE
        return 0
    if depth >= limit:
        return 0
    return None


def _minimax(
    board: List[int],
    histories: Histories,
    variant: Variant,
    side: int,
    to_move: int,
    depth: int,
    alpha: float,
    beta: float,
    limit: int,
) -> float:
    score = _static_score(board, variant, side, depth, limit)
    if score is not None:
        return score

    maximizing = to_move == side
    best = -math.inf if maximizing else math.inf
    for i in range(len(board)):
        if board[i] != EMPTY:
            continue
        evicted = make_move(board, histories, to_move, i, variant)
        value = _minimax(board, histories, variant, side, -to_move, depth + 1, alpha, beta, limit)
        unmake_move(board, histories, to_move, i, evicted)

        if maximizing:
            best = max(best, value)
            alpha = max(alpha, value)
        else:
            best = min(best, value)
            beta = min(beta, value)
        if beta <= alpha:
            break

    if math.isinf(best):
        return 0
    return best


def _prepare(
    board: List[int],
    side: int,
    variant: Variant,
    histories: Optional[Histories],
) -> Tuple[List[int], Histories]:
    """Validate inputs and return working copies of board and histories."""
    check_board(board, variant)
    if side not in (X, O):
        raise ValueError(f"Invalid side: {side}")
    if histories is None:
        if variant.evicts:
            raise ValueError(f"{variant.name} variant needs move histories")
        histories = new_histories()
    else:
        check_histories(board, histories, variant)
    return board[:], copy_histories(histories)


def search_scores(
    board: List[int],
    side: int,
    variant: Variant,
    difficulty: str = HARD,
    histories: Optional[Histories] = None,
) -> Dict[int, float]:
    """
    Exact minimax score of every legal move (no root-level pruning).

    Returns:
        {move_index: score} in ascending index order
    """
    check_difficulty(difficulty)
    work, work_hist = _prepare(board, side, variant, histories)
    limit = variant.depth_for(difficulty)

    scores: Dict[int, float] = {}
    for i in legal_moves(work):
        evicted = make_move(work, work_hist, side, i, variant)
        scores[i] = _minimax(work, work_hist, variant, side, -side, 0, -math.inf, math.inf, limit)
        unmake_move(work, work_hist, side, i, evicted)
    return scores


def find_best_move(
    board: List[int],
    side: int,
    variant: Variant,
    difficulty: str = HARD,
    histories: Optional[Histories] = None,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Pick a move for `side`.

    Args:
        board: Current board (not modified)
        side: X (+1) or O (-1)
        variant: Rule set
        difficulty: EASY tries a one-ply win/block check before searching
        histories: Per-side placement order; required for the infinite variant
        rng: Random source for the opening choice

    Returns:
        Board index, or NO_MOVE if the board has no empty cell
    """
    check_difficulty(difficulty)
    work, work_hist = _prepare(board, side, variant, histories)

    moves = legal_moves(work)
    if not moves:
        return NO_MOVE

    if len(moves) == len(work) and variant.opening_cells:
        move = (rng or random).choice(variant.opening_cells)
        logger.debug("%s opening move %d", variant.name, move)
        return move

    if difficulty != HARD:
        move = quick_move(work, work_hist, side, variant)
        if move is not None:
            logger.debug("%s fast-path move %d for %s", variant.name, move, SIDE_NAMES[side])
            return move

    limit = variant.depth_for(difficulty)
    best_move = NO_MOVE
    best_score = -math.inf
    for i in moves:
        evicted = make_move(work, work_hist, side, i, variant)
        # A child that cannot beat best_score is cut short; ties keep the lower index.
        score = _minimax(work, work_hist, variant, side, -side, 0, best_score, math.inf, limit)
        unmake_move(work, work_hist, side, i, evicted)
        if score > best_score:
            best_score = score
            best_move = i

    logger.debug(
        "%s %s search (depth %d): move %d score %s",
        variant.name, SIDE_NAMES[side], limit, best_move, best_score,
    )
    return best_move
