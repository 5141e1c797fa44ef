"""
Tic-tac-toe variants - rules engine and alpha-beta AI.

Three rule sets share one engine: classic 3x3, a 5x5 "most three-in-a-rows"
scoring game, and "infinite" 3x3 where each side keeps at most 3 pieces.
"""

from .lines import CLASSIC_LINES, generate_lines, lines_for, lines_through
from .game import (
    EMPTY, X, O, EASY, HARD,
    Variant, CLASSIC, SCORING, INFINITE, VARIANTS, get_variant,
    Outcome, evaluate, classic_outcome, scoring_outcome, count_three_in_a_row,
    legal_moves, side_to_move, empty_board, new_histories,
    make_move, unmake_move, apply_move, check_histories,
)
from .tactics import find_winning_move, find_blocking_move, quick_move
from .minimax import NO_MOVE, find_best_move, search_scores
from .match import Match, IllegalMoveError
from .eval import (
    ArenaConfig,
    play_game,
    random_agent,
    minimax_agent,
    eval_vs_random,
    eval_self_play,
    run_arena,
)

__version__ = "0.1.0"
__all__ = [
    "CLASSIC_LINES",
    "generate_lines",
    "lines_for",
    "lines_through",
    "EMPTY",
    "X",
    "O",
    "EASY",
    "HARD",
    "Variant",
    "CLASSIC",
    "SCORING",
    "INFINITE",
    "VARIANTS",
    "get_variant",
    "Outcome",
    "evaluate",
    "classic_outcome",
    "scoring_outcome",
    "count_three_in_a_row",
    "legal_moves",
    "side_to_move",
    "empty_board",
    "new_histories",
    "make_move",
    "unmake_move",
    "apply_move",
    "check_histories",
    "find_winning_move",
    "find_blocking_move",
    "quick_move",
    "NO_MOVE",
    "find_best_move",
    "search_scores",
    "Match",
    "IllegalMoveError",
    "ArenaConfig",
    "play_game",
    "random_agent",
    "minimax_agent",
    "eval_vs_random",
    "eval_self_play",
    "run_arena",
]
