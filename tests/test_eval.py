"""
Tests for arena play.
"""

import random

import pytest

from tictac.eval import (
    ArenaConfig,
    eval_self_play,
    eval_vs_random,
    minimax_agent,
    play_game,
    random_agent,
)
from tictac.game import EMPTY, X, CLASSIC, INFINITE, HARD


def first_empty(board, histories, side, rng):
    return board.index(EMPTY)


class TestPlayGame:

    def test_move_cap_scores_draw(self):
        """Lowest-index play in infinite mode: X holds 0,2,4, O holds 1,3,5."""
        winner, n = play_game(INFINITE, first_empty, first_empty, random.Random(0), max_moves=6)
        assert (winner, n) == (0, 6)

    def test_classic_game_ends_on_win(self):
        # X: 0, 2, 4, 6 completes 2-4-6
        winner, n = play_game(CLASSIC, first_empty, first_empty, random.Random(0))
        assert winner == X
        assert n == 7

    def test_illegal_agent_move_raises(self):
        with pytest.raises(RuntimeError):
            play_game(CLASSIC, lambda *a: 0, lambda *a: 0, random.Random(0))


class TestEvaluation:

    def test_engine_never_loses_to_random(self):
        w, d, l = eval_vs_random(CLASSIC, HARD, games=10, seed=1)
        assert l == 0.0
        assert w + d == pytest.approx(1.0)

    def test_classic_self_play_draws(self):
        results = eval_self_play(CLASSIC, HARD, games=3, seed=0)
        assert results["draw"] == 1.0
        assert results["len_mean"] == 9.0
        assert results["len_std"] == 0.0

    def test_agents_return_legal_moves(self):
        rng = random.Random(0)
        board = [EMPTY] * 9
        histories = {1: [], -1: []}
        assert board[random_agent(board, histories, X, rng)] == EMPTY
        assert minimax_agent(CLASSIC)(board, histories, X, rng) in (0, 2, 4, 6, 8)

    def test_config_defaults(self):
        config = ArenaConfig()
        assert config.variant == "classic"
        assert config.max_moves > 0
