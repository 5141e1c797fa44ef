"""
Arena evaluation.

Plays the engine against a random opponent or against itself and reports
outcome rates. Infinite games can cycle, so every game has a move cap after
which it is scored as a draw.
"""

import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
from tqdm.auto import trange

from .game import (
    EMPTY, HARD, O, X,
    Histories, Variant,
    empty_board, evaluate, get_variant, legal_moves, make_move, new_histories,
)
from .minimax import find_best_move

Agent = Callable[[List[int], Histories, int, random.Random], int]


@dataclass
class ArenaConfig:
    """Arena configuration."""

    # Random seed
    seed: int = 0

    # Games per evaluation
    games: int = 100

    # Rules
    variant: str = "classic"
    difficulty: str = HARD
    opponent_difficulty: str = HARD

    # Infinite games never fill the board
    max_moves: int = 60

    # Paths
    save_dir: str = "runs"


def random_agent(board: List[int], histories: Histories, side: int, rng: random.Random) -> int:
    return rng.choice(legal_moves(board))


def minimax_agent(variant: Variant, difficulty: str = HARD) -> Agent:
    """Wrap find_best_move as an arena agent."""
    def agent(board: List[int], histories: Histories, side: int, rng: random.Random) -> int:
        return find_best_move(board, side, variant, difficulty, histories=histories, rng=rng)
    return agent


def play_game(
    variant: Variant,
    x_agent: Agent,
    o_agent: Agent,
    rng: random.Random,
    max_moves: int = 60,
) -> Tuple[int, int]:
    """
    Play one game, X first.

    Returns:
        (winner, num_moves) where winner is +1/-1/0
    """
    board = empty_board(variant)
    histories = new_histories()
    player = X
    agents = {X: x_agent, O: o_agent}

    for ply in range(max_moves):
        action = agents[player](board, histories, player, rng)
        if action < 0 or board[action] != EMPTY:
            raise RuntimeError(f"Agent for {player:+d} returned illegal move {action}")
        make_move(board, histories, player, action, variant)

        outcome = evaluate(board, variant)
        if outcome.done:
            return outcome.winner, ply + 1
        player = -player

    return 0, max_moves


def eval_vs_random(
    variant: Variant,
    difficulty: str = HARD,
    games: int = 100,
    seed: int = 0,
    max_moves: int = 60,
    progress: bool = False,
) -> Tuple[float, float, float]:
    """
    Evaluate the engine vs a random opponent, alternating sides.

    Returns:
        (win_rate, draw_rate, loss_rate)
    """
    rng = random.Random(seed)
    engine = minimax_agent(variant, difficulty)
    wins = draws = losses = 0

    for g in trange(games, desc="vs random", disable=not progress, leave=False):
        engine_side = X if (g % 2 == 0) else O
        if engine_side == X:
            winner, _ = play_game(variant, engine, random_agent, rng, max_moves)
        else:
            winner, _ = play_game(variant, random_agent, engine, rng, max_moves)

        if winner == 0:
            draws += 1
        elif winner == engine_side:
            wins += 1
        else:
            losses += 1

    total = wins + draws + losses
    return wins / total, draws / total, losses / total


def eval_self_play(
    variant: Variant,
    difficulty: str = HARD,
    opponent_difficulty: Optional[str] = None,
    games: int = 20,
    seed: int = 0,
    max_moves: int = 60,
    progress: bool = False,
) -> Dict[str, float]:
    """
    Engine vs engine. X plays at `difficulty`, O at `opponent_difficulty`.

    Returns:
        Dict with 'games', 'x_w', 'draw', 'o_w', 'len_mean', 'len_std'
    """
    rng = random.Random(seed)
    x_agent = minimax_agent(variant, difficulty)
    o_agent = minimax_agent(variant, opponent_difficulty or difficulty)
    results = {X: 0, O: 0, 0: 0}
    lengths = []

    for _ in trange(games, desc="self-play", disable=not progress, leave=False):
        winner, n = play_game(variant, x_agent, o_agent, rng, max_moves)
        results[winner] += 1
        lengths.append(n)

    lengths = np.asarray(lengths, dtype=np.float64)
    return {
        "games": games,
        "x_w": results[X] / games,
        "draw": results[0] / games,
        "o_w": results[O] / games,
        "len_mean": float(lengths.mean()),
        "len_std": float(lengths.std()),
    }


def run_arena(config: ArenaConfig, progress: bool = True) -> Dict[str, float]:
    """Run both evaluations described by `config`."""
    variant = get_variant(config.variant)
    w, d, l = eval_vs_random(
        variant, config.difficulty, config.games, config.seed, config.max_moves, progress,
    )
    sp = eval_self_play(
        variant, config.difficulty, config.opponent_difficulty,
        config.games, config.seed, config.max_moves, progress,
    )
    return {
        "random_w": w,
        "random_d": d,
        "random_l": l,
        **{f"self_{k}": v for k, v in sp.items()},
    }
