#!/usr/bin/env python3
"""
Play against the engine or run the arena.

Usage:
    python eval.py --variant classic --play
    python eval.py --variant infinite --difficulty easy --play
    python eval.py --variant scoring --games 20
"""

import sys
import json
import logging
import argparse
from dataclasses import asdict
from pathlib import Path

from tqdm.auto import tqdm

# Add src to path
sys.path = [str(Path(__file__).parent / "src")] + sys.path

from tictac import (
    ArenaConfig,
    Match,
    IllegalMoveError,
    VARIANTS,
    EASY,
    HARD,
    X,
    get_variant,
    run_arena,
    search_scores,
)


def print_board(board, size):
    """Pretty print board."""
    symbols = {0: ' ', 1: 'X', -1: 'O'}
    for i in range(size):
        row = "|".join(symbols[board[i*size + j]] for j in range(size))
        print(row)
        if i < size - 1:
            print("-+" * (size - 1) + "-")


def print_index_grid(size):
    width = len(str(size * size - 1))
    for i in range(size):
        print(" | ".join(str(i*size + j).rjust(width) for j in range(size)))


def play_interactive(variant, difficulty, explain=False):
    """Play a game against the engine."""
    match = Match(variant)

    print(f"\n=== Interactive Game ({variant.name}, {difficulty}) ===")
    print("You are X (play first)")
    print(f"Enter moves as numbers 0-{variant.cells - 1}:")
    print_index_grid(variant.size)
    print()

    while not match.over:
        print_board(match.board, variant.size)
        print()

        if match.player == X:
            try:
                action = int(input("Your move: "))
                match.play(action)
            except IllegalMoveError as e:
                print(f"Invalid move ({e}), try again")
                continue
            except (ValueError, KeyboardInterrupt, EOFError):
                print("\nGame aborted")
                return
        else:
            if explain:
                scores = search_scores(match.board, match.player, variant, difficulty, match.histories)
                print(f"Search scores: {scores}")
            action = match.ai_move(difficulty)
            print(f"Engine plays: {action}")
        if match.last_evicted is not None:
            print(f"Removed oldest piece at {match.last_evicted}")
        print()

    print_board(match.board, variant.size)
    outcome = match.outcome
    if outcome.counts is not None:
        print(f"\nLines: X {outcome.counts[X]} / O {outcome.counts[-X]}")
    if outcome.winner == 0:
        print("\nDraw!")
    elif outcome.winner == X:
        print("\nYou win!")
    else:
        print("\nEngine wins!")


def main():
    parser = argparse.ArgumentParser(description="Tic-tac-toe variants engine")
    parser.add_argument("--variant", type=str, default="classic", choices=sorted(VARIANTS), help="Rule set")
    parser.add_argument("--difficulty", type=str, default=HARD, choices=[EASY, HARD], help="Engine difficulty")
    parser.add_argument("--opponent-difficulty", type=str, default=HARD, choices=[EASY, HARD], help="O difficulty in self-play")
    parser.add_argument("--play", action="store_true", help="Play interactive game")
    parser.add_argument("--explain", action="store_true", help="Print root search scores during play")
    parser.add_argument("--games", type=int, default=100, help="Number of eval games")
    parser.add_argument("--max-moves", type=int, default=60, help="Move cap per game")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--run-name", type=str, default="arena", help="Run name for saving")
    parser.add_argument("--save-dir", type=str, default="runs", help="Save directory")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    variant = get_variant(args.variant)

    # Interactive play
    if args.play:
        play_interactive(variant, args.difficulty, explain=args.explain)
        return

    config = ArenaConfig(
        seed=args.seed,
        games=args.games,
        variant=args.variant,
        difficulty=args.difficulty,
        opponent_difficulty=args.opponent_difficulty,
        max_moves=args.max_moves,
        save_dir=args.save_dir,
    )

    run_dir = Path(config.save_dir) / args.run_name
    run_dir.mkdir(parents=True, exist_ok=True)
    with open(run_dir / "config.json", "w") as f:
        json.dump(asdict(config), f, indent=2)

    # Evaluation
    print(f"\n=== Arena ({variant.name}, {config.difficulty}) ===")
    results = run_arena(config)
    tqdm.write(f"vs Random:  {results['random_w']:.1%} W / {results['random_d']:.1%} D / {results['random_l']:.1%} L")
    tqdm.write(
        f"Self-play:  {results['self_x_w']:.1%} X / {results['self_draw']:.1%} D / {results['self_o_w']:.1%} O"
        f" | length {results['self_len_mean']:.1f} ± {results['self_len_std']:.1f}"
    )

    with open(run_dir / "results.json", "w") as f:
        json.dump(results, f, indent=2)
    print(f"\n✓ Results saved to {run_dir}")


if __name__ == "__main__":
    main()
