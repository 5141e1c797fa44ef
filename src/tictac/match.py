"""
Headless match driver: turn order, move application, score tally, and the
JSON payload exchanged through the room relay.
"""

import json
import logging
import random
from collections import deque
from typing import Dict, Optional

from .game import (
    EMPTY, HARD, O, SIDE_NAMES, X,
    Outcome, Variant,
    check_board, check_histories, empty_board, evaluate, get_variant, make_move,
    new_histories,
)
from .minimax import NO_MOVE, find_best_move

logger = logging.getLogger(__name__)

_SYMBOLS = {X: "X", O: "O", EMPTY: None}
_FROM_SYMBOL = {"X": X, "O": O, None: EMPTY}


class IllegalMoveError(ValueError):
    """Move rejected: game over or target cell occupied."""


class Match:
    """
    One board shared by two sides, X moving first.

    Scores persist across reset() until reset_scores().
    """

    def __init__(self, variant: Variant):
        self.variant = variant
        self.scores: Dict[int, int] = {X: 0, O: 0}
        self.reset()

    def reset(self) -> None:
        self.board = empty_board(self.variant)
        self.histories = new_histories()
        self.player = X
        self.outcome = Outcome(False)
        self.last_evicted: Optional[int] = None

    def reset_scores(self) -> None:
        self.scores = {X: 0, O: 0}

    @property
    def over(self) -> bool:
        return self.outcome.done

    def play(self, index: int) -> Outcome:
        """Place the side to move at `index` and evaluate the result."""
        if self.over:
            raise IllegalMoveError("Game is over")
        if not 0 <= index < len(self.board) or self.board[index] != EMPTY:
            raise IllegalMoveError(f"Position {index} is not available")

        side = self.player
        self.last_evicted = make_move(self.board, self.histories, side, index, self.variant)
        self.outcome = evaluate(self.board, self.variant)

        if self.outcome.done:
            if self.outcome.winner:
                self.scores[self.outcome.winner] += 1
            logger.debug(
                "%s game over: %s",
                self.variant.name,
                SIDE_NAMES.get(self.outcome.winner, "draw"),
            )
        else:
            self.player = -side
        return self.outcome

    def ai_move(self, difficulty: str = HARD, rng: Optional[random.Random] = None) -> int:
        """Let the engine play for the side to move; returns the index played."""
        if self.over:
            return NO_MOVE
        move = find_best_move(
            self.board, self.player, self.variant, difficulty,
            histories=self.histories, rng=rng,
        )
        if move != NO_MOVE:
            self.play(move)
        return move

    # -------------------------------------------------------------------------
    # Relay payloads
    # -------------------------------------------------------------------------

    def to_payload(self, room_id: str) -> str:
        """Serialise the shared state for the room relay."""
        return json.dumps({
            "room": room_id,
            "variant": self.variant.name,
            "board": [_SYMBOLS[v] for v in self.board],
            "nextPlayer": SIDE_NAMES[self.player],
            "scores": {SIDE_NAMES[s]: n for s, n in self.scores.items()},
            "moves": {SIDE_NAMES[s]: list(m) for s, m in self.histories.items()},
        })

    @classmethod
    def from_payload(cls, payload: str) -> "Match":
        """
        Rebuild a match from a relayed payload.

        Raises ValueError on unknown symbols, a board of the wrong size, or
        (infinite variant) move histories that disagree with the board.
        """
        data = json.loads(payload)
        match = cls(get_variant(data["variant"]))
        board = [_symbol_to_side(v, "board cell") for v in data["board"]]
        check_board(board, match.variant)
        player = _symbol_to_side(data["nextPlayer"], "nextPlayer")
        if player == EMPTY:
            raise ValueError("nextPlayer must be 'X' or 'O'")
        moves = data.get("moves", {})
        histories = {X: deque(moves.get("X", [])), O: deque(moves.get("O", []))}
        check_histories(board, histories, match.variant)

        match.board = board
        match.player = player
        match.histories = histories
        match.scores = {X: int(data["scores"].get("X", 0)), O: int(data["scores"].get("O", 0))}
        match.outcome = evaluate(board, match.variant)
        return match


def _symbol_to_side(symbol, what: str) -> int:
    try:
        return _FROM_SYMBOL[symbol]
    except (KeyError, TypeError):
        raise ValueError(f"Invalid {what}: {symbol!r}") from None
