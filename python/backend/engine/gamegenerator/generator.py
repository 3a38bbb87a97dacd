"""Generates scrambled boards by random walks from the solved state."""

from __future__ import annotations

import logging
import random

from backend.models.board import MOVES, SOLVED, BoardState

logger = logging.getLogger(__name__)

MAZE_LENGTH = 200


class GameGenerator:
    """Creates reachable puzzles by walking the blank from the solved state."""

    @staticmethod
    def solved() -> BoardState:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        return SOLVED

    @staticmethod
    def maze(length: int = MAZE_LENGTH, rng: random.Random | None = None) -> BoardState:
        """Apply *length* random blank moves to the solved board.

        Moves into the edge are no-ops, so the effective walk can be
        shorter than *length*.  The result is always solvable.
        """
        rng = rng or random.Random()
        board = SOLVED
        for _ in range(length):
            board = board.apply(rng.choice(MOVES))
        logger.debug("maze length=%d -> %r", length, board)
        return board

    @staticmethod
    def generate(length: int = MAZE_LENGTH, rng: random.Random | None = None) -> BoardState:
        """Return a random board that is not already solved."""
        rng = rng or random.Random()
        board = GameGenerator.maze(length, rng)

        # A short walk can land back on the goal
        while board.is_solved and length > 0:
            board = GameGenerator.maze(length, rng)

        return board
