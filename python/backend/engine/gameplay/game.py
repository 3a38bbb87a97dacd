"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.models.board import BoardState, Direction


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng
        self.state = GameState(GameGenerator.generate(rng=rng))

    @classmethod
    def from_board(
        cls, board: BoardState, rng: random.Random | None = None
    ) -> GamePlay:
        """Create a game session from an existing board (e.g. parsed from text)."""
        obj = object.__new__(cls)
        obj._rng = rng
        obj.state = GameState(board)
        return obj

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Move the blank one cell in *direction*.

        E.g. ``Direction.UP`` swaps the blank with the tile **above** it.
        Returns True if the move was valid.
        """
        board = self.state.board
        moved = board.apply(direction)
        if moved == board:
            return False
        self.state.advance(moved)
        return True

    def scramble(self) -> None:
        """Start over from a fresh random board."""
        self.state = GameState(GameGenerator.generate(rng=self._rng))

    def reset(self) -> None:
        """Start over from the solved board."""
        self.state = GameState(GameGenerator.solved())

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> BoardState:
        return self.state.board

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
