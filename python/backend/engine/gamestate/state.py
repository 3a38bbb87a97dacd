"""Tracks the mutable state of an interactive game in progress."""

from __future__ import annotations

import time
from collections.abc import Callable

from backend.models.board import BoardState


class GameState:
    """Holds the current board, move counter, and a solve clock.

    The clock only runs while the board is unsolved: it stops on the move
    that solves the board and picks up again on the next move away from it.
    """

    def __init__(
        self, board: BoardState, clock: Callable[[], float] = time.monotonic
    ) -> None:
        self.board = board
        self.moves: int = 0
        self._clock = clock
        self._started: float = clock()
        self._stopped: float | None = self._started if board.is_solved else None

    # -- time tracking --------------------------------------------------------

    @property
    def running(self) -> bool:
        return self._stopped is None

    @property
    def elapsed_time(self) -> float:
        end = self._clock() if self._stopped is None else self._stopped
        return end - self._started

    # -- board ----------------------------------------------------------------

    def advance(self, board: BoardState) -> None:
        """Replace the board after a successful move."""
        self.board = board
        self.moves += 1

        now = self._clock()
        if board.is_solved:
            if self._stopped is None:
                self._stopped = now
        elif self._stopped is not None:
            # time spent sitting on the solved board is not counted
            self._started += now - self._stopped
            self._stopped = None

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved
