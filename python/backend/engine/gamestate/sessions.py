"""Per-channel board storage for the chat frontend."""

from __future__ import annotations

import logging
import random

from backend.engine.gamegenerator.generator import MAZE_LENGTH, GameGenerator
from backend.models.board import SOLVED, BoardState, Direction

logger = logging.getLogger(__name__)


class SessionStore:
    """Maps a channel id to that channel's current board.

    Boards are immutable, so every update replaces the stored value.
    Nothing is persisted; a new process starts with no sessions.
    """

    def __init__(self) -> None:
        self._boards: dict[str, BoardState] = {}

    def __contains__(self, channel: str) -> bool:
        return channel in self._boards

    def __len__(self) -> int:
        return len(self._boards)

    def get(self, channel: str) -> BoardState | None:
        return self._boards.get(channel)

    def set(self, channel: str, board: BoardState) -> BoardState:
        self._boards[channel] = board
        return board

    def reset(self, channel: str) -> BoardState:
        """Put the solved board on *channel*."""
        return self.set(channel, SOLVED)

    def scramble(
        self,
        channel: str,
        length: int = MAZE_LENGTH,
        rng: random.Random | None = None,
    ) -> BoardState:
        return self.set(channel, GameGenerator.generate(length, rng))

    def step(self, channel: str, direction: Direction) -> BoardState | None:
        """Move the blank on *channel*.  ``None`` if the channel has no game."""
        board = self._boards.get(channel)
        if board is None:
            return None
        return self.set(channel, board.apply(direction))

    def drop(self, channel: str) -> None:
        if self._boards.pop(channel, None) is not None:
            logger.debug("dropped session %s", channel)
