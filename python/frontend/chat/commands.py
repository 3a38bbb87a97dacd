"""Chat command dispatcher.

Turns ``~command`` messages into replies, keeping one board per channel in
a :class:`SessionStore`.  The dispatcher knows nothing about the transport:
callers feed it ``(channel, text)`` and send back whatever string it returns.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from backend.engine.gamegenerator.generator import MAZE_LENGTH
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import SessionStore
from backend.models.board import BoardState, Direction

logger = logging.getLogger(__name__)

COMMAND_PREFIX = "~"

NO_GAME = "No game in this channel yet. Use `{prefix}start` or `{prefix}maze`."

_HELP = {
    "start": "put a solved board on this channel",
    "refresh": "same as start",
    "maze": "scramble a new board",
    "up": "move the blank up",
    "down": "move the blank down",
    "left": "move the blank left",
    "right": "move the blank right",
    "solution": "list the moves that solve the current board",
    "set": "set the board from 16 numbers (0 is the blank)",
    "help": "show this message",
}


def _code_block(board: BoardState) -> str:
    return f"```\n{board.render()}\n```"


class CommandDispatcher:
    """Routes prefixed chat messages to board commands."""

    def __init__(
        self,
        store: SessionStore | None = None,
        prefix: str = COMMAND_PREFIX,
        maze_length: int = MAZE_LENGTH,
        rng: random.Random | None = None,
    ) -> None:
        self.store = store if store is not None else SessionStore()
        self.prefix = prefix
        self.maze_length = maze_length
        self._rng = rng
        self._commands: dict[str, Callable[[str, str], str]] = {
            "start": self._start,
            "refresh": self._start,
            "maze": self._maze,
            "up": self._stepper(Direction.UP),
            "down": self._stepper(Direction.DOWN),
            "left": self._stepper(Direction.LEFT),
            "right": self._stepper(Direction.RIGHT),
            "solution": self._solution,
            "set": self._set,
            "help": self._help,
        }

    # -- dispatch -------------------------------------------------------------

    def handle(self, channel: str, text: str) -> str | None:
        """Return the reply to *text*, or ``None`` if it is not a command."""
        text = text.strip()
        if not text.startswith(self.prefix):
            logger.debug("message is not a command: %r", text)
            return None

        name, _, args = text[len(self.prefix):].partition(" ")
        name = name.lower()
        command = self._commands.get(name)
        if command is None:
            logger.info("unknown command %r in %s", name, channel)
            return f"Could not find: `{name}`."

        logger.info("command %r in %s", name, channel)
        try:
            return command(channel, args.strip())
        except ValueError as exc:
            logger.warning("command %r in %s failed: %s", name, channel, exc)
            return f"Error: {exc}"

    # -- commands -------------------------------------------------------------

    def _no_game(self) -> str:
        return NO_GAME.format(prefix=self.prefix)

    def _start(self, channel: str, args: str) -> str:
        return _code_block(self.store.reset(channel))

    def _maze(self, channel: str, args: str) -> str:
        board = self.store.scramble(channel, self.maze_length, self._rng)
        return _code_block(board)

    def _stepper(self, direction: Direction) -> Callable[[str, str], str]:
        def step(channel: str, args: str) -> str:
            board = self.store.step(channel, direction)
            if board is None:
                return self._no_game()
            return _code_block(board)

        return step

    def _solution(self, channel: str, args: str) -> str:
        board = self.store.get(channel)
        if board is None:
            return self._no_game()
        moves = Solver.moves(board)
        if not moves:
            return "Solved."
        return "\n".join(m.label for m in moves)

    def _set(self, channel: str, args: str) -> str:
        board = BoardState.parse(args)
        if not board.is_solvable():
            raise ValueError("that board cannot be solved")
        return _code_block(self.store.set(channel, board))

    def _help(self, channel: str, args: str) -> str:
        width = max(len(name) for name in _HELP)
        return "\n".join(
            f"{self.prefix}{name:<{width}}  {text}" for name, text in _HELP.items()
        )
