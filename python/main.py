#!/usr/bin/env python3
"""Fifteen-puzzle solver.

Usage::

    python main.py solve 1 2 3 4 5 6 7 8 9 10 11 12 13 14 0 15
    python main.py solve --maze --seed 7 --length 30 --path
    python main.py maze                 # print a scrambled board
    python main.py play                 # Rich interactive game
    python main.py chat                 # chat-command REPL
"""

import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator.generator import MAZE_LENGTH, GameGenerator  # noqa: E402
from backend.engine.gamesolver import moves_for, solve as solve_board  # noqa: E402
from backend.models.board import SOLVED, BoardState  # noqa: E402
from frontend.chat.commands import COMMAND_PREFIX  # noqa: E402

console = Console()

app = typer.Typer(add_completion=False, help="Fifteen-puzzle solver.")


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )


def _board_from_args(
    tiles: Optional[List[int]], maze: bool, seed: Optional[int], length: int
) -> BoardState:
    if maze:
        if tiles:
            raise typer.BadParameter("Pass either TILES or --maze, not both.")
        return GameGenerator.generate(length, random.Random(seed))
    if not tiles:
        raise typer.BadParameter("Pass 16 TILES or use --maze.")
    try:
        board = BoardState.from_tiles(list(tiles))
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from None
    if not board.is_solvable():
        raise typer.BadParameter("That board cannot reach the solved arrangement.")
    return board


# -- commands -----------------------------------------------------------------


@app.callback()
def main(
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        envvar="FIFTEEN_LOG_LEVEL",
        case_sensitive=False,
        help="Logging level.",
    ),
) -> None:
    """Fifteen-puzzle solver."""
    _configure_logging(log_level)


@app.command()
def solve(
    tiles: Optional[List[int]] = typer.Argument(
        None, help="16 row-major numbers, 0 for the blank."
    ),
    maze: bool = typer.Option(False, "--maze", help="Solve a random scramble."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Scramble seed."),
    length: int = typer.Option(
        MAZE_LENGTH, "--length", min=1, help="Random moves in the scramble."
    ),
    path: bool = typer.Option(False, "--path", help="Print every board on the way."),
) -> None:
    """Print the blank moves that solve a board."""
    board = _board_from_args(tiles, maze, seed, length)
    console.print(board.render(), highlight=False)
    console.print()

    states = solve_board(board)
    moves = moves_for(states)

    if path:
        for step, (state, move) in enumerate(zip(states[1:], moves), 1):
            console.print(f"[dim]{step:>3}.[/dim] [bold]{move.label}[/bold]")
            console.print(state.render(), highlight=False)
            console.print()
    else:
        console.print(" ".join(m.label for m in moves) or "Already solved.")
    console.print(f"[bold green]{len(moves)} moves.[/bold green]")


@app.command("maze")
def maze_cmd(
    seed: Optional[int] = typer.Option(None, "--seed", help="Scramble seed."),
    length: int = typer.Option(
        MAZE_LENGTH, "--length", min=1, help="Random moves in the scramble."
    ),
) -> None:
    """Print a random reachable board and its tile list."""
    board = GameGenerator.generate(length, random.Random(seed))
    console.print(board.render(), highlight=False)
    console.print(" ".join(str(t) for t in board.to_tiles()), highlight=False)


@app.command()
def play(
    tiles: Optional[List[int]] = typer.Argument(
        None, help="Optional starting board, 16 numbers."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Scramble seed."),
) -> None:
    """Play in the terminal (Rich)."""
    from frontend.cli.rich.app import run

    board = _board_from_args(tiles, False, None, MAZE_LENGTH) if tiles else SOLVED
    run(board=board, seed=seed)


@app.command()
def chat(
    channel: str = typer.Option("terminal", "--channel", help="Initial channel."),
    prefix: str = typer.Option(
        COMMAND_PREFIX, "--prefix",
        envvar="FIFTEEN_PREFIX",
        help="Command prefix.",
    ),
) -> None:
    """Drive the chat commands from the terminal."""
    from frontend.chat.app import run

    run(channel=channel, prefix=prefix)


if __name__ == "__main__":
    app()
