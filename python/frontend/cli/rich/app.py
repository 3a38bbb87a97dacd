"""Rich terminal frontend — a styled 4×4 board with hint and auto-solve.

Arrow keys / WASD move the *blank*.  The board starts solved; ``M``
scrambles it, ``N`` plays one hint move, ``V`` animates the full solution.
"""

from __future__ import annotations

import logging
import random
import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.board import SOLVED, BoardState, Direction
from frontend.cli.input_handler import get_key

logger = logging.getLogger(__name__)

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- board rendering ----------------------------------------------------------


def _render_board(board: BoardState) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(4):
        table.add_column(width=3, justify="center")

    for r in range(4):
        cells: list[str] = []
        for c in range(4):
            val = board.tile_at(r, c)
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>2}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>2}[/bold white]")
        table.add_row(*cells)

    return table


def _controls() -> Text:
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move blank   ", style="dim")
    controls.append("M", style="bold yellow")
    controls.append("  scramble   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")
    return controls


def _draw(game: GamePlay, status: str = "", title: str = "Fifteen") -> None:
    console.clear()

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")

    border = "bold green" if game.is_won else "bright_blue"
    panel = Panel(
        Align.center(_render_board(game.board)),
        title=f"[bold cyan]{title}[/bold cyan]",
        border_style=border,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls()))


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"
    with console.status("Thinking…"):
        hint = Solver.hint(game.board)
    if hint is None:
        return "[yellow]No hint available.[/yellow]"
    game.move(hint)
    return f"[cyan]Hint:[/cyan] moved blank [bold]{hint.value}[/bold]"


def _auto_solve(game: GamePlay, delay: float = 0.05) -> str:
    if game.is_won:
        return "[green]Already solved![/green]"

    with console.status("Searching…"):
        started = time.perf_counter()
        moves = Solver.moves(game.board)
        took = time.perf_counter() - started
    logger.info("solved %r in %.2fs (%d moves)", game.board, took, len(moves))

    for i, direction in enumerate(moves):
        game.move(direction)
        _draw(
            game,
            f"[bold cyan]Solving… move {i + 1}/{len(moves)}[/bold cyan] "
            f"[dim]({direction.value})[/dim]",
            title="Auto-Solve",
        )
        sys.stdout.flush()
        time.sleep(delay)

    return f"[bold green]Solved in {len(moves)} moves ({took:.2f}s search).[/bold green]"


# -- game loop ----------------------------------------------------------------


def _game_loop(game: GamePlay) -> None:
    status = ""

    while True:
        _draw(game, status)
        status = ""
        key = get_key()

        if key in _DIRECTIONS:
            game.move(_DIRECTIONS[key])
            if game.is_won and game.state.moves:
                status = (
                    f"[bold green]★ Solved in {game.state.moves} moves! "
                    "★[/bold green]"
                )
        elif key == "maze":
            game.scramble()
            status = "[yellow]Scrambled![/yellow]"
        elif key == "restart":
            game.reset()
        elif key == "hint":
            status = _apply_hint(game)
        elif key == "solve":
            status = _auto_solve(game)
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(board: BoardState = SOLVED, seed: int | None = None) -> None:
    """Launch the Rich game on *board*."""
    game = GamePlay.from_board(board, rng=random.Random(seed))
    _game_loop(game)
