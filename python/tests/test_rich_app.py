"""Rich game loop driven by scripted key presses."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import GameState
from backend.models.board import SOLVED, Direction
from frontend.cli.rich import app as rich_app


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _play(monkeypatch: pytest.MonkeyPatch, game: GamePlay, keys: list[str],
          clock: _Clock) -> io.StringIO:
    out = io.StringIO()
    pending = iter(keys)

    def next_key() -> str:
        clock.now += 10
        return next(pending)

    monkeypatch.setattr(rich_app, "console", Console(file=out, width=80))
    monkeypatch.setattr(rich_app, "get_key", next_key)
    rich_app._game_loop(game)
    return out


def test_clock_runs_again_after_leaving_solved_board(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    clock = _Clock()
    game = GamePlay.from_board(SOLVED)
    game.state = GameState(SOLVED, clock=clock)

    _play(monkeypatch, game, ["up", "down", "up", "quit"], clock)

    assert game.board == SOLVED.apply(Direction.UP)
    assert game.state.moves == 3
    assert game.state.running
    # unsolved from t=10 to t=20, then again from t=30 to now
    assert game.state.elapsed_time == 20
    clock.now += 5
    assert game.state.elapsed_time == 25


def test_solving_move_stops_clock_and_reports(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    clock = _Clock()
    game = GamePlay.from_board(SOLVED)
    game.state = GameState(SOLVED.apply(Direction.LEFT), clock=clock)

    out = _play(monkeypatch, game, ["right", "quit"], clock)

    assert game.is_won
    assert not game.state.running
    assert game.state.elapsed_time == 10
    assert "Solved in 1 moves!" in out.getvalue()
