"""Chat command dispatcher — replies and per-channel boards."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamestate import SessionStore
from backend.models.board import SOLVED, BoardState, Direction
from frontend.chat.app import _split_channel
from frontend.chat.commands import CommandDispatcher

ONE_AWAY = " ".join(str(t) for t in list(range(1, 15)) + [0, 15])


@pytest.fixture
def dispatcher() -> CommandDispatcher:
    return CommandDispatcher(SessionStore(), maze_length=12, rng=random.Random(11))


# -- dispatch -----------------------------------------------------------------


def test_plain_message_is_ignored(dispatcher: CommandDispatcher) -> None:
    assert dispatcher.handle("c", "hello there") is None


def test_unknown_command(dispatcher: CommandDispatcher) -> None:
    assert dispatcher.handle("c", "~frobnicate") == "Could not find: `frobnicate`."


def test_custom_prefix() -> None:
    d = CommandDispatcher(prefix="!")
    assert d.handle("c", "~start") is None
    assert SOLVED.render() in d.handle("c", "!start")


def test_help_lists_commands(dispatcher: CommandDispatcher) -> None:
    text = dispatcher.handle("c", "~help")
    for name in ("start", "maze", "up", "solution", "set"):
        assert f"~{name}" in text


# -- board commands -------------------------------------------------------------


@pytest.mark.parametrize("command", ["~start", "~refresh", "~START"])
def test_start_puts_solved_board(dispatcher: CommandDispatcher, command: str) -> None:
    reply = dispatcher.handle("c", command)
    assert reply == f"```\n{SOLVED.render()}\n```"
    assert dispatcher.store.get("c") == SOLVED


@pytest.mark.parametrize("command", ["~up", "~down", "~left", "~right", "~solution"])
def test_commands_need_a_game(dispatcher: CommandDispatcher, command: str) -> None:
    assert "No game in this channel" in dispatcher.handle("c", command)


def test_moves_update_the_channel(dispatcher: CommandDispatcher) -> None:
    dispatcher.handle("c", "~start")
    reply = dispatcher.handle("c", "~up")
    expected = SOLVED.apply(Direction.UP)
    assert expected.render() in reply
    assert dispatcher.store.get("c") == expected

    # off-grid move leaves the board alone
    dispatcher.handle("c", "~right")
    assert dispatcher.store.get("c") == expected


def test_channels_do_not_share_boards(dispatcher: CommandDispatcher) -> None:
    dispatcher.handle("a", "~start")
    dispatcher.handle("b", "~start")
    dispatcher.handle("a", "~left")
    assert dispatcher.store.get("b") == SOLVED
    assert dispatcher.store.get("a") == SOLVED.apply(Direction.LEFT)


def test_maze_scrambles(dispatcher: CommandDispatcher) -> None:
    dispatcher.handle("c", "~maze")
    board = dispatcher.store.get("c")
    assert board is not None
    assert not board.is_solved
    assert board.is_solvable()


# -- solution -------------------------------------------------------------------


def test_solution_of_solved_board(dispatcher: CommandDispatcher) -> None:
    dispatcher.handle("c", "~start")
    assert dispatcher.handle("c", "~solution") == "Solved."


def test_solution_after_one_move(dispatcher: CommandDispatcher) -> None:
    dispatcher.handle("c", "~start")
    dispatcher.handle("c", "~up")
    assert dispatcher.handle("c", "~solution") == "Down"


def test_solution_of_maze_replays(dispatcher: CommandDispatcher) -> None:
    dispatcher.handle("c", "~maze")
    board = dispatcher.store.get("c")
    for line in dispatcher.handle("c", "~solution").splitlines():
        board = board.apply(Direction(line.lower()))
    assert board == SOLVED


# -- set --------------------------------------------------------------------------


def test_set_board(dispatcher: CommandDispatcher) -> None:
    reply = dispatcher.handle("c", f"~set {ONE_AWAY}")
    assert BoardState.parse(ONE_AWAY).render() in reply
    assert dispatcher.handle("c", "~solution") == "Right"


def test_set_rejects_malformed_input(dispatcher: CommandDispatcher) -> None:
    assert dispatcher.handle("c", "~set 1 2 3").startswith("Error: Expected 16")
    assert "c" not in dispatcher.store


def test_set_rejects_unsolvable_board(dispatcher: CommandDispatcher) -> None:
    tiles = " ".join(str(t) for t in list(range(1, 14)) + [15, 14, 0])
    assert dispatcher.handle("c", f"~set {tiles}") == "Error: that board cannot be solved"


# -- terminal channel switching -----------------------------------------------------


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("~up", ("here", "~up")),
        ("#other ~up", ("other", "~up")),
        ("#other", ("other", "")),
        ("# ~up", ("here", "# ~up")),
    ],
)
def test_split_channel(line: str, expected: tuple[str, str]) -> None:
    assert _split_channel(line, "here") == expected
