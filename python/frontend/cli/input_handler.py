"""Single-keypress reader for the interactive frontend.

Handles arrow keys and WASD without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "m": "maze",
    "v": "solve",
    "n": "hint",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string (case-insensitive)."""
    return _KEY_MAP.get(ch.lower(), "")


def get_key() -> str:
    """Block until a key is pressed and return its action.

    Actions: ``up``, ``down``, ``left``, ``right``, ``quit``, ``restart``,
    ``maze``, ``solve``, ``hint``; ``""`` for anything else.
    """
    ch = _getch()

    # Arrow keys arrive as ESC [ A/B/C/D
    if ch == "\x1b":
        if _getch() == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"

    return resolve(ch)
