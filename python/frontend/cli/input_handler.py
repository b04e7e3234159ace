"""Single-keypress reader for the terminal frontend.

Arrow keys and WASD move the blank; letters map to session actions.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from backend.models.board import Direction


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

MOVE_KEYS: dict[str, Direction] = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

ACTION_KEYS: dict[str, str] = {
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "v": "solve",
    "n": "hint",
    "r": "restart",
}

_ARROWS: dict[str, Direction] = {
    "A": Direction.UP,
    "B": Direction.DOWN,
    "C": Direction.RIGHT,
    "D": Direction.LEFT,
}


def resolve(ch: str) -> Direction | str:
    """Map one raw character to a blank direction or an action name."""
    lowered = ch.lower()
    if lowered in MOVE_KEYS:
        return MOVE_KEYS[lowered]
    return ACTION_KEYS.get(lowered, ch if ch.isprintable() else "")


def get_key() -> Direction | str:
    """Block for one keypress and return a Direction or an action string.

    Action strings: "quit", "solve", "hint", "restart", or the
    raw printable character ("" for anything unrecognised).
    """
    ch = _getch()

    # Unix arrow keys arrive as ESC [ A/B/C/D
    if ch == "\x1b":
        if _getch() == "[":
            return _ARROWS.get(_getch(), "")
        return "quit"  # bare Escape

    return resolve(ch)
