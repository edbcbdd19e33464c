"""Single-keypress reader for the terminal frontend.

Turns arrow keys, WASD and a few command letters into ``Action`` values
without waiting for Enter. Works on macOS / Linux (tty+termios) and
Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from enum import StrEnum

from tilegrid.models.board import Direction


class Action(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    RESTART = "restart"
    PAUSE = "pause"
    ENTER = "enter"
    NONE = ""


ACTION_DIRECTIONS: dict[Action, Direction] = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}

_ESC = "\x1b"

# Windows reports special keys as a prefix byte followed by a scan code.
_WIN_PREFIXES = ("\x00", "\xe0")

_KEY_MAP: dict[str, Action] = {
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
    "q": Action.QUIT,
    "\x03": Action.QUIT,  # Ctrl-C
    "r": Action.RESTART,
    "p": Action.PAUSE,
    " ": Action.PAUSE,
    "\r": Action.ENTER,
    "\n": Action.ENTER,
}

# Final byte of the ANSI ``ESC [ X`` sequences.
_ANSI_ARROWS: dict[str, Action] = {
    "A": Action.UP,
    "B": Action.DOWN,
    "C": Action.RIGHT,
    "D": Action.LEFT,
}

_WIN_ARROWS: dict[str, Action] = {
    "H": Action.UP,
    "P": Action.DOWN,
    "M": Action.RIGHT,
    "K": Action.LEFT,
}


def decode(keys: str) -> Action:
    """Map one complete key sequence to an ``Action``.

    A bare escape, or escape followed by anything but ``[``, counts as
    quit. Unknown keys decode to ``Action.NONE``.
    """
    if not keys:
        return Action.NONE
    if keys[0] == _ESC:
        if len(keys) == 1 or keys[1] != "[":
            return Action.QUIT
        return _ANSI_ARROWS.get(keys[2:3], Action.NONE)
    if keys[0] in _WIN_PREFIXES:
        return _WIN_ARROWS.get(keys[1:2], Action.NONE)
    ch = keys[0]
    return _KEY_MAP.get(ch.lower() if ch.isalpha() else ch, Action.NONE)


# -- platform readers ----------------------------------------------------------


def _read_sequence_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        if timeout is not None:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                return None

        # os.read is unbuffered, so select() still sees the remaining
        # bytes of a multi-byte escape sequence.
        keys = os.read(fd, 1).decode("utf-8", errors="ignore")
        while keys.startswith(_ESC) and len(keys) < 3:
            more, _, _ = select.select([fd], [], [], 0.1)
            if not more:
                break
            keys += os.read(fd, 1).decode("utf-8", errors="ignore")
            if keys[1:2] != "[":
                break
        return keys
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def _read_sequence_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]
    import time

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)

    keys = msvcrt.getwch()
    if keys in _WIN_PREFIXES:
        keys += msvcrt.getwch()
    return keys


_read_sequence = _read_sequence_windows if os.name == "nt" else _read_sequence_unix


# -- public API ----------------------------------------------------------------


def get_key() -> Action:
    """Block until a key is pressed and return its action."""
    return decode(_read_sequence(None) or "")


def get_key_timeout(timeout: float) -> Action | None:
    """Like ``get_key`` but returns ``None`` if nothing arrives in *timeout* seconds."""
    keys = _read_sequence(timeout)
    if keys is None:
        return None
    return decode(keys)
