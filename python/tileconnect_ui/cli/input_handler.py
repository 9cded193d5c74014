"""Single-keypress reader for the terminal frontend.

Turns raw keys (arrows, WASD, letters) into action names without waiting
for Enter.  Uses tty/termios on macOS and Linux, msvcrt on Windows.
"""

from __future__ import annotations

import os
import select
import sys
import time


# -- raw readers --------------------------------------------------------------


def _read_unix(fd: int) -> str:
    return os.read(fd, 1).decode("utf-8", errors="ignore")


def _ready_unix(fd: int, timeout: float | None) -> bool:
    ready, _, _ = select.select([fd], [], [], timeout)
    return bool(ready)


# -- action mapping -----------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    " ": "select",
    "\r": "select",
    "\n": "select",
    "n": "hint",
    "x": "shuffle",
    "r": "restart",
    "v": "autoplay",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

_WINDOWS_ARROWS: dict[str, str] = {
    "H": "up",
    "P": "down",
    "M": "right",
    "K": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    if ch in _KEY_MAP:
        return _KEY_MAP[ch]
    lowered = ch.lower()
    if lowered in _KEY_MAP and ch.isalpha():
        return _KEY_MAP[lowered]
    return ch if ch.isprintable() else ""


# -- public API ---------------------------------------------------------------


def get_key_timeout(timeout: float | None) -> str | None:
    """Read one keypress and return its action name.

    Waits at most *timeout* seconds (forever if ``None``) and returns
    ``None`` when nothing was pressed.

    Actions:
        "up", "down", "left", "right"  — cursor
        "select"                       — Enter / Space
        "hint", "shuffle", "restart"   — n / x / r
        "autoplay"                     — v
        "quit"                         — q / Ctrl-C / Escape
        "<char>"                       — any other printable key
        ""                             — unrecognised key
    """
    if os.name == "nt":
        return _get_key_windows(timeout)

    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        if not _ready_unix(fd, timeout):
            return None
        ch = _read_unix(fd)

        # Arrow keys arrive as ESC [ A/B/C/D; a lone ESC means quit.
        if ch == "\x1b":
            if not _ready_unix(fd, 0.1):
                return "quit"
            if _read_unix(fd) != "[":
                return "quit"
            if not _ready_unix(fd, 0.1):
                return ""
            return _ARROW_MAP.get(_read_unix(fd), "")

        return _resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def get_key() -> str:
    """Block until a key is pressed and return its action name."""
    key = get_key_timeout(None)
    return key if key is not None else ""


def _get_key_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    end = None if timeout is None else time.monotonic() + timeout
    while not msvcrt.kbhit():
        if end is not None and time.monotonic() >= end:
            return None
        time.sleep(0.02)

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        return _WINDOWS_ARROWS.get(msvcrt.getwch(), "")
    if ch == "\x1b":
        return "quit"
    return _resolve(ch)
