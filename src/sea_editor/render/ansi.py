"""VT100/ANSI escape sequences used by the renderer and the terminal."""

from __future__ import annotations

CSI = b"\x1b["

CLEAR_SCREEN = CSI + b"2J"
CLEAR_LINE = CSI + b"K"
CURSOR_HOME = CSI + b"H"
HIDE_CURSOR = CSI + b"?25l"
SHOW_CURSOR = CSI + b"?25h"
RESET = CSI + b"m"
CRLF = b"\r\n"

BOLD = 1
RED = 31
GREEN = 32
YELLOW = 33
BLUE = 34
PURPLE = 35
CYAN = 36
INVERT = 7
OFF = 0


def sgr(code: int) -> bytes:
    """Select graphic rendition ``code`` (colour, inverse, reset)."""

    return CSI + str(int(code)).encode("ascii") + b"m"


def move_cursor(row: int, column: int) -> bytes:
    """Position the cursor at 1-based ``row``/``column``."""

    return CSI + f"{row};{column}H".encode("ascii")


def colored(text: str, code: int) -> bytes:
    return sgr(code) + text.encode("utf-8") + RESET


__all__ = [
    "CSI",
    "CLEAR_SCREEN",
    "CLEAR_LINE",
    "CURSOR_HOME",
    "HIDE_CURSOR",
    "SHOW_CURSOR",
    "RESET",
    "CRLF",
    "BOLD",
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "PURPLE",
    "CYAN",
    "INVERT",
    "OFF",
    "sgr",
    "move_cursor",
    "colored",
]
