"""Raw-mode terminal access for the interactive host."""

from __future__ import annotations

import os
import sys
import termios
from typing import Any, List, Optional, Tuple

from sea_editor.errors import FatalEnvironmentError
from sea_editor.render import ansi
from sea_editor.runtime import telemetry

# termios attribute list indices
IFLAG, OFLAG, CFLAG, LFLAG, CC = 0, 1, 2, 3, 6


class RawTerminal:
    """Puts the controlling terminal into raw mode for the ``with`` block.

    Reads time out after a tenth of a second (``VMIN=0``, ``VTIME=1``) and
    return ``b""`` so the caller can repaint while idle. The saved attributes
    are restored on every exit path, including exceptions.
    """

    def __init__(
        self, *, stdin_fd: Optional[int] = None, stdout_fd: Optional[int] = None
    ) -> None:
        self.stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self.stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
        self._saved: Optional[List[Any]] = None

    def __enter__(self) -> "RawTerminal":
        self.enable()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.restore()
        return False

    @property
    def active(self) -> bool:
        return self._saved is not None

    def enable(self) -> None:
        if self._saved is not None:
            return
        try:
            saved = termios.tcgetattr(self.stdin_fd)
            raw = termios.tcgetattr(self.stdin_fd)
        except termios.error as exc:
            raise FatalEnvironmentError("Couldn't enable raw mode", cause=exc) from exc

        raw[IFLAG] &= ~(
            termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON
        )
        raw[OFLAG] &= ~termios.OPOST
        raw[CFLAG] |= termios.CS8
        raw[LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[CC][termios.VMIN] = 0
        raw[CC][termios.VTIME] = 1
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            raise FatalEnvironmentError("Couldn't enable raw mode", cause=exc) from exc
        self._saved = saved
        telemetry.record_event("terminal.raw", level="debug", data={"fd": self.stdin_fd})

    def restore(self) -> None:
        if self._saved is None:
            return
        saved, self._saved = self._saved, None
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, saved)
        telemetry.record_event("terminal.restored", level="debug", data={"fd": self.stdin_fd})

    def size(self) -> Tuple[int, int]:
        """Return ``(columns, rows)`` of the output terminal."""

        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError as exc:
            raise FatalEnvironmentError("Couldn't get window size", cause=exc) from exc
        return size.columns, size.lines

    def read(self, count: int) -> bytes:
        try:
            return os.read(self.stdin_fd, count)
        except OSError as exc:
            raise FatalEnvironmentError("Couldn't read from terminal", cause=exc) from exc

    def write(self, data: bytes) -> None:
        view = memoryview(data)
        try:
            while view:
                written = os.write(self.stdout_fd, view)
                view = view[written:]
        except OSError as exc:
            raise FatalEnvironmentError("Couldn't refresh screen", cause=exc) from exc

    def clear(self) -> None:
        self.write(ansi.CLEAR_SCREEN + ansi.CURSOR_HOME)


__all__ = ["RawTerminal"]
