"""Turns a :class:`FrameState` into one escape-sequence buffer per repaint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from sea_editor.buffer import Line
from sea_editor.syntax import Highlight

from . import ansi
from .frame import FrameState, iter_color_runs

PLACEHOLDER = b"~"
FILE_NAME_WIDTH = 20

BannerLine = Tuple[Tuple[str, int], ...]


def _banner_text(parts: BannerLine) -> Tuple[bytes, int]:
    """Return the painted bytes of a banner line and its visible width."""

    painted = b"".join(
        ansi.colored(text, code) if code else text.encode("utf-8") for text, code in parts
    )
    width = sum(len(text) for text, _ in parts)
    return painted, width


def format_status(frame: FrameState) -> str:
    """Status bar text padded to the frame width.

    The file name (truncated) and modified marker sit on the left; the 1-based
    cursor location is right-aligned and dropped when it does not fit.
    """

    dim_x = frame.dim[0]
    name = frame.file_name[:FILE_NAME_WIDTH]
    if name:
        name += " "
    left = (name + frame.modified_label)[:dim_x]
    location = f"row: {frame.status_row}, col: {frame.status_column}"

    gap = dim_x - len(left)
    if gap >= len(location):
        return left + " " * (gap - len(location)) + location
    return left + " " * gap


@dataclass(frozen=True, slots=True)
class Renderer:
    """Stateless painter; the same frame always produces the same bytes."""

    name: str = "SEA"
    version: str = "0.1.0"
    hint: str = "CTRL-S save | CTRL-Q quit"

    def render(self, frame: FrameState) -> bytes:
        out: List[bytes] = [ansi.HIDE_CURSOR, ansi.CURSOR_HOME]
        self._draw_rows(out, frame)
        self._draw_status(out, frame)
        self._draw_message(out, frame)
        cursor_x, cursor_y = frame.cursor
        offset_x, offset_y = frame.offset
        out.append(ansi.move_cursor(cursor_y - offset_y + 1, cursor_x - offset_x + 1))
        out.append(ansi.SHOW_CURSOR)
        return b"".join(out)

    def banner(self) -> Sequence[BannerLine]:
        return (
            ((self.name, ansi.CYAN), (" --- ", 0), (f"v{self.version}", ansi.GREEN)),
            (),
            ((self.hint, 0),),
        )

    def _draw_rows(self, out: List[bytes], frame: FrameState) -> None:
        dim_x, dim_y = frame.dim
        offset_x, offset_y = frame.offset
        banner = list(self.banner()) if frame.used_rows == 0 else []
        banner_row = dim_y // 4

        for screen_row in range(dim_y):
            row = screen_row + offset_y
            if row >= frame.used_rows:
                banner_index = screen_row - banner_row
                if banner and 0 <= banner_index < len(banner):
                    out.append(self._centered(banner[banner_index], dim_x))
                else:
                    out.append(PLACEHOLDER)
            else:
                self._draw_line(out, frame.lines[screen_row], frame, offset_x, dim_x)
            out.append(ansi.CLEAR_LINE)
            out.append(ansi.CRLF)

    @staticmethod
    def _draw_line(
        out: List[bytes], line: Line, frame: FrameState, offset_x: int, dim_x: int
    ) -> None:
        if offset_x >= len(line):
            return
        current = Highlight.NORMAL
        for chunk, code in iter_color_runs(
            line.text, line.highlight, offset_x, offset_x + dim_x
        ):
            if frame.highlighted and code != current:
                current = code
                out.append(ansi.sgr(code))
            out.append(chunk)
        out.append(ansi.RESET)

    @staticmethod
    def _centered(parts: BannerLine, dim_x: int) -> bytes:
        if not parts:
            return PLACEHOLDER
        painted, width = _banner_text(parts)
        padding = max(dim_x - width, 0) // 2
        prefix = PLACEHOLDER if padding > 0 else b""
        return prefix + b" " * max(padding - 1, 0) + painted

    @staticmethod
    def _draw_status(out: List[bytes], frame: FrameState) -> None:
        out.append(ansi.sgr(ansi.INVERT))
        status = format_status(frame)
        out.append(status.encode("utf-8", errors="replace"))
        out.append(ansi.RESET)
        out.append(ansi.CRLF)

    @staticmethod
    def _draw_message(out: List[bytes], frame: FrameState) -> None:
        out.append(ansi.CLEAR_LINE)
        if frame.message:
            out.append(frame.message[: frame.dim[0]].encode("utf-8", errors="replace"))


__all__ = ["Renderer", "PLACEHOLDER", "format_status"]
