"""Host-friendly snapshot describing one screen's worth of editor state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from sea_editor.buffer import Line


@dataclass(frozen=True, slots=True)
class FrameState:
    """Everything a renderer needs for a single repaint.

    ``lines`` holds the document rows inside the viewport (already offset by
    ``offset_y``); ``used_rows`` is the full document length so placeholders
    and the empty-buffer banner can be decided per row.
    """

    lines: Sequence[Line]
    used_rows: int
    cursor: Tuple[int, int]
    dim: Tuple[int, int]
    offset: Tuple[int, int]
    highlighted: bool
    file_name: str = ""
    new_file: bool = False
    clean: bool = True
    message: Optional[str] = None

    @property
    def status_row(self) -> int:
        """1-based row for the status bar; 0 while the document is empty."""

        return self.cursor[1] + 1 if self.used_rows else 0

    @property
    def status_column(self) -> int:
        return self.cursor[0] + 1

    @property
    def modified_label(self) -> str:
        if self.new_file:
            return "[New File]"
        if not self.clean:
            return "(modified)"
        return ""


def iter_color_runs(
    text: bytes | bytearray,
    highlight: bytes | bytearray,
    start: int = 0,
    stop: Optional[int] = None,
) -> Iterator[Tuple[bytes, int]]:
    """Yield ``(chunk, code)`` runs of ``text[start:stop]`` with equal codes.

    Coalescing runs keeps the output to one colour switch per transition
    instead of one per byte.
    """

    end = len(text) if stop is None else min(stop, len(text))
    index = max(start, 0)
    while index < end:
        code = highlight[index]
        run_end = index + 1
        while run_end < end and highlight[run_end] == code:
            run_end += 1
        yield bytes(text[index:run_end]), code
        index = run_end


__all__ = ["FrameState", "iter_color_runs"]
