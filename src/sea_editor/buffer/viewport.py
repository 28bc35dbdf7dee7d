"""The visible window into the document and its scrolling policy."""

from __future__ import annotations

from dataclasses import dataclass

from .cursor import Cursor


@dataclass(slots=True)
class Viewport:
    dim_x: int
    dim_y: int
    offset_x: int = 0
    offset_y: int = 0

    def __post_init__(self) -> None:
        if self.dim_x < 1 or self.dim_y < 1:
            raise ValueError("viewport needs at least one visible row and column")

    @classmethod
    def for_terminal(cls, columns: int, rows: int, *, reserved_rows: int = 2) -> "Viewport":
        """Size the text area, leaving ``reserved_rows`` for status and message."""

        return cls(dim_x=max(1, columns), dim_y=max(1, rows - reserved_rows))

    def scroll(self, cursor: Cursor) -> None:
        """Shift the offset just enough to keep ``cursor`` visible."""

        if cursor.x < self.offset_x:
            self.offset_x = cursor.x
        if cursor.x >= self.offset_x + self.dim_x:
            self.offset_x = cursor.x - self.dim_x + 1
        if cursor.y < self.offset_y:
            self.offset_y = cursor.y
        if cursor.y >= self.offset_y + self.dim_y:
            self.offset_y = cursor.y - self.dim_y + 1

    def contains(self, cursor: Cursor) -> bool:
        return (
            self.offset_x <= cursor.x < self.offset_x + self.dim_x
            and self.offset_y <= cursor.y < self.offset_y + self.dim_y
        )


__all__ = ["Viewport"]
