"""Logical cursor position and the movement rules applied to it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from .document import Document


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(slots=True)
class Cursor:
    """Byte column ``x`` on row ``y``.

    ``y == document.used_rows`` is the virtual row past the last line; ``x``
    is then always 0.
    """

    x: int = 0
    y: int = 0

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def move(self, document: "Document", direction: Direction) -> None:
        used_rows = document.used_rows
        if direction is Direction.UP:
            if self.y > 0:
                self.y -= 1
        elif direction is Direction.DOWN:
            if self.y + 1 < used_rows:
                self.y += 1
        elif direction is Direction.LEFT:
            if self.x > 0:
                self.x -= 1
            elif self.y > 0:
                self.y -= 1
                self.x = len(document.lines[self.y])
        elif direction is Direction.RIGHT:
            if self.y < used_rows:
                length = len(document.lines[self.y])
                if self.x < length:
                    self.x += 1
                elif self.y + 1 < used_rows:
                    self.y += 1
                    self.x = 0
        self.clamp(document)

    def page(self, document: "Document", direction: Direction, rows: int) -> None:
        """Repeat single vertical steps so page jumps share the same clamping."""

        if direction not in (Direction.UP, Direction.DOWN):
            raise ValueError("page moves are vertical only")
        for _ in range(rows):
            self.move(document, direction)

    def clamp(self, document: "Document") -> None:
        self.y = max(0, min(self.y, document.used_rows))
        length = len(document.lines[self.y]) if self.y < document.used_rows else 0
        self.x = max(0, min(self.x, length))


__all__ = ["Cursor", "Direction"]
