"""Line-oriented document storage and its edit operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence

from sea_editor.syntax import PLAIN_PROFILE, SyntaxProfile

from .cursor import Cursor, Direction
from .line import Line

NEWLINE = b"\n"
CARRIAGE_RETURN = b"\r"


@dataclass(slots=True)
class Document:
    """Ordered list of :class:`Line` objects backing one editor session.

    Every mutator returns ``True`` when it changed the document and ``False``
    for the out-of-range requests it ignores. ``version`` increments on each
    change so hosts can tell whether a repaint picked up new content.
    """

    lines: List[Line] = field(default_factory=list)
    file_name: str = ""
    clean: bool = True
    new_file: bool = False
    profile: SyntaxProfile = PLAIN_PROFILE
    version: int = 0

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        *,
        file_name: str = "",
        profile: SyntaxProfile = PLAIN_PROFILE,
    ) -> "Document":
        """Split ``data`` on newlines, dropping trailing carriage returns."""

        raw_lines = data.split(NEWLINE)
        if raw_lines and raw_lines[-1] == b"":
            raw_lines.pop()
        lines = [
            Line.from_bytes(raw.rstrip(CARRIAGE_RETURN), profile) for raw in raw_lines
        ]
        return cls(lines=lines, file_name=file_name, clean=True, profile=profile)

    @property
    def used_rows(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def snapshot(self) -> Sequence[bytes]:
        """Return the current line bytes without exposing internal mutability."""

        return tuple(bytes(line.text) for line in self.lines)

    def line_length(self, row: int) -> int:
        if 0 <= row < self.used_rows:
            return len(self.lines[row])
        return 0

    def apply_profile(self, profile: SyntaxProfile) -> None:
        """Adopt ``profile`` and re-classify every line under it."""

        self.profile = profile
        for line in self.lines:
            line.rehighlight(profile)

    def insert_line(self, index: int, text: bytes | bytearray = b"") -> bool:
        if index < 0 or index > self.used_rows:
            return False
        self.lines.insert(index, Line.from_bytes(text, self.profile))
        self._touch()
        return True

    def insert_char(self, cursor: Cursor, byte: int) -> bool:
        if cursor.y == self.used_rows:
            self.insert_line(self.used_rows)
        if not 0 <= cursor.y < self.used_rows:
            return False
        line = self.lines[cursor.y]
        column = min(max(cursor.x, 0), len(line))
        line.text.insert(column, byte)
        line.rehighlight(self.profile)
        cursor.x = column + 1
        self._touch()
        return True

    def split_line(self, cursor: Cursor) -> bool:
        if cursor.x == 0 or cursor.y >= self.used_rows:
            changed = self.insert_line(min(cursor.y, self.used_rows))
        else:
            line = self.lines[cursor.y]
            column = min(cursor.x, len(line))
            tail = bytes(line.text[column:])
            del line.text[column:]
            line.rehighlight(self.profile)
            changed = self.insert_line(cursor.y + 1, tail)
        if changed:
            cursor.y += 1
            cursor.x = 0
        return changed

    def delete_char(self, cursor: Cursor) -> bool:
        if cursor.y >= self.used_rows:
            return False
        if cursor.x == 0 and cursor.y == 0:
            return False

        line = self.lines[cursor.y]
        if cursor.x > 0:
            column = min(cursor.x, len(line)) - 1
            if column < 0:
                return False
            del line.text[column]
            line.rehighlight(self.profile)
            cursor.x = column
        else:
            above = self.lines[cursor.y - 1]
            cursor.x = len(above)
            above.text.extend(line.text)
            del self.lines[cursor.y]
            cursor.y -= 1
            above.rehighlight(self.profile)
        self._touch()
        return True

    def delete_forward(self, cursor: Cursor) -> bool:
        """Delete the byte under the cursor, joining the next line at end of line."""

        if cursor.y >= self.used_rows:
            return False
        last_row = cursor.y + 1 == self.used_rows
        if last_row and cursor.x >= self.line_length(cursor.y):
            return False
        cursor.move(self, Direction.RIGHT)
        return self.delete_char(cursor)

    def serialize(self) -> bytes:
        return b"".join(bytes(line.text) + NEWLINE for line in self.lines)

    def mark_saved(self, file_name: str | None = None) -> None:
        if file_name is not None:
            self.file_name = file_name
        self.clean = True
        self.new_file = False

    def _touch(self) -> None:
        self.clean = False
        self.version += 1


__all__ = ["Document"]
