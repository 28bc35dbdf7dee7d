"""A single row of text plus its parallel classification."""

from __future__ import annotations

from dataclasses import dataclass, field

from sea_editor.syntax import SyntaxProfile, highlight_line


@dataclass(slots=True)
class Line:
    """Mutable line bytes; ``highlight`` always has one code per byte."""

    text: bytearray = field(default_factory=bytearray)
    highlight: bytearray = field(default_factory=bytearray)

    @classmethod
    def from_bytes(cls, text: bytes | bytearray, profile: SyntaxProfile) -> "Line":
        line = cls(text=bytearray(text))
        line.rehighlight(profile)
        return line

    def __len__(self) -> int:
        return len(self.text)

    def rehighlight(self, profile: SyntaxProfile) -> None:
        self.highlight = highlight_line(self.text, profile)


__all__ = ["Line"]
