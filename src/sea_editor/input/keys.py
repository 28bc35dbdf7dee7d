"""Logical key events produced by the decoder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

ESC = 0x1B
TAB = 0x09
DELETE_BYTE = 0x7F


class Key(Enum):
    CHAR = "char"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    DELETE = "delete"
    PAGE_UP = "pageup"
    PAGE_DOWN = "pagedown"
    ESCAPE = "escape"


CONTROL_NAMES: Mapping[int, str] = MappingProxyType(
    {
        0x08: "ctrl+h",
        TAB: "tab",
        0x0D: "enter",
        DELETE_BYTE: "backspace",
    }
)


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """One decoded keystroke: a raw byte (``Key.CHAR``) or a named key."""

    key: Key
    byte: Optional[int] = None

    def __post_init__(self) -> None:
        if self.key is Key.CHAR:
            if self.byte is None or not 0 <= self.byte <= 0xFF:
                raise ValueError("character events need a byte value")
        elif self.byte is not None:
            raise ValueError(f"{self.key.name} events carry no byte")

    @classmethod
    def char(cls, value: int | str) -> "KeyEvent":
        byte = ord(value) if isinstance(value, str) else value
        return cls(Key.CHAR, byte)

    @property
    def token(self) -> str:
        """Name used for keymap lookup (``"up"``, ``"ctrl+s"``, ``"a"``)."""

        byte = self.byte
        if self.key is not Key.CHAR or byte is None:
            return self.key.value
        named = CONTROL_NAMES.get(byte)
        if named is not None:
            return named
        if byte < 0x20:
            return f"ctrl+{chr(byte + 0x60)}"
        if byte < 0x80:
            return chr(byte)
        return f"0x{byte:02x}"

    @property
    def insertable(self) -> bool:
        """True for bytes that become document text when no binding claims them."""

        if self.key is not Key.CHAR or self.byte is None:
            return False
        return self.byte == TAB or 0x20 <= self.byte < DELETE_BYTE or self.byte >= 0x80

    @property
    def printable(self) -> bool:
        return self.key is Key.CHAR and self.byte is not None and 0x20 <= self.byte < DELETE_BYTE


ESCAPE_EVENT = KeyEvent(Key.ESCAPE)

__all__ = ["ESCAPE_EVENT", "ESC", "Key", "KeyEvent"]
