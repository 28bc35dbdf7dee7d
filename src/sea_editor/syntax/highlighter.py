"""Single-pass, per-line syntax classification."""

from __future__ import annotations

from enum import IntEnum

from .profiles import SyntaxProfile


class Highlight(IntEnum):
    """Classification codes; each value doubles as its ANSI SGR colour."""

    NORMAL = 0
    STRING = 32
    KEYWORD_ALT = 33
    NUMBER = 34
    KEYWORD = 35
    COMMENT = 36


DELIMITERS = frozenset(b",.()+-/*=~%<>[]; \t\n\r")
QUOTES = frozenset(b"'\"")
HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
DIGITS = frozenset(b"0123456789")
HEX_PREFIX = b"0x"
BACKSLASH = ord("\\")
DOT = ord(".")


def is_delimiter(byte: int) -> bool:
    return byte in DELIMITERS


def _hex_run_end(text: bytes, start: int) -> int:
    """Return the end of a valid ``0x`` literal starting at ``start``, or -1."""

    end = start + len(HEX_PREFIX)
    while end < len(text) and not is_delimiter(text[end]):
        if text[end] not in HEX_DIGITS:
            return -1
        end += 1
    return end


def _match_keyword(text: bytes, start: int, profile: SyntaxProfile) -> tuple[int, Highlight] | None:
    for keyword in profile.keywords:
        end = start + len(keyword.text)
        if not text.startswith(keyword.text, start):
            continue
        if end == len(text) or is_delimiter(text[end]):
            kind = Highlight.KEYWORD_ALT if keyword.alternate else Highlight.KEYWORD
            return end, kind
    return None


def highlight_line(text: bytes | bytearray, profile: SyntaxProfile) -> bytearray:
    """Classify every byte of ``text``; the result has exactly ``len(text)`` codes.

    Classification runs regardless of ``profile.is_highlighted`` so a line
    can be painted as soon as a highlighted profile is adopted.
    """

    data = bytes(text)
    size = len(data)
    codes = bytearray(size)
    marker = profile.comment_marker
    new_word = True
    in_string = 0
    i = 0

    while i < size:
        byte = data[i]

        if not in_string and marker and data.startswith(marker, i):
            codes[i:] = bytes([Highlight.COMMENT]) * (size - i)
            break

        if in_string:
            codes[i] = Highlight.STRING
            if byte == BACKSLASH and i + 1 < size:
                codes[i + 1] = Highlight.STRING
                i += 2
                continue
            if byte == in_string:
                in_string = 0
            new_word = is_delimiter(byte)
            i += 1
            continue

        if byte in QUOTES:
            in_string = byte
            codes[i] = Highlight.STRING
            new_word = False
            i += 1
            continue

        if new_word and data.startswith(HEX_PREFIX, i):
            end = _hex_run_end(data, i)
            if end > 0:
                codes[i:end] = bytes([Highlight.NUMBER]) * (end - i)
                new_word = False
                i = end
                continue

        previous = codes[i - 1] if i > 0 else Highlight.NORMAL
        if (byte in DIGITS and (new_word or previous == Highlight.NUMBER)) or (
            byte == DOT and previous == Highlight.NUMBER
        ):
            codes[i] = Highlight.NUMBER
            new_word = is_delimiter(byte)
            i += 1
            continue

        if new_word:
            matched = _match_keyword(data, i, profile)
            if matched is not None:
                end, kind = matched
                codes[i:end] = bytes([kind]) * (end - i)
                new_word = False
                i = end
                continue

        new_word = is_delimiter(byte)
        i += 1

    return codes


__all__ = ["DELIMITERS", "Highlight", "highlight_line", "is_delimiter"]
