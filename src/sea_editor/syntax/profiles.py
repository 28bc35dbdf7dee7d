"""Per-language highlighting profiles keyed by file extension."""

from __future__ import annotations

import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

ALTERNATE_SUFFIX = "|"


@dataclass(frozen=True, slots=True)
class Keyword:
    """Keyword bytes plus the class it is painted with."""

    text: bytes
    alternate: bool = False

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("keyword text cannot be empty")


@dataclass(frozen=True, slots=True)
class SyntaxProfile:
    """Immutable description of how lines of one file type are classified."""

    name: str
    is_highlighted: bool
    comment_marker: bytes = b""
    keywords: tuple[Keyword, ...] = ()


def keywords_from_table(words: Iterable[str]) -> tuple[Keyword, ...]:
    """Build keywords from the compact table form.

    A trailing ``|`` marks the alternate class (type names, builtin
    constants); order is preserved because matching tries keywords in order.
    """

    result: list[Keyword] = []
    for word in words:
        alternate = word.endswith(ALTERNATE_SUFFIX)
        if alternate:
            word = word[: -len(ALTERNATE_SUFFIX)]
        result.append(Keyword(text=word.encode("ascii"), alternate=alternate))
    return tuple(result)


PLAIN_PROFILE = SyntaxProfile(name="plain", is_highlighted=False)

PYTHON_PROFILE = SyntaxProfile(
    name="python",
    is_highlighted=True,
    comment_marker=b"#",
    keywords=keywords_from_table(
        (
            "False|", "None|", "True|", "and|", "as", "assert", "break",
            "class|", "continue", "def|", "del", "elif", "else", "except",
            "finally", "for", "from", "global|", "if", "import", "in|", "is|",
            "lambda|", "nonlocal|", "not|", "or|", "pass", "raise", "return",
            "try", "while", "with", "yield",
        )
    ),
)

C_PROFILE = SyntaxProfile(
    name="c",
    is_highlighted=True,
    comment_marker=b"//",
    keywords=keywords_from_table(
        (
            "switch", "if", "while", "for", "break", "continue", "return",
            "else", "struct", "union", "typedef", "static", "enum", "class",
            "case", "int|", "long|", "double|", "float|", "char|",
            "unsigned|", "signed|", "void|",
        )
    ),
)

GO_PROFILE = SyntaxProfile(
    name="go",
    is_highlighted=True,
    comment_marker=b"//",
    keywords=keywords_from_table(
        (
            "break", "case", "chan", "const", "continue", "default", "defer",
            "else", "fallthrough", "for", "func", "go", "goto", "if",
            "import", "interface", "map", "package", "range", "return",
            "select", "struct", "switch", "type", "var", "bool|", "string|",
            "int|", "int8|", "int16|", "int32|", "int64|", "uint|", "uint8|",
            "uint16|", "uint32|", "uint64|", "byte|", "rune|", "float32|",
            "float64|", "complex64|", "complex128|", "uintptr|",
        )
    ),
)

PROFILES_BY_EXTENSION: Mapping[str, SyntaxProfile] = MappingProxyType(
    {
        ".py": PYTHON_PROFILE,
        ".c": C_PROFILE,
        ".h": C_PROFILE,
        ".go": GO_PROFILE,
    }
)


def profile_for_extension(extension: str) -> SyntaxProfile:
    return PROFILES_BY_EXTENSION.get(extension, PLAIN_PROFILE)


def profile_for_filename(file_name: str) -> SyntaxProfile:
    if not file_name:
        return PLAIN_PROFILE
    _, extension = os.path.splitext(file_name)
    return profile_for_extension(extension)


__all__ = [
    "Keyword",
    "SyntaxProfile",
    "PLAIN_PROFILE",
    "PYTHON_PROFILE",
    "C_PROFILE",
    "GO_PROFILE",
    "PROFILES_BY_EXTENSION",
    "keywords_from_table",
    "profile_for_extension",
    "profile_for_filename",
]
