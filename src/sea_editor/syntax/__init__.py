"""Syntax profiles and the line highlighter."""

from .highlighter import DELIMITERS, Highlight, highlight_line, is_delimiter
from .profiles import (
    C_PROFILE,
    GO_PROFILE,
    PLAIN_PROFILE,
    PYTHON_PROFILE,
    Keyword,
    SyntaxProfile,
    keywords_from_table,
    profile_for_extension,
    profile_for_filename,
)

__all__ = [
    "DELIMITERS",
    "Highlight",
    "highlight_line",
    "is_delimiter",
    "Keyword",
    "SyntaxProfile",
    "PLAIN_PROFILE",
    "PYTHON_PROFILE",
    "C_PROFILE",
    "GO_PROFILE",
    "keywords_from_table",
    "profile_for_extension",
    "profile_for_filename",
]
