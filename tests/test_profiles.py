import pytest

from sea_editor.syntax import (
    C_PROFILE,
    GO_PROFILE,
    PLAIN_PROFILE,
    PYTHON_PROFILE,
    Keyword,
    keywords_from_table,
    profile_for_extension,
    profile_for_filename,
)


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("main.go", GO_PROFILE),
        ("editor.c", C_PROFILE),
        ("include/editor.h", C_PROFILE),
        ("script.py", PYTHON_PROFILE),
        ("Makefile", PLAIN_PROFILE),
        ("notes.txt", PLAIN_PROFILE),
        ("", PLAIN_PROFILE),
    ],
)
def test_profile_for_filename(file_name: str, expected: object) -> None:
    assert profile_for_filename(file_name) is expected


def test_profile_for_unknown_extension() -> None:
    assert profile_for_extension(".rs") is PLAIN_PROFILE
    assert not PLAIN_PROFILE.is_highlighted


def test_keywords_from_table_marks_alternates() -> None:
    keywords = keywords_from_table(("if", "int|"))

    assert keywords == (Keyword(b"if"), Keyword(b"int", alternate=True))


def test_keyword_rejects_empty_text() -> None:
    with pytest.raises(ValueError):
        Keyword(b"")


def test_comment_markers() -> None:
    assert PYTHON_PROFILE.comment_marker == b"#"
    assert C_PROFILE.comment_marker == b"//"
    assert GO_PROFILE.comment_marker == b"//"
    assert PLAIN_PROFILE.comment_marker == b""
