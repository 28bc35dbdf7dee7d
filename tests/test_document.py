from sea_editor.buffer import Cursor, Document
from sea_editor.syntax import C_PROFILE, PLAIN_PROFILE, Highlight


def make_document(*rows: bytes, profile=PLAIN_PROFILE) -> Document:
    data = b"".join(row + b"\n" for row in rows)
    return Document.from_bytes(data, file_name="", profile=profile)


def assert_highlight_parallel(document: Document) -> None:
    for line in document:
        assert len(line.highlight) == len(line.text)


def test_from_bytes_splits_lines_and_strips_carriage_returns() -> None:
    document = Document.from_bytes(b"alpha\r\nbeta\n\ngamma")

    assert document.snapshot() == (b"alpha", b"beta", b"", b"gamma")
    assert document.clean
    assert document.version == 0


def test_empty_input_has_no_rows() -> None:
    document = Document.from_bytes(b"")

    assert document.used_rows == 0
    assert document.serialize() == b""


def test_serialize_terminates_every_line() -> None:
    assert Document.from_bytes(b"a\nb\n").serialize() == b"a\nb\n"
    assert Document.from_bytes(b"a").serialize() == b"a\n"


def test_insert_char_into_empty_document_creates_a_line() -> None:
    document = Document()
    cursor = Cursor()

    assert document.insert_char(cursor, ord("x"))

    assert document.snapshot() == (b"x",)
    assert cursor.as_tuple() == (1, 0)
    assert not document.clean
    assert document.version > 0
    assert_highlight_parallel(document)


def test_insert_then_delete_restores_content() -> None:
    document = make_document(b"hello")
    cursor = Cursor(x=2, y=0)

    document.insert_char(cursor, ord("X"))
    assert document.snapshot() == (b"heXllo",)
    document.delete_char(cursor)

    assert document.snapshot() == (b"hello",)
    assert cursor.as_tuple() == (2, 0)
    assert_highlight_parallel(document)


def test_split_line_then_delete_rejoins() -> None:
    document = make_document(b"hello")
    cursor = Cursor(x=2, y=0)

    assert document.split_line(cursor)
    assert document.snapshot() == (b"he", b"llo")
    assert cursor.as_tuple() == (0, 1)

    assert document.delete_char(cursor)
    assert document.snapshot() == (b"hello",)
    assert cursor.as_tuple() == (2, 0)
    assert_highlight_parallel(document)


def test_split_at_column_zero_opens_line_above() -> None:
    document = make_document(b"hello")
    cursor = Cursor(x=0, y=0)

    document.split_line(cursor)

    assert document.snapshot() == (b"", b"hello")
    assert cursor.as_tuple() == (0, 1)


def test_delete_at_origin_is_noop() -> None:
    document = make_document(b"hello")
    cursor = Cursor()

    assert not document.delete_char(cursor)
    assert document.clean
    assert document.snapshot() == (b"hello",)


def test_delete_forward_joins_next_line() -> None:
    document = make_document(b"ab", b"cd")
    cursor = Cursor(x=2, y=0)

    assert document.delete_forward(cursor)

    assert document.snapshot() == (b"abcd",)
    assert cursor.as_tuple() == (2, 0)


def test_delete_forward_inside_line() -> None:
    document = make_document(b"abc")
    cursor = Cursor(x=1, y=0)

    document.delete_forward(cursor)

    assert document.snapshot() == (b"ac",)
    assert cursor.as_tuple() == (1, 0)


def test_delete_forward_at_end_of_last_line_is_noop() -> None:
    document = make_document(b"ab", b"cd")
    cursor = Cursor(x=2, y=1)

    assert not document.delete_forward(cursor)
    assert document.snapshot() == (b"ab", b"cd")
    assert document.clean


def test_insert_line_positions() -> None:
    document = make_document(b"middle")

    assert document.insert_line(0, b"first")
    assert document.insert_line(2, b"last")
    assert document.insert_line(1, b"between")
    assert not document.insert_line(9, b"nowhere")
    assert not document.insert_line(-1, b"nowhere")

    assert document.snapshot() == (b"first", b"between", b"middle", b"last")


def test_apply_profile_rehighlights_every_line() -> None:
    document = make_document(b"int x;", b"// done")

    document.apply_profile(C_PROFILE)

    first, second = document.lines
    assert first.highlight[:3] == bytes([Highlight.KEYWORD_ALT]) * 3
    assert set(second.highlight) == {Highlight.COMMENT}


def test_mark_saved_clears_flags() -> None:
    document = make_document(b"x")
    document.new_file = True
    document.insert_char(Cursor(), ord("y"))

    document.mark_saved("out.txt")

    assert document.clean
    assert not document.new_file
    assert document.file_name == "out.txt"


def test_line_length_out_of_range() -> None:
    document = make_document(b"abc")

    assert document.line_length(0) == 3
    assert document.line_length(5) == 0


def test_insert_char_at_column_zero_prepends() -> None:
    document = make_document(b"bc", profile=C_PROFILE)
    cursor = Cursor(x=0, y=0)

    assert document.insert_char(cursor, ord("a"))

    assert document.snapshot() == (b"abc",)
    assert cursor.as_tuple() == (1, 0)
    assert not document.clean
    assert_highlight_parallel(document)


def test_insert_char_on_row_past_end_appends_line() -> None:
    document = make_document(b"ab")
    cursor = Cursor(x=0, y=1)

    assert document.insert_char(cursor, ord("z"))

    assert document.snapshot() == (b"ab", b"z")
    assert cursor.as_tuple() == (1, 1)
    assert not document.clean
    assert_highlight_parallel(document)


def test_split_line_on_row_past_end_appends_empty_line() -> None:
    document = make_document(b"ab")
    cursor = Cursor(x=0, y=1)

    assert document.split_line(cursor)

    assert document.snapshot() == (b"ab", b"")
    assert cursor.as_tuple() == (0, 2)
    assert not document.clean
    assert_highlight_parallel(document)


def test_delete_char_on_row_past_end_is_noop() -> None:
    document = make_document(b"ab")
    cursor = Cursor(x=0, y=1)

    assert not document.delete_char(cursor)

    assert document.snapshot() == (b"ab",)
    assert cursor.as_tuple() == (0, 1)
    assert document.clean
    assert_highlight_parallel(document)


def test_backspace_after_enter_in_empty_document_is_noop() -> None:
    document = Document()
    cursor = Cursor()

    assert document.split_line(cursor)
    assert cursor.as_tuple() == (0, 1)
    version = document.version

    assert not document.delete_char(cursor)

    assert document.snapshot() == (b"",)
    assert cursor.as_tuple() == (0, 1)
    assert document.version == version
    assert_highlight_parallel(document)
