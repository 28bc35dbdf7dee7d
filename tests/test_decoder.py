from typing import List

import pytest

from sea_editor.input import ESCAPE_EVENT, InputDecoder, Key, KeyEvent, iter_keys


def decode(data: bytes) -> List[KeyEvent]:
    return list(iter_keys(data))


def make_trickle_reader(data: bytes):
    """Reader that hands out at most one byte per call."""

    remaining = bytearray(data)

    def read(count: int) -> bytes:
        if not remaining or count < 1:
            return b""
        return bytes([remaining.pop(0)])

    return read


@pytest.mark.parametrize(
    ("sequence", "key"),
    [
        (b"\x1b[A", Key.UP),
        (b"\x1b[B", Key.DOWN),
        (b"\x1b[C", Key.RIGHT),
        (b"\x1b[D", Key.LEFT),
        (b"\x1b[3~", Key.DELETE),
        (b"\x1b[5~", Key.PAGE_UP),
        (b"\x1b[6~", Key.PAGE_DOWN),
    ],
)
def test_escape_sequences(sequence: bytes, key: Key) -> None:
    assert decode(sequence) == [KeyEvent(key)]


def test_plain_bytes_pass_through() -> None:
    assert decode(b"ab\r") == [
        KeyEvent.char("a"),
        KeyEvent.char("b"),
        KeyEvent.char(0x0D),
    ]


def test_lone_escape() -> None:
    assert decode(b"\x1b") == [ESCAPE_EVENT]


@pytest.mark.parametrize(
    "sequence",
    [
        b"\x1b[9~",
        b"\x1b[15~",
        b"\x1b[2~",
        b"\x1b[1;5A",
        b"\x1b[99",
    ],
)
def test_unrecognized_control_sequence_is_swallowed(sequence: bytes) -> None:
    assert decode(sequence) == [ESCAPE_EVENT]


def test_swallowed_sequence_leaves_following_input() -> None:
    assert decode(b"\x1b[15~a\x1b[A") == [
        ESCAPE_EVENT,
        KeyEvent.char("a"),
        KeyEvent(Key.UP),
    ]


def test_swallowed_sequence_survives_short_reads() -> None:
    decoder = InputDecoder(make_trickle_reader(b"\x1b[24~x"))

    assert decoder.read_key() == ESCAPE_EVENT
    assert decoder.read_key() == KeyEvent.char("x")
    assert decoder.read_key() is None


def test_unmapped_tilde_sequence_is_swallowed() -> None:
    assert decode(b"\x1b[2~x") == [ESCAPE_EVENT, KeyEvent.char("x")]


def test_wrong_trailer_yields_escape() -> None:
    assert decode(b"\x1b[1xq") == [ESCAPE_EVENT, KeyEvent.char("q")]


def test_escape_not_followed_by_bracket() -> None:
    assert decode(b"\x1bOPz") == [ESCAPE_EVENT, KeyEvent.char("z")]


def test_no_input_returns_none() -> None:
    decoder = InputDecoder(lambda count: b"")

    assert decoder.read_key() is None


def test_short_reads_are_reassembled() -> None:
    decoder = InputDecoder(make_trickle_reader(b"\x1b[6~\x1b[A"))

    assert decoder.read_key() == KeyEvent(Key.PAGE_DOWN)
    assert decoder.read_key() == KeyEvent(Key.UP)
    assert decoder.read_key() is None


def test_key_tokens() -> None:
    assert KeyEvent.char(0x13).token == "ctrl+s"
    assert KeyEvent.char(0x11).token == "ctrl+q"
    assert KeyEvent.char(0x08).token == "ctrl+h"
    assert KeyEvent.char(0x0D).token == "enter"
    assert KeyEvent.char(0x7F).token == "backspace"
    assert KeyEvent.char("a").token == "a"
    assert KeyEvent.char(0xC3).token == "0xc3"
    assert KeyEvent(Key.PAGE_UP).token == "pageup"


def test_insertable_bytes() -> None:
    assert KeyEvent.char("\t").insertable
    assert KeyEvent.char("z").insertable
    assert KeyEvent.char(0xC3).insertable
    assert not KeyEvent.char(0x01).insertable
    assert not KeyEvent.char(0x7F).insertable
    assert not KeyEvent(Key.UP).insertable


def test_key_event_validation() -> None:
    with pytest.raises(ValueError):
        KeyEvent(Key.CHAR)
    with pytest.raises(ValueError):
        KeyEvent(Key.UP, 0x41)
