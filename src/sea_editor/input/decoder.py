"""Raw terminal bytes to logical key events.

The decoder is a three-state machine::

    NORMAL --ESC--> ESCAPE_SEEN --'[' param--> CSI_DIGIT_SEEN --'~'--> key
       |                |                      (loops on param bytes)
     byte            '[' A/B/C/D --> arrow key

Once ``ESC [`` opens a control sequence, parameter bytes (``0x30``-``0x3F``)
are consumed up to the final byte. Anything it cannot finish (short read,
unknown final byte, unmapped parameters) collapses into a bare
``Key.ESCAPE`` so a broken sequence never leaks into the document as text.
"""

from __future__ import annotations

import io
from enum import Enum
from types import MappingProxyType
from typing import Callable, Dict, Iterator, Mapping, NamedTuple, Optional

from .keys import ESC, ESCAPE_EVENT, Key, KeyEvent

ReadFn = Callable[[int], bytes]

CSI_INTRODUCER = ord("[")
CSI_TRAILER = ord("~")
CSI_PARAMETERS = frozenset(range(0x30, 0x3F + 1))
# ``ESC`` and ``[`` lead every control sequence
CSI_PREFIX_LENGTH = 2

ARROW_FINALS: Mapping[int, Key] = MappingProxyType(
    {
        ord("A"): Key.UP,
        ord("B"): Key.DOWN,
        ord("C"): Key.RIGHT,
        ord("D"): Key.LEFT,
    }
)

TILDE_KEYS: Mapping[bytes, Key] = MappingProxyType(
    {
        b"3": Key.DELETE,
        b"5": Key.PAGE_UP,
        b"6": Key.PAGE_DOWN,
    }
)
class DecoderState(Enum):
    NORMAL = "normal"
    ESCAPE_SEEN = "escape_seen"
    CSI_DIGIT_SEEN = "csi_digit_seen"


class Transition(NamedTuple):
    state: DecoderState
    seen: bytes
    event: Optional[KeyEvent] = None


def _bare_escape(seen: bytes) -> Transition:
    return Transition(DecoderState.NORMAL, seen, ESCAPE_EVENT)


class InputDecoder:
    """Pull-based decoder over a ``read(n) -> bytes`` source.

    ``read`` may return fewer bytes than requested, and an empty result
    means nothing is available right now (a raw-mode read timeout or the end
    of a replayed stream).
    """

    def __init__(self, read: ReadFn) -> None:
        self._read = read
        self._transitions: Dict[DecoderState, Callable[[bytes], Transition]] = {
            DecoderState.NORMAL: self._from_normal,
            DecoderState.ESCAPE_SEEN: self._from_escape,
            DecoderState.CSI_DIGIT_SEEN: self._from_csi_digit,
        }

    def read_key(self) -> Optional[KeyEvent]:
        """Decode one key event, or return ``None`` when no input is pending."""

        first = self._read(1)
        if not first:
            return None
        transition = Transition(DecoderState.NORMAL, first[:1])
        while True:
            transition = self._transitions[transition.state](transition.seen)
            if transition.event is not None:
                return transition.event

    def _read_exact(self, count: int) -> bytes:
        buffer = b""
        while len(buffer) < count:
            chunk = self._read(count - len(buffer))
            if not chunk:
                break
            buffer += chunk
        return buffer

    def _from_normal(self, seen: bytes) -> Transition:
        byte = seen[0]
        if byte != ESC:
            return Transition(DecoderState.NORMAL, seen, KeyEvent.char(byte))
        return Transition(DecoderState.ESCAPE_SEEN, seen)

    def _from_escape(self, seen: bytes) -> Transition:
        pair = self._read_exact(2)
        seen += pair
        if len(pair) < 2 or pair[0] != CSI_INTRODUCER:
            return _bare_escape(seen)
        final = pair[1]
        arrow = ARROW_FINALS.get(final)
        if arrow is not None:
            return Transition(DecoderState.NORMAL, seen, KeyEvent(arrow))
        if final in CSI_PARAMETERS:
            return Transition(DecoderState.CSI_DIGIT_SEEN, seen)
        return _bare_escape(seen)

    def _from_csi_digit(self, seen: bytes) -> Transition:
        following = self._read_exact(1)
        if not following:
            return _bare_escape(seen)
        seen += following
        byte = following[0]
        if byte in CSI_PARAMETERS:
            return Transition(DecoderState.CSI_DIGIT_SEEN, seen)
        if byte == CSI_TRAILER:
            key = TILDE_KEYS.get(seen[CSI_PREFIX_LENGTH:-1])
            if key is not None:
                return Transition(DecoderState.NORMAL, seen, KeyEvent(key))
        return _bare_escape(seen)


def iter_keys(data: bytes) -> Iterator[KeyEvent]:
    """Decode a complete byte string, e.g. a recorded keystroke stream."""

    decoder = InputDecoder(io.BytesIO(data).read)
    while True:
        event = decoder.read_key()
        if event is None:
            return
        yield event


__all__ = ["DecoderState", "InputDecoder", "Transition", "iter_keys"]
