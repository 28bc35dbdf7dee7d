"""Terminal input decoding."""

from .decoder import DecoderState, InputDecoder, iter_keys
from .keys import ESCAPE_EVENT, Key, KeyEvent

__all__ = [
    "DecoderState",
    "InputDecoder",
    "iter_keys",
    "ESCAPE_EVENT",
    "Key",
    "KeyEvent",
]
