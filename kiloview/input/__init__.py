"""Input-layer public API for key decoding.

Exports are split between the pure byte decoder (``KeyDecoder``,
``decode_bytes``) and the descriptor-backed reader used by the runtime loop.
"""

from .decoder import DecoderState, KeyDecoder, decode_bytes
from .keys import ESC, QUIT_CHAR, Key, KeyEvent, ctrl_key
from .reader import DEFAULT_POLL_SECONDS, KeyReader, read_key

__all__ = [
    "DecoderState",
    "KeyDecoder",
    "decode_bytes",
    "ESC",
    "QUIT_CHAR",
    "Key",
    "KeyEvent",
    "ctrl_key",
    "DEFAULT_POLL_SECONDS",
    "KeyReader",
    "read_key",
]
