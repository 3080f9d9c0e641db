"""Byte-at-a-time escape sequence decoder.

``KeyDecoder`` is a small state machine: feed it one input byte at a time
and it answers with a ``KeyEvent`` once a key is complete. When the input
source runs dry mid-sequence, ``timeout()`` resolves the pending bytes to a
bare Escape key. Unknown sequences also degrade to Escape, never an error.
"""

from __future__ import annotations

from enum import Enum

from . import keys
from .keys import KeyEvent

_ESC_BYTE = 0x1B

# ESC [ <digit> ~
_TILDE_KEYS: dict[int, KeyEvent] = {
    ord("1"): keys.HOME,
    ord("3"): keys.DELETE,
    ord("4"): keys.END,
    ord("5"): keys.PAGE_UP,
    ord("6"): keys.PAGE_DOWN,
    ord("7"): keys.HOME,
    ord("8"): keys.END,
}

# ESC [ <letter>
_CSI_KEYS: dict[int, KeyEvent] = {
    ord("A"): keys.ARROW_UP,
    ord("B"): keys.ARROW_DOWN,
    ord("C"): keys.ARROW_RIGHT,
    ord("D"): keys.ARROW_LEFT,
    ord("F"): keys.END,
    ord("H"): keys.HOME,
}

# ESC O <letter>
_SS3_KEYS: dict[int, KeyEvent] = {
    ord("F"): keys.END,
    ord("H"): keys.HOME,
}


class DecoderState(Enum):
    IDLE = "idle"
    SAW_ESCAPE = "saw_escape"
    SAW_CSI = "saw_csi"
    SAW_SS3 = "saw_ss3"
    SAW_UNKNOWN = "saw_unknown"
    AWAITING_TILDE = "awaiting_tilde"


class KeyDecoder:
    """Resolve raw input bytes into logical key events."""

    def __init__(self) -> None:
        self.state = DecoderState.IDLE
        self._digit = 0

    @property
    def pending(self) -> bool:
        """Whether bytes of an incomplete escape sequence are buffered."""
        return self.state is not DecoderState.IDLE

    def reset(self) -> None:
        self.state = DecoderState.IDLE
        self._digit = 0

    def _finish(self, event: KeyEvent) -> KeyEvent:
        self.reset()
        return event

    def feed(self, byte: int) -> KeyEvent | None:
        """Consume one byte; return a key when complete, else ``None``."""
        state = self.state
        if state is DecoderState.IDLE:
            if byte == _ESC_BYTE:
                self.state = DecoderState.SAW_ESCAPE
                return None
            return KeyEvent.other(chr(byte))

        if state is DecoderState.SAW_ESCAPE:
            if byte == ord("["):
                self.state = DecoderState.SAW_CSI
            elif byte == ord("O"):
                self.state = DecoderState.SAW_SS3
            else:
                # Escape sequences are read as ESC plus two bytes, so the
                # second byte of an unknown pair is still consumed.
                self.state = DecoderState.SAW_UNKNOWN
            return None

        if state is DecoderState.SAW_CSI:
            if ord("0") <= byte <= ord("9"):
                self._digit = byte
                self.state = DecoderState.AWAITING_TILDE
                return None
            return self._finish(_CSI_KEYS.get(byte, keys.ESCAPE))

        if state is DecoderState.SAW_SS3:
            return self._finish(_SS3_KEYS.get(byte, keys.ESCAPE))

        if state is DecoderState.SAW_UNKNOWN:
            return self._finish(keys.ESCAPE)

        # AWAITING_TILDE
        if byte != ord("~"):
            return self._finish(keys.ESCAPE)
        return self._finish(_TILDE_KEYS.get(self._digit, keys.ESCAPE))

    def timeout(self) -> KeyEvent | None:
        """Resolve an incomplete sequence after the read timeout expired."""
        if not self.pending:
            return None
        return self._finish(keys.ESCAPE)


def decode_bytes(data: bytes) -> list[KeyEvent]:
    """Decode a complete byte string; a trailing partial sequence times out."""
    decoder = KeyDecoder()
    events: list[KeyEvent] = []
    for byte in data:
        event = decoder.feed(byte)
        if event is not None:
            events.append(event)
    tail = decoder.timeout()
    if tail is not None:
        events.append(tail)
    return events
