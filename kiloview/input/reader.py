"""Low-level terminal input reading.

Pulls bytes from the input descriptor one at a time and feeds them to a
``KeyDecoder``. Escape-sequence lookahead waits at most one read-timeout
period per byte, so a lone Escape press resolves without a second key.
"""

from __future__ import annotations

import logging
import os
import select

from .decoder import KeyDecoder
from .keys import KeyEvent

logger = logging.getLogger(__name__)

DEFAULT_POLL_SECONDS = 0.1


def _read_ready_byte(fd: int, timeout_s: float) -> int | None:
    """Return one byte from ``fd`` if it arrives within ``timeout_s``.

    Raises ``EOFError`` when the descriptor reports readable but is closed.
    """
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_s))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        raise EOFError("input stream closed")
    return ch[0]


class KeyReader:
    """Blocking key reader over a raw-mode input descriptor."""

    def __init__(self, fd: int, poll_seconds: float = DEFAULT_POLL_SECONDS) -> None:
        self.fd = fd
        self.poll_seconds = poll_seconds
        self._decoder = KeyDecoder()

    def read_key(self) -> KeyEvent:
        """Wait for the next complete key event."""
        self._decoder.reset()
        while True:
            byte = _read_ready_byte(self.fd, self.poll_seconds)
            if byte is not None:
                break
        event = self._decoder.feed(byte)
        while event is None:
            byte = _read_ready_byte(self.fd, self.poll_seconds)
            if byte is None:
                event = self._decoder.timeout()
            else:
                event = self._decoder.feed(byte)
        logger.debug("key %s %r", event.key.value, event.char)
        return event


def read_key(fd: int, poll_seconds: float = DEFAULT_POLL_SECONDS) -> KeyEvent:
    """Read one key from ``fd`` with a throwaway decoder."""
    return KeyReader(fd, poll_seconds).read_key()
