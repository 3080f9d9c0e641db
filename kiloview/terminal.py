"""Terminal control helpers for the viewer session.

Owns the saved tty attributes, the raw-mode lifecycle, and the window-size
query. Everything else talks to the terminal through this controller.
"""

from __future__ import annotations

import contextlib
import fcntl
import logging
import os
import struct
import termios
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_READ_TIMEOUT_DS = 1

# struct winsize { unsigned short ws_row, ws_col, ws_xpixel, ws_ypixel; }
_WINSIZE = struct.Struct("HHHH")

# Indices into the list returned by termios.tcgetattr.
_IFLAG, _OFLAG, _CFLAG, _LFLAG, _CC = 0, 1, 2, 3, 6


class TerminalError(RuntimeError):
    """Raised when tty attributes or the window size cannot be read or set."""


@dataclass(frozen=True)
class ScreenDimensions:
    """Visible terminal size in character cells."""

    rows: int
    cols: int


def raw_mode_attributes(saved: list, read_timeout_ds: int = DEFAULT_READ_TIMEOUT_DS) -> list:
    """Return a raw-mode copy of ``saved`` tty attributes.

    Input is byte-by-byte without echo or signals, output post-processing is
    off, and reads return after ``read_timeout_ds`` tenths of a second even
    when no byte arrived.
    """
    attrs = list(saved)
    attrs[_IFLAG] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
    attrs[_OFLAG] &= ~termios.OPOST
    attrs[_CFLAG] |= termios.CS8
    attrs[_LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
    cc = list(saved[_CC])
    cc[termios.VMIN] = 0
    cc[termios.VTIME] = read_timeout_ds
    attrs[_CC] = cc
    return attrs


class TerminalController:
    """Manage raw-mode transitions and low-level terminal I/O."""

    def __init__(
        self,
        stdin_fd: int,
        stdout_fd: int,
        read_timeout_ds: int = DEFAULT_READ_TIMEOUT_DS,
    ) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.read_timeout_ds = read_timeout_ds
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"cannot read terminal attributes: {exc}") from exc
        self._raw_enabled = False

    @property
    def saved_attributes(self) -> list:
        """Attribute set captured before raw mode was first entered."""
        return self._saved_tty_state

    @property
    def raw_enabled(self) -> bool:
        return self._raw_enabled

    def enter_raw_mode(self) -> None:
        """Apply raw-mode attributes, discarding any unread input."""
        attrs = raw_mode_attributes(self._saved_tty_state, self.read_timeout_ds)
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, attrs)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"cannot enable raw mode: {exc}") from exc
        self._raw_enabled = True
        logger.debug("raw mode enabled (VTIME=%d)", self.read_timeout_ds)

    def exit_raw_mode(self) -> None:
        """Re-apply the captured attributes if raw mode is active."""
        if not self._raw_enabled:
            return
        self._raw_enabled = False
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"cannot restore terminal attributes: {exc}") from exc
        logger.debug("raw mode disabled")

    def query_screen_dimensions(self) -> ScreenDimensions:
        """Ask the output device for its row/column count."""
        request = _WINSIZE.pack(0, 0, 0, 0)
        try:
            response = fcntl.ioctl(self.stdout_fd, termios.TIOCGWINSZ, request)
        except OSError as exc:
            raise TerminalError(f"cannot query window size: {exc}") from exc
        rows, cols, _xpixel, _ypixel = _WINSIZE.unpack(response)
        if rows <= 0 or cols <= 0:
            raise TerminalError(f"terminal reported an empty window ({rows}x{cols})")
        return ScreenDimensions(rows=rows, cols=cols)

    def write(self, data: bytes) -> None:
        """Write all of ``data`` to the output descriptor."""
        view = memoryview(data)
        while view:
            written = os.write(self.stdout_fd, view)
            view = view[written:]

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with raw-mode enter/exit calls."""
        try:
            self.enter_raw_mode()
            yield
        finally:
            self.exit_raw_mode()
