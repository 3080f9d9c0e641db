"""Line-oriented text buffer backing the viewer.

Lines are stored tab-expanded and without terminators, so column arithmetic
elsewhere can treat one character as one screen cell.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

TAB_STOP = 4


def decode_text(data: bytes) -> str:
    """Decode bytes as UTF-8 (dropping a BOM), falling back to latin-1.

    latin-1 maps every byte, so undecodable input still loads one character
    per byte instead of failing.
    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        return data.decode("latin-1")


def expand_tabs(line: str, tab_stop: int = TAB_STOP) -> str:
    """Replace every tab in ``line`` with ``tab_stop`` spaces."""
    if "\t" not in line:
        return line
    out: list[str] = []
    idx = 0
    while idx < len(line):
        ch = line[idx]
        out.append(" " * tab_stop if ch == "\t" else ch)
        idx += 1
    return "".join(out)


def split_lines(text: str) -> list[str]:
    """Split text on any line break; a final terminator adds no empty line."""
    return text.splitlines()


class LineBuffer:
    """Immutable-by-convention sequence of display lines."""

    def __init__(self, lines: tuple[str, ...] | list[str] = ()) -> None:
        self._lines: tuple[str, ...] = tuple(expand_tabs(line) for line in lines)

    @classmethod
    def from_bytes(cls, data: bytes) -> LineBuffer:
        buffer = cls()
        buffer.load(data)
        return buffer

    @property
    def lines(self) -> tuple[str, ...]:
        return self._lines

    def load(self, data: bytes) -> None:
        """Replace buffer contents with the lines parsed from ``data``."""
        text = decode_text(data)
        self._lines = tuple(expand_tabs(line) for line in split_lines(text))

    def load_path(self, path: Path) -> None:
        """Load ``path`` into the buffer.

        ``OSError`` from reading propagates and leaves the current contents
        untouched.
        """
        data = Path(path).read_bytes()
        self.load(data)
        logger.info("loaded %s (%d lines)", path, len(self._lines))

    def is_empty(self) -> bool:
        return not self._lines

    def line_count(self) -> int:
        return len(self._lines)

    def line_length(self, row: int) -> int:
        if row < 0 or row >= len(self._lines):
            return 0
        return len(self._lines[row])

    def line_slice(self, row: int, from_col: int, to_col: int) -> str:
        """Return columns ``[from_col, to_col)`` of ``row``, clamped to the line."""
        if row < 0 or row >= len(self._lines):
            return ""
        line = self._lines[row]
        start = max(0, from_col)
        if start >= len(line):
            return ""
        return line[start:max(start, min(to_col, len(line)))]
