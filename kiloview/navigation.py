"""Cursor movement rules for arrow, page, home and end keys.

Movement is a pure function of the current cursor, buffer and screen size.
Every result has its column clamped to the length of the line it lands on.
"""

from __future__ import annotations

from .buffer import LineBuffer
from .input.keys import Key, KeyEvent
from .terminal import ScreenDimensions
from .viewport import CursorPosition


def max_cursor_row(buffer: LineBuffer, dims: ScreenDimensions) -> int:
    """Return the last row the cursor may occupy."""
    return max(buffer.line_count(), dims.rows) - 1


def clamp_cursor(cursor: CursorPosition, buffer: LineBuffer, dims: ScreenDimensions) -> CursorPosition:
    row = max(0, min(cursor.row, max_cursor_row(buffer, dims)))
    col = max(0, min(cursor.col, buffer.line_length(row)))
    return CursorPosition(row=row, col=col)


def move_cursor(
    cursor: CursorPosition,
    event: KeyEvent,
    buffer: LineBuffer,
    dims: ScreenDimensions,
) -> CursorPosition:
    """Return the cursor position after applying ``event``."""
    row, col = cursor.row, cursor.col
    key = event.key
    if key is Key.ARROW_LEFT:
        if col > 0:
            col -= 1
        elif row > 0:
            row -= 1
            col = buffer.line_length(row)
    elif key is Key.ARROW_RIGHT:
        if col < buffer.line_length(row):
            col += 1
        elif row < buffer.line_count() - 1:
            row += 1
            col = 0
    elif key is Key.ARROW_UP:
        row -= 1
    elif key is Key.ARROW_DOWN:
        row += 1
    elif key is Key.PAGE_UP:
        row = 0
    elif key is Key.PAGE_DOWN:
        # Absolute jump to the row just below the first screenful.
        row = dims.rows
    elif key is Key.HOME:
        col = 0
    elif key is Key.END:
        col = dims.cols
    return clamp_cursor(CursorPosition(row=row, col=col), buffer, dims)
