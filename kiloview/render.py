"""Frame composition for the viewer screen.

``build_frame`` is pure: it turns buffer, viewport and cursor state into the
exact ANSI stream for one repaint. The runtime loop writes each frame with
a single terminal write so a refresh never shows half-drawn rows.
"""

from __future__ import annotations

from . import __version__
from .buffer import LineBuffer
from .terminal import ScreenDimensions
from .viewport import CursorPosition, Viewport

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CURSOR_HOME = "\x1b[H"
ERASE_LINE = "\x1b[K"
ROW_SEPARATOR = "\r\n"
EMPTY_ROW_MARKER = "~"

WELCOME_MESSAGE = f"Kiloview -- version {__version__}"


def cursor_to(row: int, col: int) -> str:
    """Return the sequence placing the cursor at 1-indexed ``(row, col)``."""
    return f"\x1b[{row};{col}H"


def welcome_row(width: int, message: str = WELCOME_MESSAGE) -> str:
    """Center ``message`` in ``width`` cells, marker in the first padding cell."""
    message = message[:width]
    padding = (width - len(message)) // 2
    out = ""
    if padding > 0:
        out = EMPTY_ROW_MARKER
        padding -= 1
    return out + " " * padding + message


def draw_rows(
    buffer: LineBuffer,
    viewport: Viewport,
    dims: ScreenDimensions,
    message: str = WELCOME_MESSAGE,
) -> list[str]:
    """Return the visible content of every screen row, top to bottom."""
    rows: list[str] = []
    empty = buffer.is_empty()
    for y in range(dims.rows):
        file_row = y + viewport.row_offset
        if empty or file_row >= buffer.line_count():
            if empty and y == dims.rows // 3:
                rows.append(welcome_row(dims.cols, message))
            else:
                rows.append(EMPTY_ROW_MARKER)
            continue
        rows.append(buffer.line_slice(file_row, viewport.col_offset, viewport.col_offset + dims.cols))
    return rows


def build_frame(
    buffer: LineBuffer,
    viewport: Viewport,
    cursor: CursorPosition,
    dims: ScreenDimensions,
    message: str = WELCOME_MESSAGE,
) -> str:
    """Compose one full repaint as an ANSI string."""
    body = ROW_SEPARATOR.join(ERASE_LINE + row for row in draw_rows(buffer, viewport, dims, message))
    screen_row, screen_col = viewport.screen_position(cursor)
    return "".join(
        (
            HIDE_CURSOR,
            CURSOR_HOME,
            body,
            cursor_to(screen_row, screen_col),
            SHOW_CURSOR,
        )
    )
