"""Scroll offsets that keep the cursor on screen."""

from __future__ import annotations

from dataclasses import dataclass

from .terminal import ScreenDimensions


@dataclass(frozen=True)
class CursorPosition:
    """Cursor location in buffer coordinates (not screen cells)."""

    row: int = 0
    col: int = 0


def _scroll_axis(offset: int, position: int, extent: int) -> int:
    """Move ``offset`` just far enough that ``position`` is visible."""
    if position < offset:
        return position
    if position >= offset + extent:
        return position - extent + 1
    return offset


@dataclass
class Viewport:
    """Buffer coordinate shown at the screen's top-left cell."""

    row_offset: int = 0
    col_offset: int = 0

    def scroll(self, cursor: CursorPosition, dims: ScreenDimensions) -> None:
        """Apply the minimal-scroll rule on both axes; never re-centers."""
        self.row_offset = _scroll_axis(self.row_offset, cursor.row, dims.rows)
        self.col_offset = _scroll_axis(self.col_offset, cursor.col, dims.cols)

    def screen_position(self, cursor: CursorPosition) -> tuple[int, int]:
        """Return 1-indexed terminal ``(row, col)`` for ``cursor``."""
        return cursor.row - self.row_offset + 1, cursor.col - self.col_offset + 1
