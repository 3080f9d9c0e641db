"""Main interactive event loop for the viewer.

Each iteration repaints the screen, reads one key, and applies it. The loop
owns no terminal lifecycle; ``run_viewer`` brackets it with raw mode.
"""

from __future__ import annotations

import logging

from ..input import QUIT_CHAR, KeyEvent, KeyReader
from ..navigation import move_cursor
from ..render import build_frame
from ..terminal import TerminalController
from .state import ViewerState

logger = logging.getLogger(__name__)


def refresh_screen(state: ViewerState, terminal: TerminalController) -> None:
    """Scroll to keep the cursor visible, then repaint in one write."""
    state.viewport.scroll(state.cursor, state.dims)
    frame = build_frame(state.buffer, state.viewport, state.cursor, state.dims)
    terminal.write(frame.encode("utf-8", errors="replace"))


def process_key(state: ViewerState, event: KeyEvent) -> bool:
    """Apply one key; return ``False`` once the user asked to quit."""
    if event.is_char(QUIT_CHAR):
        state.quit_requested = True
        return False
    state.cursor = move_cursor(state.cursor, event, state.buffer, state.dims)
    return True


def run_main_loop(state: ViewerState, terminal: TerminalController, reader: KeyReader) -> None:
    """Run render/read/apply iterations until a quit key arrives.

    I/O errors from the terminal or the input stream propagate to the caller.
    """
    while not state.quit_requested:
        refresh_screen(state, terminal)
        if not process_key(state, reader.read_key()):
            logger.info("quit requested")
            return
