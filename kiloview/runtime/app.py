"""Viewer session bootstrap and shutdown sequencing.

``run_viewer`` captures the terminal, enters raw mode, optionally loads a
file, and runs the main loop. Whatever happens inside, one final repaint is
attempted and the saved terminal attributes are restored before any error
reaches the caller.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..input import KeyReader
from ..terminal import TerminalController
from .config import ViewerConfig
from .loop import refresh_screen, run_main_loop
from .state import ViewerState

logger = logging.getLogger(__name__)


def run_session(state: ViewerState, terminal: TerminalController, reader: KeyReader, path: Path | None) -> None:
    """Run load + main loop inside raw mode, then repaint once more.

    Load and I/O errors end the session; they are re-raised after the final
    repaint so the caller sees the first failure.
    """
    error: BaseException | None = None
    try:
        if path is not None:
            state.buffer.load_path(path)
        run_main_loop(state, terminal, reader)
    except (OSError, EOFError) as exc:
        logger.exception("session ended with an error")
        error = exc

    try:
        refresh_screen(state, terminal)
    except OSError as exc:
        logger.warning("final repaint failed: %s", exc)
        if error is None:
            error = exc

    if error is not None:
        raise error


def run_viewer(
    path: Path | None,
    config: ViewerConfig | None = None,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> ViewerState:
    """Run one interactive viewer session and return its final state.

    ``TerminalError`` before raw mode is fatal and leaves the terminal as is.
    Every later failure still restores the terminal before propagating.
    """
    if config is None:
        config = ViewerConfig()
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if stdout_fd is None:
        stdout_fd = sys.stdout.fileno()

    terminal = TerminalController(stdin_fd, stdout_fd, read_timeout_ds=config.read_timeout_ds)
    dims = terminal.query_screen_dimensions()
    logger.info("screen %dx%d", dims.rows, dims.cols)

    state = ViewerState(dims=dims)
    reader = KeyReader(stdin_fd, poll_seconds=config.poll_seconds)
    with terminal.raw_mode():
        run_session(state, terminal, reader, path)
    return state
