"""Command-line front door for kiloview.

Parses CLI options, loads config and logging, then hands the optional file
path to the interactive viewer session.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import __version__
from .logs import setup_logging
from .runtime import run_viewer
from .runtime.config import load_viewer_config, normalize_log_level
from .terminal import TerminalError

logger = logging.getLogger(__name__)


def _log_level(value: str) -> str:
    """argparse type for logging level names."""
    level = normalize_log_level(value)
    if level is None:
        raise argparse.ArgumentTypeError(f"invalid log level: {value!r}")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kiloview",
        description="View a text file in the terminal and move around it with the cursor keys. Ctrl-Q quits.",
    )
    parser.add_argument("path", nargs="?", default=None, help="File to open. Omit for the welcome screen.")
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=None,
        help="Write a log file at this level (DEBUG, INFO, WARNING, ERROR).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the viewer.

    Any terminal, load or I/O failure is reported as ``SystemExit`` once the
    terminal has been restored.
    """
    args = build_parser().parse_args(argv)
    config = load_viewer_config(args.log_level)
    log_path = setup_logging(config.log_level)
    if log_path is not None:
        logger.info("kiloview %s logging to %s", __version__, log_path)

    path = Path(args.path) if args.path is not None else None
    try:
        run_viewer(path, config)
    except (TerminalError, OSError, EOFError) as exc:
        raise SystemExit(f"Error: {exc}") from exc


if __name__ == "__main__":
    main()
