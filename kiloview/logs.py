"""File-backed logging setup.

The screen belongs to the viewer while the terminal is raw, so diagnostics
only ever go to a log file under the platform's user log directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

LOG_PATH = Path(user_log_dir("kiloview", appauthor=False)) / "kiloview.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None, path: Path | None = None) -> Path | None:
    """Attach a file handler to the package logger when ``level`` is set.

    Returns the log file path, or ``None`` when logging stays disabled.
    """
    if level is None:
        return None
    numeric_level = getattr(logging, level, None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    target = path if path is not None else LOG_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(target, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("kiloview")
    package_logger.addHandler(handler)
    package_logger.setLevel(numeric_level)
    return target
