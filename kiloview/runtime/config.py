"""Read-only JSON config helpers.

Holds the input read timeout and an optional default log level.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..terminal import DEFAULT_READ_TIMEOUT_DS

APP_NAME = "kiloview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

# VTIME is a single cc byte counted in tenths of a second.
MAX_READ_TIMEOUT_DS = 255

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ViewerConfig:
    """Settings that shape terminal input and diagnostics."""

    read_timeout_ds: int = DEFAULT_READ_TIMEOUT_DS
    log_level: str | None = None

    @property
    def poll_seconds(self) -> float:
        """Read timeout in seconds, used for escape-sequence lookahead."""
        return self.read_timeout_ds / 10.0


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_read_timeout(value: object) -> int:
    """Accept integers in ``[1, 255]``; anything else means the default."""
    if isinstance(value, bool) or not isinstance(value, int):
        return DEFAULT_READ_TIMEOUT_DS
    if value < 1 or value > MAX_READ_TIMEOUT_DS:
        return DEFAULT_READ_TIMEOUT_DS
    return value


def normalize_log_level(value: object) -> str | None:
    """Return an upper-cased logging level name, or ``None`` if invalid."""
    if not isinstance(value, str):
        return None
    level = value.strip().upper()
    return level if level in _LOG_LEVELS else None


def load_viewer_config(log_level: str | None = None) -> ViewerConfig:
    """Build ``ViewerConfig`` from the config file.

    An explicit ``log_level`` (typically from the command line) wins over
    the file value.
    """
    data = load_config()
    return ViewerConfig(
        read_timeout_ds=_coerce_read_timeout(data.get("read_timeout_ds")),
        log_level=normalize_log_level(log_level) or normalize_log_level(data.get("log_level")),
    )
