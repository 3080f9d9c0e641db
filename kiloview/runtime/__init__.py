"""Public runtime orchestration entry points.

This package groups the session bootstrap (``run_viewer``) and the
lower-level event loop used by tests and composition code.
"""

from __future__ import annotations


def run_viewer(*args, **kwargs):
    """Lazily import the session entrypoint to keep package imports light."""
    from .app import run_viewer as _run_viewer

    return _run_viewer(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = [
    "run_viewer",
    "run_main_loop",
]
