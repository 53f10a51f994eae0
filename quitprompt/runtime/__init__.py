"""Public runtime orchestration entry points.

This package groups the interactive bootstrap (`run_app`) and the
lower-level event loop used by tests and composition code.
"""

from __future__ import annotations


def run_app(*args, **kwargs):
    """Lazily import the session bootstrap to keep package imports light."""
    from .app import run_app as _run_app

    return _run_app(*args, **kwargs)


def run_event_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_event_loop as _run_event_loop

    return _run_event_loop(*args, **kwargs)


__all__ = [
    "run_app",
    "run_event_loop",
]
