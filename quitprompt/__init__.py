"""Public package surface for quitprompt.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in submodules under ``quitprompt``.
"""

from __future__ import annotations

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
