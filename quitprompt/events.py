"""Input events delivered to the state machine.

Key presses and terminal resizes share one serialized stream; the terminal
driver produces them and the runtime loop consumes them in arrival order.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyPress:
    """One decoded key token, e.g. ``"q"``, ``"ESC"``, ``"CTRL_C"``, ``"UP"``."""

    key: str


@dataclass(frozen=True)
class Resize:
    """New terminal dimensions in cells."""

    width: int
    height: int


InputEvent = KeyPress | Resize

__all__ = ["KeyPress", "Resize", "InputEvent"]
