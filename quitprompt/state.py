"""Application model shared by the state machine, renderer, and loop."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ViewMode(str, Enum):
    MAIN = "main"
    CONFIRM_QUIT = "confirm_quit"


@dataclass(frozen=True)
class AppState:
    mode: ViewMode = ViewMode.MAIN
    help_expanded: bool = False
    viewport_width: int = 0
    viewport_height: int = 0


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of one event: the replacement state and whether to stop."""

    next_state: AppState
    terminate: bool = False


__all__ = ["ViewMode", "AppState", "TransitionResult"]
