"""Interactive session bootstrap.

Wires the real terminal into the event loop: raw alternate-screen mode, the
polling event source, and frame output.
"""

from __future__ import annotations

import os
import sys

from ..input.key_registry import DEFAULT_KEY_BINDINGS, KeyBindingTable
from ..state import AppState
from ..ui_theme import resolve_theme
from .driver import DEFAULT_LOOP_TIMING, LoopTiming, TerminalEventSource
from .loop import run_event_loop
from .terminal import TerminalController


def run_app(
    bindings: KeyBindingTable = DEFAULT_KEY_BINDINGS,
    timing: LoopTiming = DEFAULT_LOOP_TIMING,
) -> AppState:
    """Run one interactive session until the user confirms exit.

    Raises ``DriverInitError`` if the terminal cannot be initialized.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    theme = resolve_theme(no_color=not os.isatty(stdout_fd))
    events = TerminalEventSource(stdin_fd, timing=timing)
    with terminal.raw_mode():
        return run_event_loop(
            AppState(),
            bindings,
            next_event=events.next_event,
            write_frame=terminal.write_frame,
            theme=theme,
        )
