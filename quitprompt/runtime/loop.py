"""Main interactive event loop for the terminal UI.

Processes exactly one event per iteration: transition, then render the
just-updated state, then write it. The loop owns no feature logic; the state
machine and renderer are pure and the terminal is reached only through the
injected ``next_event`` and ``write_frame`` callables.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..events import InputEvent
from ..input.key_registry import KeyBindingTable
from ..render import render
from ..state import AppState
from ..transitions import transition
from ..ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)


def run_event_loop(
    state: AppState,
    bindings: KeyBindingTable,
    next_event: Callable[[], InputEvent],
    write_frame: Callable[[str], None],
    theme: UITheme = DEFAULT_THEME,
) -> AppState:
    """Run until a transition asks to terminate and return the final state.

    No further events are requested once termination is signaled, and no
    frame is written for the terminating event.
    """
    while True:
        event = next_event()
        result = transition(state, event, bindings)
        logger.debug(
            "%s: %s -> %s (terminate=%s)",
            event,
            state.mode.value,
            result.next_state.mode.value,
            result.terminate,
        )
        state = result.next_state
        if result.terminate:
            return state
        write_frame(render(state, bindings, theme))
