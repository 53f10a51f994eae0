"""View state machine: pure transitions from (state, event) to a result.

Each view mode has its own handler. Handlers never mutate their input and
never touch the terminal; termination is reported through
``TransitionResult.terminate`` rather than by raising or exiting.
"""

from __future__ import annotations

from dataclasses import replace

from .events import InputEvent, Resize
from .input.key_registry import Action, KeyBindingTable
from .state import AppState, TransitionResult, ViewMode

CONFIRM_KEY = "y"


def _resized(state: AppState, event: Resize) -> TransitionResult:
    return TransitionResult(
        next_state=replace(state, viewport_width=max(0, event.width), viewport_height=max(0, event.height))
    )


def handle_main_event(state: AppState, event: InputEvent, bindings: KeyBindingTable) -> TransitionResult:
    """Handle one event in the main view.

    The help key toggles the expanded listing, the quit key opens the
    confirmation view, and unbound keys are ignored.
    """
    if isinstance(event, Resize):
        return _resized(state, event)

    action = bindings.resolve(event.key)
    if action == Action.HELP:
        return TransitionResult(next_state=replace(state, help_expanded=not state.help_expanded))
    if action == Action.QUIT:
        return TransitionResult(next_state=replace(state, mode=ViewMode.CONFIRM_QUIT))
    return TransitionResult(next_state=state)


def handle_confirm_quit_event(state: AppState, event: InputEvent) -> TransitionResult:
    """Handle one event while the exit prompt is shown.

    Only the literal ``"y"`` confirms; any other key answers no and returns to
    the main view. Resizes keep the prompt open.
    """
    if isinstance(event, Resize):
        return _resized(state, event)
    if event.key == CONFIRM_KEY:
        return TransitionResult(next_state=state, terminate=True)
    return TransitionResult(next_state=replace(state, mode=ViewMode.MAIN))


def transition(state: AppState, event: InputEvent, bindings: KeyBindingTable) -> TransitionResult:
    """Dispatch ``event`` to the handler for ``state.mode``."""
    if state.mode == ViewMode.CONFIRM_QUIT:
        return handle_confirm_quit_event(state, event)
    return handle_main_event(state, event, bindings)


__all__ = [
    "CONFIRM_KEY",
    "handle_main_event",
    "handle_confirm_quit_event",
    "transition",
]
