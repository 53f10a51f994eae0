"""Frame rendering for both view modes.

``render`` is a pure function of application state, key bindings, and
theme: it performs no I/O, and equal inputs always yield the same string.
Writing the frame to the terminal is the runtime's job.
"""

from __future__ import annotations

from ..input.key_registry import KeyBindingTable
from ..state import AppState, ViewMode
from ..ui_theme import DEFAULT_THEME, UITheme, styled
from .dialog import CONFIRM_CHOICE, CONFIRM_PROMPT, render_confirm_quit_view
from .help import full_help_view, short_help_view

STATUS_TEXT = "Waiting..."
MAIN_VIEW_TARGET_LINES = 8


def main_view_padding(status: str, help_view: str) -> int:
    """Blank lines between status and help so the frame keeps a fixed height.

    Clamped at zero when the help listing alone exceeds the target.
    """
    return max(0, MAIN_VIEW_TARGET_LINES - status.count("\n") - help_view.count("\n"))


def render_main_view(state: AppState, bindings: KeyBindingTable, theme: UITheme) -> str:
    status = styled(STATUS_TEXT, theme.status, theme)
    if state.help_expanded:
        help_view = full_help_view(bindings, theme, width=state.viewport_width)
    else:
        help_view = short_help_view(bindings, theme, width=state.viewport_width)
    return "\n" + status + "\n" * main_view_padding(status, help_view) + help_view


def render(state: AppState, bindings: KeyBindingTable, theme: UITheme = DEFAULT_THEME) -> str:
    """Return the frame for ``state``, dispatched on its view mode."""
    if state.mode == ViewMode.CONFIRM_QUIT:
        return render_confirm_quit_view(state, theme)
    return render_main_view(state, bindings, theme)


__all__ = [
    "STATUS_TEXT",
    "MAIN_VIEW_TARGET_LINES",
    "CONFIRM_PROMPT",
    "CONFIRM_CHOICE",
    "main_view_padding",
    "render_main_view",
    "render",
]
