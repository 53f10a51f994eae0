"""Exit confirmation dialog rendering."""

from __future__ import annotations

from ..layout import draw_box, join_horizontal, place_center
from ..state import AppState
from ..ui_theme import UITheme, styled

CONFIRM_PROMPT = "Are you sure you want to exit?"
CONFIRM_CHOICE = "[yN]"
DIALOG_BACKDROP = "猫咪"
DEFAULT_VIEWPORT = (80, 24)


def dialog_viewport(state: AppState) -> tuple[int, int]:
    """Return the area to center in, or the default before any resize."""
    if state.viewport_width <= 0 or state.viewport_height <= 0:
        return DEFAULT_VIEWPORT
    return state.viewport_width, state.viewport_height


def render_confirm_quit_view(state: AppState, theme: UITheme) -> str:
    """Render the boxed ``[yN]`` prompt centered over a patterned backdrop."""
    text = join_horizontal(
        styled(CONFIRM_PROMPT, theme.dialog_text, theme),
        " " + styled(CONFIRM_CHOICE, theme.dialog_choice, theme),
    )
    dialog = draw_box(text, theme, padding=1)
    width, height = dialog_viewport(state)
    return place_center(width, height, dialog, theme, fill=DIALOG_BACKDROP)
