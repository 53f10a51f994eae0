"""Help line rendering for the main view.

The short view lists bindings on one line and truncates with an ellipsis
when the viewport is too narrow. The full view puts every binding on its own
row with keys and descriptions in aligned columns.
"""

from __future__ import annotations

from ..ansi import display_width
from ..input.key_registry import SHORT_HELP_ACTIONS, Action, KeyBindingTable
from ..layout import join_horizontal
from ..ui_theme import UITheme, styled

SHORT_HELP_SEPARATOR = " • "
HELP_ELLIPSIS = "…"


def short_help_view(bindings: KeyBindingTable, theme: UITheme, width: int = 0) -> str:
    """Render the one-line help listing.

    ``width`` of 0 disables truncation. Otherwise items that would overflow
    are dropped and replaced by an ellipsis tail when the tail itself fits.
    """
    pieces: list[str] = []
    total_width = 0
    for key_label, help_label in bindings.describe(SHORT_HELP_ACTIONS):
        separator = styled(SHORT_HELP_SEPARATOR, theme.help_separator, theme) if total_width > 0 else ""
        item = (
            separator
            + styled(key_label, theme.help_key, theme)
            + " "
            + styled(help_label, theme.help_desc, theme)
        )
        item_width = display_width(item)
        if width > 0 and total_width + item_width > width:
            tail = " " + styled(HELP_ELLIPSIS, theme.help_ellipsis, theme)
            if total_width + display_width(tail) < width:
                pieces.append(tail)
            break
        pieces.append(item)
        total_width += item_width
    return "".join(pieces)


def full_help_view(bindings: KeyBindingTable, theme: UITheme, width: int = 0) -> str:
    """Render every enabled binding as a ``key description`` row.

    ``width`` of 0 disables truncation. A listing wider than ``width`` is
    replaced by the ellipsis tail, or by nothing when the tail does not fit.
    """
    entries = bindings.describe(Action)
    if not entries:
        return ""
    keys = "\n".join(styled(key_label, theme.help_key, theme) for key_label, _ in entries)
    descriptions = "\n".join(styled(help_label, theme.help_desc, theme) for _, help_label in entries)
    column = join_horizontal(keys, " ", descriptions)
    if width > 0 and display_width(column) > width:
        tail = " " + styled(HELP_ELLIPSIS, theme.help_ellipsis, theme)
        return tail if display_width(tail) < width else ""
    return column


__all__ = [
    "SHORT_HELP_SEPARATOR",
    "HELP_ELLIPSIS",
    "short_help_view",
    "full_help_view",
]
