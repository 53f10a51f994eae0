"""Pure text layout primitives used by the renderer.

Blocks are newline-joined strings. Widths are measured in terminal cells via
:func:`quitprompt.ansi.display_width`, so styled and wide text line up.
Nothing here touches the terminal.
"""

from __future__ import annotations

from .ansi import char_display_width, display_width
from .ui_theme import UITheme, styled

BOX_TOP_LEFT = "╭"
BOX_TOP_RIGHT = "╮"
BOX_BOTTOM_LEFT = "╰"
BOX_BOTTOM_RIGHT = "╯"
BOX_HORIZONTAL = "─"
BOX_VERTICAL = "│"


def _pad_right(line: str, width: int) -> str:
    return line + " " * max(0, width - display_width(line))


def _center_split(gap: int) -> tuple[int, int]:
    """Split ``gap`` cells into (before, after), rounding the leading half up."""
    if gap <= 0:
        return 0, 0
    before = (gap + 1) // 2
    return before, gap - before


def join_horizontal(*blocks: str) -> str:
    """Place blocks side by side, vertically centered against the tallest one.

    Every line of a block is padded to that block's width so columns stay
    aligned.
    """
    if not blocks:
        return ""
    split_blocks = [block.split("\n") for block in blocks]
    height = max(len(lines) for lines in split_blocks)
    columns: list[list[str]] = []
    for lines in split_blocks:
        width = display_width("\n".join(lines))
        top, bottom = _center_split(height - len(lines))
        padded = [""] * top + lines + [""] * bottom
        columns.append([_pad_right(line, width) for line in padded])
    return "\n".join("".join(column[row] for column in columns) for row in range(height))


def draw_box(content: str, theme: UITheme, *, padding: int = 1) -> str:
    """Surround ``content`` with a rounded border and uniform inner padding."""
    lines = content.split("\n")
    content_width = display_width(content)
    inner_width = content_width + 2 * padding

    def border(text: str) -> str:
        return styled(text, theme.dialog_border, theme)

    blank_row = border(BOX_VERTICAL) + " " * inner_width + border(BOX_VERTICAL)
    rows = [border(BOX_TOP_LEFT + BOX_HORIZONTAL * inner_width + BOX_TOP_RIGHT)]
    rows.extend(blank_row for _ in range(padding))
    for line in lines:
        body = " " * padding + _pad_right(line, content_width) + " " * padding
        rows.append(border(BOX_VERTICAL) + body + border(BOX_VERTICAL))
    rows.extend(blank_row for _ in range(padding))
    rows.append(border(BOX_BOTTOM_LEFT + BOX_HORIZONTAL * inner_width + BOX_BOTTOM_RIGHT))
    return "\n".join(rows)


def whitespace_fill(width: int, chars: str, theme: UITheme) -> str:
    """Fill ``width`` cells by cycling ``chars``; leftover cells become spaces.

    The pattern restarts at its first character on every call, so each gap
    in a placed layout begins identically.
    """
    if width <= 0:
        return ""
    out: list[str] = []
    col = 0
    idx = 0
    while chars:
        ch = chars[idx % len(chars)]
        w = max(1, char_display_width(ch))
        if col + w > width:
            break
        out.append(ch)
        col += w
        idx += 1
    out.append(" " * (width - col))
    return styled("".join(out), theme.backdrop, theme)


def place_center(width: int, height: int, block: str, theme: UITheme, *, fill: str = " ") -> str:
    """Center ``block`` in a ``width`` x ``height`` area, filling the gaps.

    Along an axis where the block is already as large as the area, no gap is
    added and the block is returned at its natural size on that axis.
    """
    lines = block.split("\n")
    block_width = display_width(block)
    left, right = _center_split(width - block_width)
    rows = [
        whitespace_fill(left, fill, theme) + _pad_right(line, block_width) + whitespace_fill(right, fill, theme)
        for line in lines
    ]
    top, bottom = _center_split(height - len(lines))
    full_row = whitespace_fill(max(width, block_width), fill, theme)
    return "\n".join([full_row] * top + rows + [full_row] * bottom)


__all__ = [
    "join_horizontal",
    "draw_box",
    "whitespace_fill",
    "place_center",
]
