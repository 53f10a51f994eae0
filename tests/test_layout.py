"""Layout primitive tests: joining, boxing, and centered placement."""

from __future__ import annotations

import unittest

from quitprompt.ansi import display_width
from quitprompt.layout import draw_box, join_horizontal, place_center, whitespace_fill
from quitprompt.ui_theme import DEFAULT_THEME, PLAIN_THEME


class JoinHorizontalTests(unittest.TestCase):
    def test_single_line_blocks_concatenate(self) -> None:
        self.assertEqual(join_horizontal("ab", " ", "cd"), "ab cd")

    def test_shorter_blocks_are_centered_and_padded(self) -> None:
        joined = join_horizontal("a\nbbb\nc", "X")

        self.assertEqual(joined.split("\n"), ["a   ", "bbbX", "c   "])

    def test_no_blocks_yields_empty_string(self) -> None:
        self.assertEqual(join_horizontal(), "")


class DrawBoxTests(unittest.TestCase):
    def test_rounded_box_with_padding(self) -> None:
        self.assertEqual(
            draw_box("hi", PLAIN_THEME).split("\n"),
            ["╭────╮", "│    │", "│ hi │", "│    │", "╰────╯"],
        )

    def test_box_without_padding_pads_short_lines(self) -> None:
        self.assertEqual(
            draw_box("abc\nd", PLAIN_THEME, padding=0).split("\n"),
            ["╭───╮", "│abc│", "│d  │", "╰───╯"],
        )

    def test_border_color_does_not_change_width(self) -> None:
        styled_box = draw_box("hi", DEFAULT_THEME)

        self.assertIn(DEFAULT_THEME.dialog_border, styled_box)
        self.assertEqual(display_width(styled_box), 6)


class PlacementTests(unittest.TestCase):
    def test_whitespace_fill_pads_odd_width_with_space(self) -> None:
        self.assertEqual(whitespace_fill(5, "猫咪", PLAIN_THEME), "猫咪 ")
        self.assertEqual(whitespace_fill(4, "猫咪", PLAIN_THEME), "猫咪")
        self.assertEqual(whitespace_fill(1, "猫咪", PLAIN_THEME), " ")
        self.assertEqual(whitespace_fill(0, "猫咪", PLAIN_THEME), "")

    def test_place_center_rounds_leading_gap_up(self) -> None:
        placed = place_center(6, 4, "ab\ncd", PLAIN_THEME, fill=".")

        self.assertEqual(placed.split("\n"), ["......", "..ab..", "..cd..", "......"])

        placed = place_center(6, 3, "x", PLAIN_THEME, fill=".")
        self.assertEqual(placed.split("\n"), ["......", "...x..", "......"])

    def test_place_center_leaves_oversized_block_untouched(self) -> None:
        self.assertEqual(place_center(2, 1, "abc\ndef", PLAIN_THEME, fill="."), "abc\ndef")


if __name__ == "__main__":
    unittest.main()
