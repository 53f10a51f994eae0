"""Regression tests for ANSI-aware width measurement."""

import unittest

from quitprompt import ansi as ansi_mod


class DisplayWidthTests(unittest.TestCase):
    def test_escape_sequences_take_no_columns(self) -> None:
        self.assertEqual(ansi_mod.display_width("\033[38;5;170mhello\033[0m"), 5)

    def test_wide_characters_take_two_columns(self) -> None:
        self.assertEqual(ansi_mod.display_width("猫咪"), 4)
        self.assertEqual(ansi_mod.display_width("é"), 1)

    def test_multiline_text_reports_widest_line(self) -> None:
        self.assertEqual(ansi_mod.display_width("ab\nabcd\n"), 4)
        self.assertEqual(ansi_mod.display_width(""), 0)


if __name__ == "__main__":
    unittest.main()
