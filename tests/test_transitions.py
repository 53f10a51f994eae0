"""State machine transition tests.

Covers every row of the main and confirm-quit transition tables, including
the literal ``"y"`` confirmation rule and resize handling in both modes.
"""

from __future__ import annotations

from dataclasses import replace
import unittest

from quitprompt.events import KeyPress, Resize
from quitprompt.input import DEFAULT_KEY_BINDINGS
from quitprompt.state import AppState, ViewMode
from quitprompt.transitions import handle_confirm_quit_event, handle_main_event, transition

HELP_KEY = "?"
QUIT_KEYS = ("q", "ESC", "CTRL_C")


class MainViewTransitionTests(unittest.TestCase):
    def test_resize_updates_viewport_and_keeps_main_mode(self) -> None:
        for help_expanded in (False, True):
            state = AppState(help_expanded=help_expanded, viewport_width=10, viewport_height=5)
            result = transition(state, Resize(120, 40), DEFAULT_KEY_BINDINGS)

            self.assertEqual(result.next_state.viewport_width, 120)
            self.assertEqual(result.next_state.viewport_height, 40)
            self.assertEqual(result.next_state.mode, ViewMode.MAIN)
            self.assertEqual(result.next_state.help_expanded, help_expanded)
            self.assertFalse(result.terminate)

    def test_help_key_toggles_expansion_from_both_starting_values(self) -> None:
        for help_expanded in (False, True):
            state = AppState(help_expanded=help_expanded)
            result = transition(state, KeyPress(HELP_KEY), DEFAULT_KEY_BINDINGS)

            self.assertEqual(result.next_state.help_expanded, not help_expanded)
            self.assertEqual(result.next_state.mode, ViewMode.MAIN)
            self.assertFalse(result.terminate)

    def test_help_key_twice_restores_starting_value(self) -> None:
        state = AppState()
        once = transition(state, KeyPress(HELP_KEY), DEFAULT_KEY_BINDINGS).next_state
        twice = transition(once, KeyPress(HELP_KEY), DEFAULT_KEY_BINDINGS).next_state

        self.assertTrue(once.help_expanded)
        self.assertEqual(twice, state)

    def test_every_quit_trigger_opens_confirmation(self) -> None:
        for key in QUIT_KEYS:
            for help_expanded in (False, True):
                state = AppState(help_expanded=help_expanded)
                result = transition(state, KeyPress(key), DEFAULT_KEY_BINDINGS)

                self.assertEqual(result.next_state.mode, ViewMode.CONFIRM_QUIT, key)
                self.assertEqual(result.next_state.help_expanded, help_expanded)
                self.assertFalse(result.terminate)

    def test_unbound_key_is_a_no_op(self) -> None:
        state = AppState(help_expanded=True, viewport_width=80, viewport_height=24)
        for key in ("x", "y", "UP", "ENTER", "Q", "ALT_y", "ALT_q", "UNKNOWN"):
            result = handle_main_event(state, KeyPress(key), DEFAULT_KEY_BINDINGS)

            self.assertEqual(result.next_state, state)
            self.assertFalse(result.terminate)

    def test_transition_does_not_mutate_input_state(self) -> None:
        state = AppState()
        transition(state, KeyPress(HELP_KEY), DEFAULT_KEY_BINDINGS)
        transition(state, Resize(50, 20), DEFAULT_KEY_BINDINGS)

        self.assertEqual(state, AppState())


class ConfirmQuitTransitionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.state = AppState(mode=ViewMode.CONFIRM_QUIT, viewport_width=80, viewport_height=24)

    def test_lowercase_y_terminates(self) -> None:
        result = transition(self.state, KeyPress("y"), DEFAULT_KEY_BINDINGS)

        self.assertTrue(result.terminate)

    def test_any_other_key_returns_to_main_view(self) -> None:
        for key in ("Y", "n", "N", "yes", "UP", "LEFT", "ESC", "q", "?", "ENTER", " ", "ALT_y", "UNKNOWN"):
            result = transition(self.state, KeyPress(key), DEFAULT_KEY_BINDINGS)

            self.assertEqual(result.next_state.mode, ViewMode.MAIN, key)
            self.assertFalse(result.terminate, key)

    def test_help_key_does_not_toggle_help_while_confirming(self) -> None:
        result = transition(self.state, KeyPress("?"), DEFAULT_KEY_BINDINGS)

        self.assertFalse(result.next_state.help_expanded)
        self.assertEqual(result.next_state.mode, ViewMode.MAIN)

    def test_resize_updates_viewport_and_keeps_prompt_open(self) -> None:
        result = handle_confirm_quit_event(self.state, Resize(132, 43))

        self.assertEqual(result.next_state.mode, ViewMode.CONFIRM_QUIT)
        self.assertEqual((result.next_state.viewport_width, result.next_state.viewport_height), (132, 43))
        self.assertFalse(result.terminate)

    def test_declining_preserves_help_expansion(self) -> None:
        state = replace(self.state, help_expanded=True)
        result = transition(state, KeyPress("n"), DEFAULT_KEY_BINDINGS)

        self.assertTrue(result.next_state.help_expanded)


class QuitScenarioTests(unittest.TestCase):
    def test_quit_then_decline_then_quit_then_confirm(self) -> None:
        state = AppState()

        result = transition(state, KeyPress("q"), DEFAULT_KEY_BINDINGS)
        self.assertEqual(result.next_state.mode, ViewMode.CONFIRM_QUIT)

        result = transition(result.next_state, KeyPress("n"), DEFAULT_KEY_BINDINGS)
        self.assertEqual(result.next_state.mode, ViewMode.MAIN)
        self.assertFalse(result.terminate)

        result = transition(result.next_state, KeyPress("ESC"), DEFAULT_KEY_BINDINGS)
        result = transition(result.next_state, KeyPress("y"), DEFAULT_KEY_BINDINGS)
        self.assertTrue(result.terminate)


if __name__ == "__main__":
    unittest.main()
