"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, and frame output.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty

logger = logging.getLogger(__name__)


class DriverInitError(RuntimeError):
    """The terminal cannot be put into the display mode the UI needs."""


class TerminalController:
    """Manage terminal mode transitions and full-frame writes."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors.

        Raises ``DriverInitError`` when ``stdin_fd`` is not a terminal.
        """
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        if not os.isatty(stdin_fd):
            raise DriverInitError("standard input is not a terminal")
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise DriverInitError(f"cannot read terminal attributes: {exc}") from exc

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise DriverInitError(f"cannot switch terminal to raw mode: {exc}") from exc
        # Enter alternate screen and hide cursor.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")
        logger.debug("entered raw alternate-screen mode")

    def disable_tui_mode(self) -> None:
        """Restore the main screen buffer, cursor, and saved tty attributes."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        logger.debug("restored terminal state")

    def write_frame(self, text: str) -> None:
        """Clear the screen and draw ``text`` from the top-left corner.

        Raw mode turns off output post-processing, so line feeds are sent as
        CR LF to return the cursor to column one.
        """
        payload = "\033[H\033[J" + text.replace("\n", "\r\n")
        os.write(self.stdout_fd, payload.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        self.enable_tui_mode()
        try:
            yield
        finally:
            self.disable_tui_mode()
