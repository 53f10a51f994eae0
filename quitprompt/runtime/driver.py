"""Serialized input event source backed by the real terminal.

Key presses come from stdin; resizes are detected by polling the terminal
size between short key reads. Both are merged into one stream of events in
the order they are observed.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass

from ..events import InputEvent, KeyPress, Resize
from ..input import ESC_SEQUENCE_TIMEOUT_MS, read_key

DEFAULT_TERMINAL_SIZE = (80, 24)
POLL_INTERVAL_MS = 120


@dataclass(frozen=True)
class LoopTiming:
    """Timing constants controlling input polling."""

    poll_interval_ms: int = POLL_INTERVAL_MS
    esc_sequence_timeout_ms: int = ESC_SEQUENCE_TIMEOUT_MS


DEFAULT_LOOP_TIMING = LoopTiming()


def terminal_size(fd: int) -> tuple[int, int]:
    """Return ``(columns, lines)`` of the terminal on ``fd``.

    Falls back to 80x24 when ``fd`` is not a terminal.
    """
    try:
        term = os.get_terminal_size(fd)
    except OSError:
        return DEFAULT_TERMINAL_SIZE
    return term.columns, term.lines


class TerminalEventSource:
    """Blocking ``next_event`` over a raw-mode stdin file descriptor.

    The first call always reports the current size, so the runtime renders
    its first frame in response to an event.
    """

    def __init__(
        self,
        stdin_fd: int,
        *,
        timing: LoopTiming = DEFAULT_LOOP_TIMING,
        get_size: Callable[[], tuple[int, int]] | None = None,
    ) -> None:
        self.stdin_fd = stdin_fd
        self.timing = timing
        self._get_size = get_size if get_size is not None else lambda: terminal_size(stdin_fd)
        self._last_size: tuple[int, int] | None = None

    def next_event(self) -> InputEvent:
        """Block until a resize or key press is available and return it."""
        while True:
            size = self._get_size()
            if size != self._last_size:
                self._last_size = size
                return Resize(width=size[0], height=size[1])
            try:
                key = read_key(
                    self.stdin_fd,
                    timeout_ms=self.timing.poll_interval_ms,
                    esc_timeout_ms=self.timing.esc_sequence_timeout_ms,
                )
            except KeyboardInterrupt:
                continue
            if key:
                return KeyPress(key)
