"""Input-layer public API for key decoding and key bindings.

Exports are split between low-level terminal decoding (`read_key`) and the
binding table the state machine resolves key tokens against.
"""

from .key_registry import (
    DEFAULT_KEY_BINDINGS,
    SHORT_HELP_ACTIONS,
    Action,
    KeyBinding,
    KeyBindingTable,
)
from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, read_key

__all__ = [
    "read_key",
    "UNKNOWN_KEY",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "Action",
    "KeyBinding",
    "KeyBindingTable",
    "DEFAULT_KEY_BINDINGS",
    "SHORT_HELP_ACTIONS",
]
