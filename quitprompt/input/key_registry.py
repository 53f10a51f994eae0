"""Key binding table: logical actions, their key tokens, and help labels."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class Action(str, Enum):
    HELP = "help"
    QUIT = "quit"


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single action.

    ``key_label`` is the short key text shown in help output; ``help_label``
    describes what the action does. A binding without triggers is disabled
    and left out of help listings.
    """

    action: Action
    triggers: frozenset[str]
    key_label: str
    help_label: str

    @property
    def enabled(self) -> bool:
        return bool(self.triggers)


class KeyBindingTable:
    """Ordered, read-only lookup from key tokens to actions.

    Trigger sets must be disjoint; a token bound to two actions is rejected
    at construction time.
    """

    def __init__(self, bindings: Iterable[KeyBinding]) -> None:
        """Index ``bindings`` by trigger, keeping their declaration order."""
        self._bindings: tuple[KeyBinding, ...] = tuple(bindings)
        self._actions: dict[str, Action] = {}
        for binding in self._bindings:
            for trigger in binding.triggers:
                existing = self._actions.get(trigger)
                if existing is not None and existing != binding.action:
                    raise ValueError(
                        f"key {trigger!r} bound to both {existing.value!r} and {binding.action.value!r}"
                    )
                self._actions[trigger] = binding.action

    def __iter__(self) -> Iterator[KeyBinding]:
        return iter(self._bindings)

    def __len__(self) -> int:
        return len(self._bindings)

    @property
    def bindings(self) -> tuple[KeyBinding, ...]:
        return self._bindings

    def binding_for(self, action: Action) -> KeyBinding | None:
        """Return the first binding declared for ``action``."""
        for binding in self._bindings:
            if binding.action == action:
                return binding
        return None

    def resolve(self, key: str) -> Action | None:
        """Return the action bound to ``key``, or ``None`` if unbound."""
        return self._actions.get(key)

    def describe(self, actions_to_show: Iterable[Action]) -> list[tuple[str, str]]:
        """Return ``(key_label, help_label)`` pairs in table order.

        Only enabled bindings whose action is in ``actions_to_show`` appear.
        """
        wanted = set(actions_to_show)
        return [
            (binding.key_label, binding.help_label)
            for binding in self._bindings
            if binding.enabled and binding.action in wanted
        ]


DEFAULT_KEY_BINDINGS = KeyBindingTable(
    (
        KeyBinding(
            action=Action.HELP,
            triggers=frozenset({"?"}),
            key_label="?",
            help_label="toggle help",
        ),
        KeyBinding(
            action=Action.QUIT,
            triggers=frozenset({"q", "ESC", "CTRL_C"}),
            key_label="q",
            help_label="quit",
        ),
    )
)

# Compact help listing; with only two bindings it shows everything.
SHORT_HELP_ACTIONS: tuple[Action, ...] = (Action.HELP, Action.QUIT)
