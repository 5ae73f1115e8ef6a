"""Key-token dispatch tables used by the focus-specific handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KeyAction = Callable[[], "bool | None"]


@dataclass(frozen=True)
class KeyComboBinding:
    """One action reachable through any of ``combos``.

    The action returns ``True`` to end the session, ``False`` (or ``None``) to
    keep running.
    """

    combos: tuple[str, ...]
    handler: KeyAction


class KeyComboRegistry:
    """Token-to-action table; ``normalize`` folds tokens before lookup."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize: Callable[[str], str] = normalize or (lambda key: key)
        self._actions: dict[str, KeyAction] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        # Later registrations replace earlier ones for the same token.
        self._actions.update({self._normalize(combo): binding.handler for combo in binding.combos})
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def handles(self, key: str) -> bool:
        return self._normalize(key) in self._actions

    def dispatch(self, key: str) -> bool | None:
        """Run the action bound to ``key``; ``None`` means the key is unbound."""
        action = self._actions.get(self._normalize(key))
        if action is None:
            return None
        return bool(action())


__all__ = [
    "KeyAction",
    "KeyComboBinding",
    "KeyComboRegistry",
]
