"""Keypress routing for the command field and the two panels."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..render.outline import FOCUS_COMMAND, FOCUS_LISTING, FOCUS_TREE
from ..runtime.state import AppState
from .key_registry import KeyComboBinding, KeyComboRegistry

DEFAULT_SCROLL_STEP = 5


@dataclass(frozen=True)
class KeyActions:
    """State and bound operations required for key handling.

    ``submit_command`` receives the submitted line and returns ``True`` when
    the application should quit. ``scroll_focused`` scrolls the focused panel
    and returns whether its offset changed.
    """

    state: AppState
    submit_command: Callable[[str], bool]
    scroll_focused: Callable[[int, int], bool]
    scroll_step: int = DEFAULT_SCROLL_STEP


def handle_command_key(key: str, actions: KeyActions) -> bool:
    """Handle one key while the command field has focus."""
    state = actions.state

    def submit() -> bool:
        line = state.command_input
        state.command_input = ""
        state.dirty = True
        return actions.submit_command(line)

    def backspace() -> bool:
        state.command_input = state.command_input[:-1]
        state.dirty = True
        return False

    def clear() -> bool:
        state.command_input = ""
        state.dirty = True
        return False

    def focus_tree() -> bool:
        state.focus = FOCUS_TREE
        state.dirty = True
        return False

    bindings = KeyComboRegistry().register_bindings(
        KeyComboBinding(("ENTER",), submit),
        KeyComboBinding(("BACKSPACE",), backspace),
        KeyComboBinding(("CTRL_U",), clear),
        KeyComboBinding(("UP",), focus_tree),
    )
    handled = bindings.dispatch(key)
    if handled is not None:
        return handled

    if len(key) == 1 and key.isprintable():
        state.command_input += key
        state.dirty = True
    return False


def handle_panel_key(key: str, actions: KeyActions) -> bool:
    """Handle one key while the tree or listing panel has focus."""
    state = actions.state
    step = actions.scroll_step

    def move_focus(target: str) -> Callable[[], bool]:
        def action() -> bool:
            state.focus = target
            state.dirty = True
            return False

        return action

    def scroll(dx: int, dy: int) -> Callable[[], bool]:
        def action() -> bool:
            if actions.scroll_focused(dx, dy):
                state.dirty = True
            return False

        return action

    registry = KeyComboRegistry(normalize=lambda key: key.lower() if len(key) == 1 else key)
    registry.register_bindings(
        KeyComboBinding(("DOWN", "ESC"), move_focus(FOCUS_COMMAND)),
        KeyComboBinding(("w",), scroll(0, -step)),
        KeyComboBinding(("a",), scroll(-step, 0)),
        KeyComboBinding(("s",), scroll(0, step)),
        KeyComboBinding(("d",), scroll(step, 0)),
    )
    if state.focus == FOCUS_TREE:
        registry.register_binding(KeyComboBinding(("RIGHT",), move_focus(FOCUS_LISTING)))
    else:
        registry.register_binding(KeyComboBinding(("LEFT",), move_focus(FOCUS_TREE)))

    handled = registry.dispatch(key)
    return bool(handled)


def handle_key(key: str, actions: KeyActions) -> bool:
    """Handle one key token and return ``True`` when the app should quit."""
    if key == "CTRL_C":
        return True
    if actions.state.focus == FOCUS_COMMAND:
        return handle_command_key(key, actions)
    return handle_panel_key(key, actions)


__all__ = [
    "DEFAULT_SCROLL_STEP",
    "KeyActions",
    "handle_command_key",
    "handle_panel_key",
    "handle_key",
]
