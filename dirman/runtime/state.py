"""UI-only state that lives outside the command machine."""

from __future__ import annotations

from dataclasses import dataclass

from ..render.outline import FOCUS_COMMAND


@dataclass
class AppState:
    focus: str = FOCUS_COMMAND
    command_input: str = ""
    status_message: str = ""
    status_is_error: bool = False
    dirty: bool = True


__all__ = ["AppState"]
