"""Pending-command variants carried across dialogue round-trips."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..file_tree_model import Directory


class MachineState(Enum):
    IDLE = "idle"
    AWAITING_DISAMBIGUATION = "awaiting_disambiguation"
    AWAITING_CONFIRMATION = "awaiting_confirmation"


class CommandKind(Enum):
    """Commands whose directory argument can be resumed after disambiguation."""

    ENTER = "enter"
    OPEN = "open"
    CLOSE = "close"
    MOVE = "move"
    COPY = "copy"
    RENAME = "rename"
    REMOVE = "remove"


@dataclass(frozen=True)
class Disambiguation:
    """A command suspended until the user picks one of ``candidates`` by index.

    ``argument`` is the already-validated secondary argument (file name for
    move/copy, new name for rename), if the command has one.
    """

    candidates: tuple[Directory, ...]
    command: CommandKind
    argument: str | None = None


@dataclass(frozen=True)
class Confirmation:
    """A directory removal waiting for ``yes`` or ``no``."""

    target: Directory


PendingCommand = Disambiguation | Confirmation


__all__ = [
    "MachineState",
    "CommandKind",
    "Disambiguation",
    "Confirmation",
    "PendingCommand",
]
