"""Command interpretation for the command field.

- error taxonomy raised by command handlers
- pending-command variants carried across dialogue round-trips
- the state machine that executes submitted lines
"""

from __future__ import annotations

from .errors import CommandError, PreconditionError, ResolutionError, UsageError
from .pending import CommandKind, Confirmation, Disambiguation, MachineState, PendingCommand
from .machine import CommandMachine, CommandOutcome

__all__ = [
    "CommandError",
    "UsageError",
    "ResolutionError",
    "PreconditionError",
    "CommandKind",
    "Confirmation",
    "Disambiguation",
    "MachineState",
    "PendingCommand",
    "CommandMachine",
    "CommandOutcome",
]
