"""Error taxonomy for command execution.

Handlers raise these before touching the disk or the model; the machine turns
them into a one-line overlay message.
"""

from __future__ import annotations


class CommandError(Exception):
    """Base class for recoverable, user-facing command failures."""


class UsageError(CommandError):
    """Wrong argument count, unknown command, or invalid dialogue input."""


class ResolutionError(CommandError):
    """A named file or directory does not exist."""


class PreconditionError(CommandError):
    """The command is well-formed but not applicable to the current tree."""


__all__ = [
    "CommandError",
    "UsageError",
    "ResolutionError",
    "PreconditionError",
]
