"""Interactive command state machine.

Parses one submitted command line at a time. Commands either run to
completion, or suspend as a pending command when a directory name is
ambiguous (``AWAITING_DISAMBIGUATION``) or a directory removal needs a yes/no
answer (``AWAITING_CONFIRMATION``). Every handler validates and performs disk
I/O before it mutates the model, so a failure leaves the tree untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..file_tree_model import (
    Directory,
    File,
    FileSystem,
    find_file,
    has_entry,
    insert_directory,
    insert_file,
    is_within,
    remove_directory,
    remove_file,
    rename,
    resolve,
    unique_child_name,
)
from .errors import CommandError, PreconditionError, ResolutionError, UsageError
from .pending import CommandKind, Confirmation, Disambiguation, MachineState, PendingCommand

logger = logging.getLogger("dirman.commands")

ROOT_QUERY = "/"
PARENT_QUERY = ".."
CANCEL_WORD = "cancel"
YES_WORD = "yes"
NO_WORD = "no"


@dataclass(frozen=True)
class CommandOutcome:
    """Result of one submitted line, shown as the overlay message."""

    message: str = ""
    is_error: bool = False


def _expect(tokens: list[str], count: int, usage: str) -> None:
    if len(tokens) != count:
        raise UsageError(f"Usage: {usage}")


def _check_new_name(name: str) -> None:
    if "/" in name or name in {".", ".."}:
        raise UsageError(f"'{name}' is not a valid name")


class CommandMachine:
    """Owns the UI references into the tree and executes commands against it."""

    def __init__(self, root: Directory, filesystem: FileSystem, current: Directory | None = None) -> None:
        self.root = root
        self.filesystem = filesystem
        self.current = current if current is not None else root
        self.closed: set[Directory] = set()
        self.pending: PendingCommand | None = None
        self._commands: dict[str, Callable[[list[str]], str]] = {
            "enter": self._cmd_enter,
            "open": self._cmd_open,
            "close": self._cmd_close,
            "move": self._cmd_move,
            "copy": self._cmd_copy,
            "rename": self._cmd_rename,
            "new": self._cmd_new,
            "remove": self._cmd_remove,
        }

    @property
    def state(self) -> MachineState:
        if isinstance(self.pending, Disambiguation):
            return MachineState.AWAITING_DISAMBIGUATION
        if isinstance(self.pending, Confirmation):
            return MachineState.AWAITING_CONFIRMATION
        return MachineState.IDLE

    @property
    def ambiguous(self) -> tuple[Directory, ...]:
        """Candidates currently offered for disambiguation, in tree order."""
        if isinstance(self.pending, Disambiguation):
            return self.pending.candidates
        return ()

    @property
    def pending_delete(self) -> Directory | None:
        if isinstance(self.pending, Confirmation):
            return self.pending.target
        return None

    def execute(self, line: str) -> CommandOutcome:
        """Run one submitted line and report what happened.

        Command errors and filesystem failures are reported, never raised.
        """
        tokens = line.split()
        if not tokens:
            return CommandOutcome()
        try:
            if isinstance(self.pending, Disambiguation):
                message = self._answer_disambiguation(self.pending, tokens)
            elif isinstance(self.pending, Confirmation):
                message = self._answer_confirmation(self.pending, tokens)
            else:
                message = self._dispatch(tokens)
        except CommandError as exc:
            logger.warning("command %r rejected: %s", line, exc)
            return CommandOutcome(str(exc), is_error=True)
        except OSError as exc:
            logger.warning("command %r failed: %s", line, exc)
            detail = exc.strerror or str(exc)
            target = f": {exc.filename}" if exc.filename else ""
            return CommandOutcome(f"Error: {detail}{target}", is_error=True)
        logger.info("command %r: %s", line, message)
        return CommandOutcome(message)

    # Dialogue answers.

    def _answer_disambiguation(self, pending: Disambiguation, tokens: list[str]) -> str:
        if tokens == [CANCEL_WORD]:
            self.pending = None
            return "Cancelled"
        if len(tokens) == 1 and tokens[0].isascii() and tokens[0].isdigit():
            index = int(tokens[0])
            if index < len(pending.candidates):
                self.pending = None
                return self._run(pending.command, pending.candidates[index], pending.argument)
        raise UsageError(
            f"Input a single number from 0 to {len(pending.candidates) - 1} to choose, or '{CANCEL_WORD}'"
        )

    def _answer_confirmation(self, pending: Confirmation, tokens: list[str]) -> str:
        target = pending.target
        if tokens == [NO_WORD]:
            self.pending = None
            return f"Kept '{target.name}'"
        if tokens != [YES_WORD]:
            raise UsageError(f"Type '{YES_WORD}' to remove '{target.name}' or '{NO_WORD}' to keep it")

        self.pending = None
        parent = target.parent
        remove_directory(target, self.filesystem)
        self.closed = {directory for directory in self.closed if not is_within(directory, target)}
        if is_within(self.current, target):
            assert parent is not None
            self.current = parent
        return f"Removed directory '{target.name}'"

    # Command parsing.

    def _dispatch(self, tokens: list[str]) -> str:
        handler = self._commands.get(tokens[0])
        if handler is None:
            raise UsageError(f"Unknown command '{tokens[0]}'")
        return handler(tokens)

    def _directory_argument(self, query: str, kind: CommandKind, argument: str | None = None) -> Directory | None:
        """Resolve ``query`` to one directory, or suspend and return ``None``."""
        if query == ROOT_QUERY:
            return self.root
        if query == PARENT_QUERY:
            if self.current.is_root:
                raise PreconditionError("Already at the root directory")
            return self.current.parent
        matches = resolve(self.root, query, self.closed)
        if not matches:
            raise ResolutionError(f"'{query}' does not exist")
        if len(matches) == 1:
            return matches[0]
        self.pending = Disambiguation(candidates=tuple(matches), command=kind, argument=argument)
        return None

    def _ambiguity_prompt(self, query: str) -> str:
        return f"'{query}' is ambiguous: input the number shown in the tree or '{CANCEL_WORD}'"

    def _require_file(self, name: str) -> File:
        file = find_file(self.current, name)
        if file is None:
            raise ResolutionError(f"No file named '{name}' in {self.current.name}")
        return file

    def _resolve_and_run(self, query: str, kind: CommandKind, argument: str | None = None) -> str:
        directory = self._directory_argument(query, kind, argument)
        if directory is None:
            return self._ambiguity_prompt(query)
        return self._run(kind, directory, argument)

    def _cmd_enter(self, tokens: list[str]) -> str:
        _expect(tokens, 2, "enter <directory>")
        return self._resolve_and_run(tokens[1], CommandKind.ENTER)

    def _cmd_open(self, tokens: list[str]) -> str:
        _expect(tokens, 2, "open <directory>")
        return self._resolve_and_run(tokens[1], CommandKind.OPEN)

    def _cmd_close(self, tokens: list[str]) -> str:
        _expect(tokens, 2, "close <directory>")
        return self._resolve_and_run(tokens[1], CommandKind.CLOSE)

    def _cmd_move(self, tokens: list[str]) -> str:
        _expect(tokens, 3, "move <file> <directory>")
        self._require_file(tokens[1])
        return self._resolve_and_run(tokens[2], CommandKind.MOVE, tokens[1])

    def _cmd_copy(self, tokens: list[str]) -> str:
        _expect(tokens, 3, "copy <file> <directory>")
        self._require_file(tokens[1])
        return self._resolve_and_run(tokens[2], CommandKind.COPY, tokens[1])

    def _cmd_rename(self, tokens: list[str]) -> str:
        _expect(tokens, 3, "rename <name> <new_name>")
        name, new_name = tokens[1], tokens[2]
        _check_new_name(new_name)
        file = find_file(self.current, name)
        if file is not None:
            return self._rename_file(file, new_name)
        return self._resolve_and_run(name, CommandKind.RENAME, new_name)

    def _cmd_new(self, tokens: list[str]) -> str:
        _expect(tokens, 3, "new file|directory <name>")
        kind, name = tokens[1], tokens[2]
        if kind not in {"file", "directory"}:
            raise UsageError("Expected 'file' or 'directory' after 'new'")
        _check_new_name(name)
        path = self.current.full_path / name
        if has_entry(self.current, name) or self.filesystem.exists(path):
            raise PreconditionError("File or directory with this name already exists")

        if kind == "file":
            self.filesystem.create_file(path)
            stat = self.filesystem.stat(path)
            insert_file(self.current, File(name=name, full_path=path, modified_ns=stat.mtime_ns, size_bytes=stat.size))
            return f"Created file '{name}'"

        self.filesystem.create_directory(path)
        stat = self.filesystem.stat(path)
        insert_directory(self.current, Directory(name=name, full_path=path, modified_ns=stat.mtime_ns))
        return f"Created directory '{name}'"

    def _cmd_remove(self, tokens: list[str]) -> str:
        _expect(tokens, 2, "remove <name>")
        name = tokens[1]
        file = find_file(self.current, name)
        if file is not None:
            self.filesystem.remove_file(file.full_path)
            remove_file(self.current, name)
            return f"Removed file '{name}'"
        return self._resolve_and_run(name, CommandKind.REMOVE)

    # Resolved execution; also the resume path after disambiguation.

    def _run(self, kind: CommandKind, directory: Directory, argument: str | None) -> str:
        if kind is CommandKind.ENTER:
            self.current = directory
            return f"Entered {directory.full_path}"
        if kind is CommandKind.OPEN:
            return self._open(directory)
        if kind is CommandKind.CLOSE:
            return self._close(directory)
        if kind is CommandKind.MOVE:
            assert argument is not None
            return self._move(argument, directory)
        if kind is CommandKind.COPY:
            assert argument is not None
            return self._copy(argument, directory)
        if kind is CommandKind.RENAME:
            assert argument is not None
            return self._rename_directory(directory, argument)
        return self._request_removal(directory)

    def _open(self, directory: Directory) -> str:
        if directory not in self.closed:
            raise PreconditionError(f"'{directory.name}' is not closed")
        self.closed.discard(directory)
        return f"Opened '{directory.name}'"

    def _close(self, directory: Directory) -> str:
        if directory in self.closed:
            raise PreconditionError(f"'{directory.name}' is already closed")
        self.closed.add(directory)
        if is_within(self.current, directory):
            self.current = directory
        return f"Closed '{directory.name}'"

    def _move(self, file_name: str, destination: Directory) -> str:
        file = self._require_file(file_name)
        if destination is self.current:
            raise PreconditionError(f"'{file_name}' is already in {destination.name}")
        target_name = unique_child_name(destination, file.name, self.filesystem.exists)
        self.filesystem.rename(file.full_path, destination.full_path / target_name)
        remove_file(self.current, file.name)
        file.name = target_name
        insert_file(destination, file)
        return f"Moved '{file_name}' to {destination.full_path / target_name}"

    def _copy(self, file_name: str, destination: Directory) -> str:
        file = self._require_file(file_name)
        target_name = unique_child_name(destination, file.name, self.filesystem.exists)
        target = destination.full_path / target_name
        self.filesystem.copy_file(file.full_path, target)
        try:
            stat = self.filesystem.stat(target)
            modified_ns, size = stat.mtime_ns, stat.size
        except OSError:
            modified_ns, size = file.modified_ns, file.size_bytes
        insert_file(destination, File(name=target_name, full_path=target, modified_ns=modified_ns, size_bytes=size))
        return f"Copied '{file_name}' to {target}"

    def _check_sibling_free(self, parent: Directory, new_name: str) -> None:
        if has_entry(parent, new_name) or self.filesystem.exists(parent.full_path / new_name):
            raise PreconditionError(f"'{new_name}' already exists in {parent.name}")

    def _rename_file(self, file: File, new_name: str) -> str:
        old_name = file.name
        self._check_sibling_free(self.current, new_name)
        self.filesystem.rename(file.full_path, self.current.full_path / new_name)
        rename(file, new_name, self.current)
        return f"Renamed '{old_name}' to '{new_name}'"

    def _rename_directory(self, directory: Directory, new_name: str) -> str:
        if directory.is_root:
            raise PreconditionError("The root directory cannot be renamed")
        parent = directory.parent
        old_name = directory.name
        self._check_sibling_free(parent, new_name)
        self.filesystem.rename(directory.full_path, parent.full_path / new_name)
        rename(directory, new_name)
        return f"Renamed '{old_name}' to '{new_name}'"

    def _request_removal(self, directory: Directory) -> str:
        if directory.is_root:
            raise PreconditionError("The root directory cannot be removed")
        self.pending = Confirmation(target=directory)
        return f"Remove directory '{directory.name}' and everything in it? Type '{YES_WORD}' or '{NO_WORD}'"


__all__ = [
    "CommandOutcome",
    "CommandMachine",
    "ROOT_QUERY",
    "PARENT_QUERY",
]
