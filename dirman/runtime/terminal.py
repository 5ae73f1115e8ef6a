"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle and alternate-screen switching, plus the small
cursor-addressed drawing surface the renderers write through.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty
from typing import Protocol


class Terminal(Protocol):
    """Drawing surface consumed by viewports and chrome renderers."""

    def move_to(self, x: int, y: int) -> None: ...

    def write(self, text: str) -> None: ...

    def flush(self) -> None: ...

    def size(self) -> tuple[int, int]: ...

    def hide_cursor(self) -> None: ...

    def show_cursor(self) -> None: ...

    def clear_line(self) -> None: ...

    def clear_screen(self) -> None: ...


class TerminalController:
    """Manage terminal mode transitions and buffered cursor-addressed output."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._pending: list[str] = []

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Enter alternate screen and clear it.
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[2J")

    def disable_tui_mode(self) -> None:
        """Restore normal terminal state."""
        self._pending.clear()
        # Show cursor and restore the main screen buffer.
        os.write(self.stdout_fd, b"\x1b[0m\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()

    def move_to(self, x: int, y: int) -> None:
        """Queue a cursor move to zero-based column ``x`` and row ``y``."""
        self._pending.append(f"\x1b[{max(0, y) + 1};{max(0, x) + 1}H")

    def write(self, text: str) -> None:
        self._pending.append(text)

    def flush(self) -> None:
        """Send all queued output in a single write."""
        if not self._pending:
            return
        payload = "".join(self._pending).encode("utf-8", errors="replace")
        self._pending.clear()
        os.write(self.stdout_fd, payload)

    def size(self) -> tuple[int, int]:
        """Return ``(rows, columns)`` of the controlling terminal."""
        term = shutil.get_terminal_size((80, 24))
        return term.lines, term.columns

    def hide_cursor(self) -> None:
        self._pending.append("\x1b[?25l")

    def show_cursor(self) -> None:
        self._pending.append("\x1b[?25h")

    def clear_line(self) -> None:
        self._pending.append("\x1b[2K")

    def clear_screen(self) -> None:
        self._pending.append("\x1b[2J")


__all__ = [
    "Terminal",
    "TerminalController",
]
