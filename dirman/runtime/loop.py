"""Main interactive event loop for the terminal UI.

Polls for resizes, redraws when dirty, and dispatches decoded keys. Feature
logic lives in the app.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..input import read_key
from .terminal import TerminalController

if TYPE_CHECKING:
    from .app import DirmanApp

POLL_TIMEOUT_MS = 100


def run_main_loop(app: DirmanApp, terminal: TerminalController, stdin_fd: int) -> None:
    """Run the interactive loop until a key handler asks to quit."""
    with terminal.raw_mode():
        while True:
            app.sync_size()
            if app.state.dirty:
                app.draw()
            key = read_key(stdin_fd, timeout_ms=POLL_TIMEOUT_MS)
            if not key:
                continue
            if app.handle_key(key):
                break


__all__ = [
    "POLL_TIMEOUT_MS",
    "run_main_loop",
]
