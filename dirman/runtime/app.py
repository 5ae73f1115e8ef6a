"""Runtime composition layer for dirman.

Wires the command machine, the two panel viewports and the chrome renderers
to a terminal, and starts the loop.
"""

from __future__ import annotations

import logging
import sys

from ..commands import CommandMachine
from ..file_tree_model import Directory, FileSystem
from ..input import DEFAULT_SCROLL_STEP, KeyActions, handle_key
from ..render.listing import render_listing
from ..render.outline import FOCUS_COMMAND, FOCUS_TREE, draw_outline, draw_prompt, draw_status
from ..render.tree import render_tree
from ..render.viewport import Viewport
from ..ui_theme import DEFAULT_THEME, UITheme
from .layout import DEFAULT_TREE_PANE_PERCENT, MIN_COLUMNS, MIN_ROWS, compute_layout, fits
from .state import AppState
from .terminal import Terminal, TerminalController

logger = logging.getLogger("dirman.runtime")

QUIT_COMMAND = "q"
TOO_SMALL_MESSAGE = f"Terminal too small (need {MIN_COLUMNS}x{MIN_ROWS})"


class DirmanApp:
    """Screen state for one session: panels, focus, and the command field."""

    def __init__(
        self,
        machine: CommandMachine,
        terminal: Terminal,
        theme: UITheme = DEFAULT_THEME,
        scroll_step: int = DEFAULT_SCROLL_STEP,
        tree_pane_percent: float = DEFAULT_TREE_PANE_PERCENT,
    ) -> None:
        self.machine = machine
        self.terminal = terminal
        self.theme = theme
        self.scroll_step = scroll_step
        self.tree_pane_percent = tree_pane_percent
        self.state = AppState()
        rows, columns = terminal.size()
        self.layout = compute_layout(rows, columns, tree_pane_percent)
        self.tree_view = Viewport(self.layout.tree_origin, self.layout.tree_size)
        self.listing_view = Viewport(self.layout.listing_origin, self.layout.listing_size)
        self.rebuild_panels()
        self.key_actions = KeyActions(
            state=self.state,
            submit_command=self.submit_command,
            scroll_focused=self.scroll_focused,
            scroll_step=scroll_step,
        )

    def rebuild_panels(self) -> None:
        """Re-render both panel buffers from the current tree and UI references."""
        machine = self.machine
        self.tree_view.set_content(
            render_tree(
                machine.root,
                current=machine.current,
                closed=machine.closed,
                ambiguous=machine.ambiguous,
                pending_delete=machine.pending_delete,
            )
        )
        self.listing_view.set_content(render_listing(machine.current))

    def submit_command(self, line: str) -> bool:
        if line.strip() == QUIT_COMMAND:
            return True
        outcome = self.machine.execute(line)
        self.state.status_message = outcome.message
        self.state.status_is_error = outcome.is_error
        self.rebuild_panels()
        self.state.dirty = True
        return False

    def scroll_focused(self, dx: int, dy: int) -> bool:
        view = self.tree_view if self.state.focus == FOCUS_TREE else self.listing_view
        return view.scroll_by(dx, dy)

    def handle_key(self, key: str) -> bool:
        """Dispatch one key token; return ``True`` when the session should end."""
        return handle_key(key, self.key_actions)

    def sync_size(self) -> bool:
        """Adopt the terminal's current size; return whether it changed."""
        rows, columns = self.terminal.size()
        if (rows, columns) == (self.layout.rows, self.layout.columns):
            return False
        logger.debug("terminal resized to %sx%s", columns, rows)
        self.layout = compute_layout(rows, columns, self.tree_pane_percent)
        self.tree_view.resize(self.layout.tree_origin, self.layout.tree_size)
        self.listing_view.resize(self.layout.listing_origin, self.layout.listing_size)
        self.state.dirty = True
        return True

    def draw(self) -> None:
        """Repaint the full screen and park the cursor in the command field."""
        terminal = self.terminal
        layout = self.layout
        terminal.hide_cursor()
        terminal.clear_screen()
        if not fits(layout.rows, layout.columns):
            terminal.move_to(0, 0)
            terminal.write(TOO_SMALL_MESSAGE[: layout.columns])
            terminal.flush()
            self.state.dirty = False
            return

        draw_status(terminal, layout, self.state.status_message, self.state.status_is_error, self.theme)
        draw_outline(terminal, layout, self.state.focus, self.theme)
        self.tree_view.draw(terminal, self.theme)
        self.listing_view.draw(terminal, self.theme)
        cursor_col = draw_prompt(terminal, layout, self.state.command_input, self.theme)
        if self.state.focus == FOCUS_COMMAND:
            terminal.move_to(cursor_col, layout.prompt_row)
            terminal.show_cursor()
        terminal.flush()
        self.state.dirty = False


def run_app(
    tree: Directory,
    filesystem: FileSystem,
    theme: UITheme = DEFAULT_THEME,
    scroll_step: int = DEFAULT_SCROLL_STEP,
    tree_pane_percent: float = DEFAULT_TREE_PANE_PERCENT,
) -> None:
    """Take over the terminal for an already scanned ``tree`` until the user quits."""
    from .loop import run_main_loop

    machine = CommandMachine(tree, filesystem)
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    app = DirmanApp(machine, terminal, theme, scroll_step, tree_pane_percent)
    logger.info("session started in %s", tree.full_path)
    run_main_loop(app, terminal, stdin_fd)
    logger.info("session ended")


__all__ = [
    "QUIT_COMMAND",
    "TOO_SMALL_MESSAGE",
    "DirmanApp",
    "run_app",
]
