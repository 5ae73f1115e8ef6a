"""Tests for the application wiring: drawing, key routing, and resizes.

A fake terminal records output into a character grid so tests can assert on
what the user would see.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from dirman.ansi import strip_ansi
from dirman.commands import CommandMachine
from dirman.file_tree_model import LocalFileSystem, build_directory_tree
from dirman.render.outline import FOCUS_COMMAND, FOCUS_LISTING, FOCUS_TREE
from dirman.runtime.app import TOO_SMALL_MESSAGE, DirmanApp
from dirman.ui_theme import PLAIN_THEME


class FakeTerminal:
    def __init__(self, rows: int = 20, columns: int = 60) -> None:
        self.rows = rows
        self.columns = columns
        self.cursor_visible = True
        self.flushes = 0
        self.x = 0
        self.y = 0
        self.clear_screen()

    def size(self) -> tuple[int, int]:
        return self.rows, self.columns

    def move_to(self, x: int, y: int) -> None:
        self.x, self.y = x, y

    def write(self, text: str) -> None:
        for ch in strip_ansi(text):
            if 0 <= self.y < self.rows and 0 <= self.x < self.columns:
                self.grid[self.y][self.x] = ch
            self.x += 1

    def flush(self) -> None:
        self.flushes += 1

    def hide_cursor(self) -> None:
        self.cursor_visible = False

    def show_cursor(self) -> None:
        self.cursor_visible = True

    def clear_line(self) -> None:
        if 0 <= self.y < self.rows:
            self.grid[self.y] = [" "] * self.columns

    def clear_screen(self) -> None:
        self.grid = [[" "] * self.columns for _ in range(self.rows)]

    def row(self, y: int) -> str:
        return "".join(self.grid[y])


class DirmanAppTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.disk = Path(tmp.name).resolve() / "proj"
        (self.disk / "src").mkdir(parents=True)
        for idx in range(30):
            (self.disk / "src" / f"pkg{idx:02}").mkdir()
        (self.disk / "readme.md").write_text("# proj\n", encoding="utf-8")

        filesystem = LocalFileSystem()
        self.root = build_directory_tree(self.disk, filesystem)
        self.machine = CommandMachine(self.root, filesystem)
        self.terminal = FakeTerminal()
        self.app = DirmanApp(self.machine, self.terminal, theme=PLAIN_THEME)

    def type_line(self, text: str) -> bool:
        for ch in text:
            self.assertFalse(self.app.handle_key(ch))
        return self.app.handle_key("ENTER")

    def test_initial_draw_shows_chrome_and_both_panels(self) -> None:
        self.app.draw()

        self.assertEqual(self.terminal.row(0).rstrip(), "DirMan")
        self.assertEqual(self.terminal.row(1), "━" * 30 + "┳" + "━" * 29)
        self.assertEqual(self.terminal.row(3)[2:6], "proj")
        self.assertEqual(self.terminal.row(4)[2:8], "└─ src")
        self.assertEqual(self.terminal.row(3)[33:46], "Last Modified")
        self.assertEqual(self.terminal.row(18), "━" * 30 + "┻" + "━" * 29)
        self.assertEqual(self.terminal.row(19).rstrip(), " >")
        self.assertTrue(self.terminal.cursor_visible)
        self.assertEqual((self.terminal.x, self.terminal.y), (3, 19))
        self.assertFalse(self.app.state.dirty)

    def test_submitted_command_updates_status_and_panels(self) -> None:
        self.assertFalse(self.type_line("enter src"))
        self.assertEqual(self.machine.current.name, "src")
        self.app.draw()
        self.assertTrue(self.terminal.row(0).startswith("Entered "))
        self.assertEqual(self.terminal.row(5)[33:48], "- Directories -")
        self.assertEqual(self.app.state.command_input, "")

    def test_error_is_shown_then_cleared_by_next_command(self) -> None:
        self.type_line("enter nowhere")
        self.assertTrue(self.app.state.status_is_error)
        self.app.draw()
        self.assertIn("does not exist", self.terminal.row(0))

        self.type_line("")
        self.app.draw()
        self.assertEqual(self.terminal.row(0).rstrip(), "DirMan")

    def test_command_field_editing(self) -> None:
        for key in ["a", "b", "c", "BACKSPACE"]:
            self.app.handle_key(key)
        self.assertEqual(self.app.state.command_input, "ab")
        self.app.handle_key("CTRL_U")
        self.assertEqual(self.app.state.command_input, "")

    def test_quit_command_and_ctrl_c(self) -> None:
        self.assertTrue(self.type_line("q"))
        self.assertTrue(self.app.handle_key("CTRL_C"))

    def test_focus_switching_and_panel_scrolling(self) -> None:
        self.app.handle_key("UP")
        self.assertEqual(self.app.state.focus, FOCUS_TREE)
        self.app.draw()
        self.assertFalse(self.terminal.cursor_visible)

        self.app.handle_key("s")
        self.assertEqual(self.app.tree_view.scroll, (0, 5))
        self.app.handle_key("W")
        self.assertEqual(self.app.tree_view.scroll, (0, 0))
        self.app.handle_key("q")
        self.assertEqual(self.app.state.command_input, "")

        self.app.handle_key("RIGHT")
        self.assertEqual(self.app.state.focus, FOCUS_LISTING)
        self.app.handle_key("RIGHT")
        self.assertEqual(self.app.state.focus, FOCUS_LISTING)
        self.app.handle_key("LEFT")
        self.assertEqual(self.app.state.focus, FOCUS_TREE)
        self.app.handle_key("ESC")
        self.assertEqual(self.app.state.focus, FOCUS_COMMAND)

    def test_resize_relayouts_viewports(self) -> None:
        self.assertFalse(self.app.sync_size())
        self.terminal.rows, self.terminal.columns = 30, 100
        self.assertTrue(self.app.sync_size())
        self.assertEqual(self.app.layout.divider_x, 50)
        self.assertEqual(self.app.listing_view.origin, (51, 2))
        self.assertEqual(self.app.tree_view.size, (50, 26))

    def test_too_small_terminal_shows_notice(self) -> None:
        self.terminal.rows, self.terminal.columns = 6, 40
        self.terminal.clear_screen()
        self.app.sync_size()
        self.app.draw()
        self.assertEqual(self.terminal.row(0).rstrip(), TOO_SMALL_MESSAGE)


if __name__ == "__main__":
    unittest.main()
