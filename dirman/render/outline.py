"""Static chrome: title/status row, panel borders, and the command prompt."""

from __future__ import annotations

from ..ansi import style
from ..runtime.layout import PanelLayout
from ..runtime.terminal import Terminal
from ..ui_theme import DEFAULT_THEME, UITheme
from .styled import printable_text

TITLE = "DirMan"
PROMPT = " > "

FOCUS_COMMAND = "command"
FOCUS_TREE = "tree"
FOCUS_LISTING = "listing"


def _border(text: str, highlight_for: set[str], focus: str, theme: UITheme) -> str:
    sgr = theme.outline_active if focus in highlight_for else theme.outline
    return style(text, sgr, theme.reset)


def draw_outline(terminal: Terminal, layout: PanelLayout, focus: str, theme: UITheme = DEFAULT_THEME) -> None:
    """Draw the double-panel border, highlighting the edges of the focused area."""
    left = layout.divider_x
    right = layout.columns - left - 1

    terminal.move_to(0, 1)
    terminal.write(
        _border("━" * left, {FOCUS_TREE}, focus, theme)
        + _border("┳", {FOCUS_TREE, FOCUS_LISTING}, focus, theme)
        + _border("━" * right, {FOCUS_LISTING}, focus, theme)
    )
    divider = _border("┃", {FOCUS_TREE, FOCUS_LISTING}, focus, theme)
    for row in range(2, layout.rows - 2):
        terminal.move_to(left, row)
        terminal.write(divider)
    terminal.move_to(0, layout.rows - 2)
    terminal.write(
        _border("━" * left, {FOCUS_TREE, FOCUS_COMMAND}, focus, theme)
        + _border("┻", {FOCUS_TREE, FOCUS_LISTING, FOCUS_COMMAND}, focus, theme)
        + _border("━" * right, {FOCUS_LISTING, FOCUS_COMMAND}, focus, theme)
    )


def draw_status(
    terminal: Terminal,
    layout: PanelLayout,
    message: str,
    is_error: bool = False,
    theme: UITheme = DEFAULT_THEME,
) -> None:
    """Draw the title row, replaced by ``message`` when one is pending."""
    terminal.move_to(0, 0)
    terminal.clear_line()
    if message:
        text = printable_text(message)[: layout.columns]
        terminal.write(style(text, theme.error if is_error else theme.title, theme.reset))
    else:
        terminal.write(style(TITLE, theme.title, theme.reset))


def draw_prompt(terminal: Terminal, layout: PanelLayout, text: str, theme: UITheme = DEFAULT_THEME) -> int:
    """Draw the command field and return the cursor column after the input.

    Input longer than the field scrolls so its tail stays visible.
    """
    avail = max(1, layout.columns - len(PROMPT) - 1)
    visible = text[-avail:] if len(text) > avail else text
    terminal.move_to(0, layout.prompt_row)
    terminal.clear_line()
    terminal.write(style(PROMPT, theme.prompt, theme.reset) + visible)
    return len(PROMPT) + len(visible)


__all__ = [
    "TITLE",
    "PROMPT",
    "FOCUS_COMMAND",
    "FOCUS_TREE",
    "FOCUS_LISTING",
    "draw_outline",
    "draw_status",
    "draw_prompt",
]
