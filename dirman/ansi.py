"""ANSI escape helpers for styled terminal output.

Renderers wrap colored runs with SGR sequences; tests strip them again to
inspect the plain text that reached the screen.
"""

from __future__ import annotations

import re

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def style(text: str, sgr: str, reset: str) -> str:
    """Wrap ``text`` in ``sgr``/``reset``; empty text or style passes through."""
    if not text or not sgr:
        return text
    return f"{sgr}{text}{reset}"


def strip_ansi(text: str) -> str:
    """Remove escape sequences, leaving only displayable characters."""
    return ANSI_ESCAPE_RE.sub("", text)
