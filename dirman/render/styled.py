"""Styled line buffers shared by the tree/listing renderers and viewports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    GRAY = "gray"


@dataclass(frozen=True)
class Segment:
    """A run of text drawn in one color (``None`` means the terminal default)."""

    text: str
    color: Color | None = None


StyledLine = list[Segment]


def printable_text(text: str) -> str:
    """Replace control and unencodable characters with ``?``, one for one."""
    return "".join(ch if ch.isprintable() else "?" for ch in text)


def plain(text: str) -> StyledLine:
    """Return a one-segment uncolored line."""
    return [Segment(text)]


def line_width(line: StyledLine) -> int:
    """Return the code-point length of ``line``."""
    return sum(len(segment.text) for segment in line)


def max_line_width(lines: list[StyledLine]) -> int:
    return max((line_width(line) for line in lines), default=0)


def line_text(line: StyledLine) -> str:
    return "".join(segment.text for segment in line)


__all__ = [
    "Color",
    "Segment",
    "StyledLine",
    "printable_text",
    "plain",
    "line_width",
    "max_line_width",
    "line_text",
]
