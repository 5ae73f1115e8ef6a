"""Scrollable, clipped view of a styled line buffer.

A viewport owns a rectangle of the screen. The outer two columns on each side
and the top/bottom rows form a frame where "more content" arrows appear; the
content itself is drawn in the inner ``(width - 4) x (height - 2)`` area.
Characters are counted by code point.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..ansi import style
from ..runtime.terminal import Terminal
from ..ui_theme import DEFAULT_THEME, UITheme
from .styled import Segment, StyledLine, max_line_width

FRAME_COLUMNS = 4
FRAME_ROWS = 2
HORIZONTAL_STRIDE = 4
VERTICAL_STRIDE = 2


class Edge(Enum):
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


EDGE_GLYPHS = {
    Edge.TOP: "↑",
    Edge.RIGHT: "→",
    Edge.BOTTOM: "↓",
    Edge.LEFT: "←",
}


def centered_run(span: int, stride: int) -> list[int]:
    """Return offsets of indicator glyphs centered within an interior ``span``.

    As many glyphs as fit at ``stride`` spacing are placed; the first offset
    is ``1 + (span - (count * stride - (stride - 1))) // 2``.
    """
    if span < 1 or stride < 1:
        return []
    count = (span - 1) // stride + 1
    first = 1 + (span - (count * stride - (stride - 1))) // 2
    return [first + i * stride for i in range(count)]


def clip_line(line: StyledLine, start: int, width: int) -> list[Segment]:
    """Return the segments of ``line`` visible in columns ``[start, start + width)``."""
    visible: list[Segment] = []
    if width <= 0:
        return visible
    offset = 0
    emitted = 0
    for segment in line:
        length = len(segment.text)
        if offset + length <= start:
            offset += length
            continue
        skip = max(0, start - offset)
        take = width - emitted
        text = segment.text[skip : skip + take]
        if text:
            visible.append(Segment(text, segment.color))
            emitted += len(text)
        offset += length
        if emitted >= width:
            break
    return visible


@dataclass
class Viewport:
    """Fixed-size window onto ``content`` at a clamped scroll offset."""

    origin: tuple[int, int]
    size: tuple[int, int]
    scroll: tuple[int, int] = (0, 0)
    content: list[StyledLine] = field(default_factory=list)
    max_content_width: int = 0

    @property
    def visible_size(self) -> tuple[int, int]:
        """Return ``(columns, rows)`` available to content inside the frame."""
        width, height = self.size
        return max(0, width - FRAME_COLUMNS), max(0, height - FRAME_ROWS)

    def max_scroll(self) -> tuple[int, int]:
        visible_w, visible_h = self.visible_size
        return (
            max(0, self.max_content_width - visible_w),
            max(0, len(self.content) - visible_h),
        )

    def clamp_scroll(self) -> None:
        """Pull the scroll offset back so no axis scrolls past its content."""
        max_x, max_y = self.max_scroll()
        x, y = self.scroll
        self.scroll = (max(0, min(x, max_x)), max(0, min(y, max_y)))

    def set_content(self, lines: list[StyledLine]) -> None:
        """Replace the buffer, refresh the cached width, and re-clamp."""
        self.content = lines
        self.max_content_width = max_line_width(lines)
        self.clamp_scroll()

    def resize(self, origin: tuple[int, int], size: tuple[int, int]) -> None:
        self.origin = origin
        self.size = size
        self.clamp_scroll()

    def scroll_by(self, dx: int, dy: int) -> bool:
        """Scroll by a delta clamped to the content; return whether it moved."""
        previous = self.scroll
        self.scroll = (self.scroll[0] + dx, self.scroll[1] + dy)
        self.clamp_scroll()
        return self.scroll != previous

    def indicator_edges(self) -> list[Edge]:
        """Return the edges with clipped content beyond them."""
        visible_w, visible_h = self.visible_size
        x, y = self.scroll
        edges: list[Edge] = []
        if y > 0:
            edges.append(Edge.TOP)
        if x + visible_w < self.max_content_width:
            edges.append(Edge.RIGHT)
        if y + visible_h < len(self.content):
            edges.append(Edge.BOTTOM)
        if x > 0:
            edges.append(Edge.LEFT)
        return edges

    def indicator_cells(self, edge: Edge) -> list[tuple[int, int]]:
        """Return viewport-relative ``(x, y)`` cells for ``edge``'s arrows."""
        width, height = self.size
        span_x = width - 2
        span_y = height - 2
        if edge is Edge.TOP:
            return [(col, 0) for col in centered_run(span_x, HORIZONTAL_STRIDE)]
        if edge is Edge.BOTTOM:
            return [(col, span_y + 1) for col in centered_run(span_x, HORIZONTAL_STRIDE)]
        if edge is Edge.LEFT:
            return [(0, row) for row in centered_run(span_y, VERTICAL_STRIDE)]
        return [(span_x + 1, row) for row in centered_run(span_y, VERTICAL_STRIDE)]

    def visible_rows(self) -> list[list[Segment]]:
        """Return the clipped segments for each content row currently on screen."""
        visible_w, visible_h = self.visible_size
        x, y = self.scroll
        rows: list[list[Segment]] = []
        for i in range(visible_h):
            idx = y + i
            if idx >= len(self.content):
                break
            rows.append(clip_line(self.content[idx], x, visible_w))
        return rows

    def draw(self, terminal: Terminal, theme: UITheme = DEFAULT_THEME) -> None:
        """Clear the rectangle, then draw indicators and the visible content."""
        left, top = self.origin
        width, height = self.size
        if width <= 0 or height <= 0:
            return

        blank = " " * width
        for row in range(height):
            terminal.move_to(left, top + row)
            terminal.write(blank)

        for edge in self.indicator_edges():
            glyph = style(EDGE_GLYPHS[edge], theme.indicator, theme.reset)
            for col, row in self.indicator_cells(edge):
                terminal.move_to(left + col, top + row)
                terminal.write(glyph)

        for i, segments in enumerate(self.visible_rows()):
            terminal.move_to(left + FRAME_COLUMNS // 2, top + 1 + i)
            terminal.write("".join(style(seg.text, theme.sgr_for(seg.color), theme.reset) for seg in segments))


__all__ = [
    "Edge",
    "EDGE_GLYPHS",
    "Viewport",
    "centered_run",
    "clip_line",
]
