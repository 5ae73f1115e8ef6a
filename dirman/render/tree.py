"""Tree-pane line builder.

Walks the directory tree in sorted pre-order and emits one styled line per
directory, with box-drawing branch prefixes and per-directory annotations.
"""

from __future__ import annotations

from collections.abc import Sequence, Set

from ..file_tree_model import Directory
from .styled import Color, Segment, StyledLine, printable_text

BRANCH_TEE = "├─ "
BRANCH_CORNER = "└─ "
CONTINUE_PIPE = "│  "
CONTINUE_BLANK = "   "

CLOSED_SUFFIX = " +"
DELETE_SUFFIX = " x"


def _name_color(
    directory: Directory,
    current: Directory | None,
    pending_delete: Directory | None,
    is_ambiguous: bool,
    is_closed: bool,
) -> Color | None:
    if directory is current:
        return Color.BLUE
    if directory is pending_delete:
        return Color.RED
    if is_ambiguous:
        return Color.GREEN
    if is_closed:
        return Color.GRAY
    return None


def render_tree(
    root: Directory,
    current: Directory | None = None,
    closed: Set[Directory] = frozenset(),
    ambiguous: Sequence[Directory] = (),
    pending_delete: Directory | None = None,
) -> list[StyledLine]:
    """Render ``root`` and its visible descendants as styled tree lines.

    Ambiguous candidates are numbered from 0 in walk order. Closed directories
    emit their own line but none for their descendants.
    """
    ambiguous_set = set(ambiguous)
    counter = 0

    def walk(directory: Directory) -> list[StyledLine]:
        nonlocal counter
        is_closed = directory in closed
        is_ambiguous = directory in ambiguous_set
        line: StyledLine = [
            Segment(
                printable_text(directory.name),
                _name_color(directory, current, pending_delete, is_ambiguous, is_closed),
            )
        ]
        if directory is pending_delete:
            line.append(Segment(DELETE_SUFFIX, Color.RED))
        if is_ambiguous:
            line.append(Segment(f": {counter}", Color.GREEN))
            counter += 1
        if is_closed:
            line.append(Segment(CLOSED_SUFFIX, Color.GRAY))
            return [line]

        lines = [line]
        children = directory.subdirectories
        for idx, child in enumerate(children):
            last = idx == len(children) - 1
            first_prefix = BRANCH_CORNER if last else BRANCH_TEE
            rest_prefix = CONTINUE_BLANK if last else CONTINUE_PIPE
            for n, child_line in enumerate(walk(child)):
                lines.append([Segment(first_prefix if n == 0 else rest_prefix), *child_line])
        return lines

    return walk(root)


__all__ = [
    "BRANCH_TEE",
    "BRANCH_CORNER",
    "CONTINUE_PIPE",
    "CONTINUE_BLANK",
    "render_tree",
]
