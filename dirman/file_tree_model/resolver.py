"""Slash-separated directory-name queries against the tree.

A query like ``"src/util"`` matches every ``util`` directory found at any depth
below any ``src`` directory found at any depth below the root. Closed
directories can match by their own name but hide their descendants.
"""

from __future__ import annotations

from collections.abc import Set

from .mutations import iter_preorder
from .types import Directory


def _collect_named(directory: Directory, name: str, closed: Set[Directory], out: list[Directory]) -> None:
    # The first pre-order entry is the directory itself.
    descendants = iter_preorder(directory, closed)
    next(descendants)
    out.extend(child for child in descendants if child.name == name)


def resolve(root: Directory, query: str, closed: Set[Directory] = frozenset()) -> list[Directory]:
    """Return directories matching ``query`` in sorted pre-order.

    An empty list means no match; more than one means the query is ambiguous.
    Matching is exact and case-sensitive per segment.
    """
    candidates = [root]
    for segment in query.split("/"):
        if not segment:
            return []
        found: list[Directory] = []
        for candidate in candidates:
            _collect_named(candidate, segment, closed, found)
        # Nested candidates report the same descendants twice.
        seen: set[Directory] = set()
        candidates = []
        for directory in found:
            if directory in seen:
                continue
            seen.add(directory)
            candidates.append(directory)
        if not candidates:
            return []
    return candidates


__all__ = ["resolve"]
