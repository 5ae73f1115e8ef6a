"""Domain datatypes for the in-memory directory tree mirror."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(eq=False)
class File:
    """One regular file observed on disk."""

    name: str
    full_path: Path
    modified_ns: int | None = None
    size_bytes: int = 0


@dataclass(eq=False)
class Directory:
    """Directory node owning its files and subdirectories.

    Nodes compare and hash by identity: two directories with the same name and
    metadata are still different nodes. ``parent`` is held weakly so the tree is
    owned strictly top-down.
    """

    name: str
    full_path: Path
    modified_ns: int | None = None
    files: list[File] = field(default_factory=list)
    subdirectories: list["Directory"] = field(default_factory=list)
    _parent_ref: weakref.ReferenceType["Directory"] | None = field(default=None, repr=False)

    @property
    def parent(self) -> "Directory | None":
        """Return the owning directory, or ``None`` for the root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, value: "Directory | None") -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    @property
    def is_root(self) -> bool:
        return self._parent_ref is None


TreeNode = Directory | File


__all__ = [
    "File",
    "Directory",
    "TreeNode",
]
