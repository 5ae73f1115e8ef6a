"""Sorted insertion/removal, renaming, and lookups on the directory tree.

Every operation keeps ``files`` and ``subdirectories`` sorted by name with
names unique across both sequences of a directory.
"""

from __future__ import annotations

import bisect
from collections.abc import Callable, Iterator, Set
from pathlib import Path

from .fs import FileSystem
from .types import Directory, File, TreeNode


def _name_key(node: TreeNode) -> str:
    return node.name


def find_file(directory: Directory, name: str) -> File | None:
    """Return the file called ``name`` directly inside ``directory``."""
    idx = bisect.bisect_left(directory.files, name, key=_name_key)
    if idx < len(directory.files) and directory.files[idx].name == name:
        return directory.files[idx]
    return None


def find_subdirectory(directory: Directory, name: str) -> Directory | None:
    """Return the direct subdirectory called ``name`` inside ``directory``."""
    idx = bisect.bisect_left(directory.subdirectories, name, key=_name_key)
    if idx < len(directory.subdirectories) and directory.subdirectories[idx].name == name:
        return directory.subdirectories[idx]
    return None


def has_entry(directory: Directory, name: str) -> bool:
    """Return whether a file or directory called ``name`` exists in ``directory``."""
    return find_file(directory, name) is not None or find_subdirectory(directory, name) is not None


def unique_child_name(
    directory: Directory,
    name: str,
    exists: Callable[[Path], bool] | None = None,
) -> str:
    """Return ``name`` or the first unused ``name_1``, ``name_2``, ... in ``directory``.

    ``exists`` optionally reports on-disk occupancy of a candidate path so
    entries unknown to the model are not overwritten either.
    """
    candidate = name
    suffix = 0
    while has_entry(directory, candidate) or (exists is not None and exists(directory.full_path / candidate)):
        suffix += 1
        candidate = f"{name}_{suffix}"
    return candidate


def _check_free(directory: Directory, name: str) -> None:
    if has_entry(directory, name):
        raise ValueError(f"{name!r} already exists in {directory.full_path}")


def _rebase(directory: Directory, full_path: Path) -> None:
    """Point ``directory`` and every descendant at paths under ``full_path``."""
    directory.full_path = full_path
    for file in directory.files:
        file.full_path = full_path / file.name
    for child in directory.subdirectories:
        _rebase(child, full_path / child.name)


def insert_file(directory: Directory, file: File) -> None:
    """Insert ``file`` at its sorted position and point its path into ``directory``."""
    _check_free(directory, file.name)
    file.full_path = directory.full_path / file.name
    bisect.insort(directory.files, file, key=_name_key)


def insert_directory(parent: Directory, directory: Directory) -> None:
    """Attach ``directory`` under ``parent`` at its sorted position."""
    _check_free(parent, directory.name)
    directory.parent = parent
    _rebase(directory, parent.full_path / directory.name)
    bisect.insort(parent.subdirectories, directory, key=_name_key)


def remove_file(directory: Directory, name: str) -> File:
    """Splice the file ``name`` out of ``directory`` and return it."""
    file = find_file(directory, name)
    if file is None:
        raise KeyError(name)
    directory.files.remove(file)
    return file


def _detach_directory(directory: Directory) -> None:
    """Remove ``directory`` from its parent's sequence without touching the disk."""
    parent = directory.parent
    if parent is None:
        raise ValueError("the root directory cannot be detached")
    for idx, child in enumerate(parent.subdirectories):
        if child is directory:
            del parent.subdirectories[idx]
            break
    else:
        raise KeyError(directory.name)
    directory.parent = None


def remove_directory(directory: Directory, filesystem: FileSystem) -> None:
    """Delete ``directory`` recursively on disk, then detach it from the tree.

    The disk delete happens first as a single call; if it raises, the model is
    left exactly as it was.
    """
    if directory.is_root:
        raise ValueError("the root directory cannot be removed")
    filesystem.remove_tree(directory.full_path)
    _detach_directory(directory)


def rename(node: TreeNode, new_name: str, parent: Directory | None = None) -> None:
    """Rename ``node`` and restore its parent's sort order.

    Files do not know their owner, so ``parent`` is required for them;
    directories default to their own back-reference.
    """
    if parent is None and isinstance(node, Directory):
        parent = node.parent
    if parent is None:
        raise ValueError("the root directory cannot be renamed")
    if new_name == node.name:
        return
    _check_free(parent, new_name)
    siblings: list = parent.subdirectories if isinstance(node, Directory) else parent.files
    for idx, sibling in enumerate(siblings):
        if sibling is node:
            del siblings[idx]
            break
    else:
        raise KeyError(node.name)
    node.name = new_name
    if isinstance(node, Directory):
        _rebase(node, parent.full_path / new_name)
    else:
        node.full_path = parent.full_path / new_name
    bisect.insort(siblings, node, key=_name_key)


def iter_preorder(root: Directory, closed: Set[Directory] = frozenset()) -> Iterator[Directory]:
    """Yield ``root`` and its descendants in sorted pre-order.

    Directories in ``closed`` are yielded but not descended into.
    """
    yield root
    if root in closed:
        return
    for child in root.subdirectories:
        yield from iter_preorder(child, closed)


def is_within(node: Directory, ancestor: Directory) -> bool:
    """Return whether ``node`` is ``ancestor`` or lies anywhere below it."""
    current: Directory | None = node
    while current is not None:
        if current is ancestor:
            return True
        current = current.parent
    return False


__all__ = [
    "find_file",
    "find_subdirectory",
    "has_entry",
    "unique_child_name",
    "insert_file",
    "insert_directory",
    "remove_file",
    "remove_directory",
    "rename",
    "iter_preorder",
    "is_within",
]
