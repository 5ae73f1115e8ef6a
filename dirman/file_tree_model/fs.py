"""Filesystem capability and the initial recursive tree scan.

``FileSystem`` is the seam the command layer mutates the disk through;
``LocalFileSystem`` is the real implementation and tests may substitute
failing or recording variants.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .types import Directory, File

logger = logging.getLogger("dirman.fs")


@dataclass(frozen=True)
class DirectoryChild:
    """One directory child plus the metadata observed while listing it."""

    name: str
    path: Path
    is_dir: bool
    file_size: int | None
    mtime_ns: int | None


@dataclass(frozen=True)
class EntryStat:
    mtime_ns: int | None
    size: int


class FileSystem(Protocol):
    """Primitive disk operations consumed by the tree model and commands."""

    def list_entries(self, path: Path) -> list[DirectoryChild]: ...

    def create_file(self, path: Path) -> None: ...

    def create_directory(self, path: Path) -> None: ...

    def rename(self, source: Path, target: Path) -> None: ...

    def copy_file(self, source: Path, target: Path) -> None: ...

    def remove_file(self, path: Path) -> None: ...

    def remove_tree(self, path: Path) -> None: ...

    def exists(self, path: Path) -> bool: ...

    def stat(self, path: Path) -> EntryStat: ...


def safe_mtime_ns(path: Path) -> int | None:
    """Return ``st_mtime_ns`` for ``path`` or ``None`` on stat failure."""
    try:
        return int(path.stat().st_mtime_ns)
    except OSError:
        return None


class LocalFileSystem:
    """``FileSystem`` backed by ``os``/``shutil`` on the local disk."""

    def list_entries(self, path: Path) -> list[DirectoryChild]:
        """List children of ``path`` sorted by name; raises ``OSError`` if unreadable."""
        children: list[DirectoryChild] = []
        with os.scandir(path) as entries:
            for child in entries:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False

                file_size: int | None = None
                mtime_ns: int | None = None
                try:
                    stat = child.stat(follow_symlinks=False)
                    mtime_ns = int(stat.st_mtime_ns)
                    if not is_dir:
                        file_size = int(stat.st_size)
                except OSError:
                    pass

                children.append(
                    DirectoryChild(
                        name=child.name,
                        path=Path(child.path),
                        is_dir=is_dir,
                        file_size=file_size,
                        mtime_ns=mtime_ns,
                    )
                )
        children.sort(key=lambda item: item.name)
        return children

    def create_file(self, path: Path) -> None:
        # "x" refuses to clobber an entry created behind our back.
        with open(path, "x", encoding="utf-8"):
            pass

    def create_directory(self, path: Path) -> None:
        os.mkdir(path)

    def rename(self, source: Path, target: Path) -> None:
        if os.path.lexists(target):
            raise FileExistsError(errno.EEXIST, "target already exists", str(target))
        os.rename(source, target)

    def copy_file(self, source: Path, target: Path) -> None:
        if os.path.lexists(target):
            raise FileExistsError(errno.EEXIST, "target already exists", str(target))
        shutil.copy2(source, target)

    def remove_file(self, path: Path) -> None:
        os.remove(path)

    def remove_tree(self, path: Path) -> None:
        shutil.rmtree(path)

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def stat(self, path: Path) -> EntryStat:
        result = os.stat(path, follow_symlinks=False)
        return EntryStat(mtime_ns=int(result.st_mtime_ns), size=int(result.st_size))


def build_directory_tree(root: Path, filesystem: FileSystem | None = None) -> Directory:
    """Scan ``root`` recursively into a ``Directory`` tree.

    The root must be a readable directory (``OSError`` otherwise). Unreadable
    subdirectories are logged and kept as empty nodes.
    """
    fs = filesystem if filesystem is not None else LocalFileSystem()
    root = root.resolve()
    root_node = Directory(name=root.name or str(root), full_path=root, modified_ns=safe_mtime_ns(root))

    def fill(node: Directory, children: list[DirectoryChild]) -> None:
        for child in children:
            if child.is_dir:
                sub = Directory(name=child.name, full_path=child.path, modified_ns=child.mtime_ns)
                sub.parent = node
                node.subdirectories.append(sub)
                try:
                    grandchildren = fs.list_entries(child.path)
                except OSError as exc:
                    logger.warning("cannot scan %s: %s", child.path, exc)
                    continue
                fill(sub, grandchildren)
            else:
                node.files.append(
                    File(
                        name=child.name,
                        full_path=child.path,
                        modified_ns=child.mtime_ns,
                        size_bytes=child.file_size or 0,
                    )
                )

    fill(root_node, fs.list_entries(root))
    logger.info("scanned %s", root)
    return root_node


__all__ = [
    "DirectoryChild",
    "EntryStat",
    "FileSystem",
    "LocalFileSystem",
    "safe_mtime_ns",
    "build_directory_tree",
]
