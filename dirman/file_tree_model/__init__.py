"""Domain model for the in-memory directory tree mirror.

This package contains non-UI tree primitives:
- directory/file node datatypes with weak parent back-references
- sorted mutation and lookup helpers
- slash-separated name resolution
- the filesystem capability and initial recursive scan
"""

from __future__ import annotations

from .types import Directory, File, TreeNode
from .fs import DirectoryChild, EntryStat, FileSystem, LocalFileSystem, build_directory_tree, safe_mtime_ns
from .mutations import (
    find_file,
    find_subdirectory,
    has_entry,
    insert_directory,
    insert_file,
    is_within,
    iter_preorder,
    remove_directory,
    remove_file,
    rename,
    unique_child_name,
)
from .resolver import resolve

__all__ = [
    "Directory",
    "File",
    "TreeNode",
    "DirectoryChild",
    "EntryStat",
    "FileSystem",
    "LocalFileSystem",
    "build_directory_tree",
    "safe_mtime_ns",
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
    "resolve",
]
