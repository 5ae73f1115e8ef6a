"""Tests for sorted tree mutation helpers.

Covers ordering and uniqueness of child sequences, path rebasing, and the
disk-first contract of directory removal.
"""

from __future__ import annotations

import unittest
from pathlib import Path

from dirman.file_tree_model import (
    Directory,
    File,
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


def _names(nodes) -> list[str]:
    return [node.name for node in nodes]


def _make_root() -> Directory:
    return Directory(name="root", full_path=Path("/r"))


class _RecordingFileSystem:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.removed: list[Path] = []

    def remove_tree(self, path: Path) -> None:
        if self.fail:
            raise PermissionError(13, "Permission denied", str(path))
        self.removed.append(path)


class InsertRemoveTests(unittest.TestCase):
    def test_inserts_keep_children_sorted_and_unique(self) -> None:
        root = _make_root()
        for name in ["m.txt", "a.txt", "z.txt", "b.txt"]:
            insert_file(root, File(name=name, full_path=Path("/elsewhere") / name))
        for name in ["src", "docs", "tests"]:
            insert_directory(root, Directory(name=name, full_path=Path("/elsewhere") / name))

        self.assertEqual(_names(root.files), ["a.txt", "b.txt", "m.txt", "z.txt"])
        self.assertEqual(_names(root.subdirectories), ["docs", "src", "tests"])
        self.assertEqual(root.files[0].full_path, Path("/r/a.txt"))
        self.assertIs(root.subdirectories[0].parent, root)

        remove_file(root, "b.txt")
        insert_file(root, File(name="c.txt", full_path=Path("/r/c.txt")))
        self.assertEqual(_names(root.files), ["a.txt", "c.txt", "m.txt", "z.txt"])

    def test_insert_rejects_name_taken_by_either_kind(self) -> None:
        root = _make_root()
        insert_directory(root, Directory(name="logs", full_path=Path("/r/logs")))
        with self.assertRaises(ValueError):
            insert_file(root, File(name="logs", full_path=Path("/r/logs")))
        insert_file(root, File(name="notes", full_path=Path("/r/notes")))
        with self.assertRaises(ValueError):
            insert_directory(root, Directory(name="notes", full_path=Path("/r/notes")))

    def test_remove_missing_file_raises_key_error(self) -> None:
        with self.assertRaises(KeyError):
            remove_file(_make_root(), "ghost")

    def test_insert_directory_rebases_descendant_paths(self) -> None:
        root = _make_root()
        moved = Directory(name="pkg", full_path=Path("/old/pkg"))
        inner = Directory(name="inner", full_path=Path("/old/pkg/inner"))
        insert_directory(moved, inner)
        insert_file(inner, File(name="f.py", full_path=Path("/old/pkg/inner/f.py")))

        insert_directory(root, moved)

        self.assertEqual(moved.full_path, Path("/r/pkg"))
        self.assertEqual(inner.full_path, Path("/r/pkg/inner"))
        self.assertEqual(inner.files[0].full_path, Path("/r/pkg/inner/f.py"))

    def test_lookups(self) -> None:
        root = _make_root()
        insert_file(root, File(name="a", full_path=Path("/r/a")))
        insert_directory(root, Directory(name="b", full_path=Path("/r/b")))
        self.assertIsNotNone(find_file(root, "a"))
        self.assertIsNone(find_file(root, "b"))
        self.assertIsNotNone(find_subdirectory(root, "b"))
        self.assertTrue(has_entry(root, "a"))
        self.assertTrue(has_entry(root, "b"))
        self.assertFalse(has_entry(root, "c"))


class DirectoryRemovalTests(unittest.TestCase):
    def test_remove_directory_deletes_on_disk_then_detaches(self) -> None:
        root = _make_root()
        logs = Directory(name="logs", full_path=Path("/r/logs"))
        insert_directory(root, logs)
        filesystem = _RecordingFileSystem()

        remove_directory(logs, filesystem)

        self.assertEqual(filesystem.removed, [Path("/r/logs")])
        self.assertEqual(root.subdirectories, [])
        self.assertIsNone(logs.parent)

    def test_failed_disk_delete_leaves_model_unchanged(self) -> None:
        root = _make_root()
        logs = Directory(name="logs", full_path=Path("/r/logs"))
        insert_directory(root, logs)

        with self.assertRaises(PermissionError):
            remove_directory(logs, _RecordingFileSystem(fail=True))

        self.assertEqual(root.subdirectories, [logs])
        self.assertIs(logs.parent, root)

    def test_root_cannot_be_removed(self) -> None:
        root = _make_root()
        filesystem = _RecordingFileSystem()

        with self.assertRaises(ValueError):
            remove_directory(root, filesystem)

        self.assertTrue(root.is_root)
        self.assertEqual(filesystem.removed, [])


class RenameTests(unittest.TestCase):
    def test_rename_file_resorts_siblings(self) -> None:
        root = _make_root()
        for name in ["a", "b", "c"]:
            insert_file(root, File(name=name, full_path=Path("/r") / name))
        rename(root.files[0], "d", root)
        self.assertEqual(_names(root.files), ["b", "c", "d"])
        self.assertEqual(root.files[-1].full_path, Path("/r/d"))

    def test_rename_directory_rebases_subtree(self) -> None:
        root = _make_root()
        src = Directory(name="src", full_path=Path("/r/src"))
        insert_directory(root, src)
        insert_file(src, File(name="main.py", full_path=Path("/r/src/main.py")))
        insert_directory(root, Directory(name="docs", full_path=Path("/r/docs")))

        rename(src, "app")

        self.assertEqual(_names(root.subdirectories), ["app", "docs"])
        self.assertEqual(src.files[0].full_path, Path("/r/app/main.py"))

    def test_rename_rejects_root_and_taken_names(self) -> None:
        root = _make_root()
        with self.assertRaises(ValueError):
            rename(root, "other")
        insert_file(root, File(name="a", full_path=Path("/r/a")))
        insert_file(root, File(name="b", full_path=Path("/r/b")))
        with self.assertRaises(ValueError):
            rename(root.files[0], "b", root)


class NamingAndTraversalTests(unittest.TestCase):
    def test_unique_child_name_appends_increasing_suffix(self) -> None:
        root = _make_root()
        self.assertEqual(unique_child_name(root, "report.txt"), "report.txt")
        insert_file(root, File(name="report.txt", full_path=Path("/r/report.txt")))
        insert_file(root, File(name="report.txt_1", full_path=Path("/r/report.txt_1")))
        self.assertEqual(unique_child_name(root, "report.txt"), "report.txt_2")

    def test_unique_child_name_consults_disk_occupancy(self) -> None:
        root = _make_root()
        on_disk = {Path("/r/x"), Path("/r/x_1")}
        self.assertEqual(unique_child_name(root, "x", on_disk.__contains__), "x_2")

    def test_preorder_skips_closed_descendants(self) -> None:
        root = _make_root()
        a = Directory(name="a", full_path=Path("/r/a"))
        b = Directory(name="b", full_path=Path("/r/b"))
        insert_directory(root, a)
        insert_directory(root, b)
        a_inner = Directory(name="inner", full_path=Path("/r/a/inner"))
        insert_directory(a, a_inner)

        self.assertEqual(_names(iter_preorder(root)), ["root", "a", "inner", "b"])
        self.assertEqual(_names(iter_preorder(root, {a})), ["root", "a", "b"])
        self.assertTrue(is_within(a_inner, root))
        self.assertTrue(is_within(a, a))
        self.assertFalse(is_within(b, a))


if __name__ == "__main__":
    unittest.main()
