"""Tests for slash-separated directory queries."""

from __future__ import annotations

import unittest
from pathlib import Path

from dirman.file_tree_model import Directory, insert_directory, resolve


def _add(parent: Directory, name: str) -> Directory:
    child = Directory(name=name, full_path=parent.full_path / name)
    insert_directory(parent, child)
    return child


class ResolveTests(unittest.TestCase):
    def setUp(self) -> None:
        # root
        # ├─ a
        # │  └─ x
        # │     └─ src
        # └─ b
        #    └─ src
        #       └─ x
        self.root = Directory(name="root", full_path=Path("/r"))
        self.a = _add(self.root, "a")
        self.a_x = _add(self.a, "x")
        self.a_x_src = _add(self.a_x, "src")
        self.b = _add(self.root, "b")
        self.b_src = _add(self.b, "src")
        self.b_src_x = _add(self.b_src, "x")

    def test_single_segment_matches_every_depth_in_preorder(self) -> None:
        self.assertEqual(resolve(self.root, "x"), [self.a_x, self.b_src_x])
        self.assertEqual(resolve(self.root, "src"), [self.a_x_src, self.b_src])

    def test_multi_segment_matches_descendants_of_earlier_segments(self) -> None:
        self.assertEqual(resolve(self.root, "b/x"), [self.b_src_x])
        self.assertEqual(resolve(self.root, "x/src"), [self.a_x_src])
        self.assertEqual(resolve(self.root, "src/x"), [self.b_src_x])

    def test_closing_an_ancestor_hides_its_descendants(self) -> None:
        self.assertEqual(resolve(self.root, "x", {self.a}), [self.b_src_x])
        # A closed directory still matches by its own name.
        self.assertEqual(resolve(self.root, "a", {self.a}), [self.a])

    def test_no_match_and_malformed_queries_are_empty(self) -> None:
        self.assertEqual(resolve(self.root, "missing"), [])
        self.assertEqual(resolve(self.root, "a/b"), [])
        self.assertEqual(resolve(self.root, "a//x"), [])
        self.assertEqual(resolve(self.root, ""), [])
        self.assertEqual(resolve(self.root, "root"), [])

    def test_nested_candidates_do_not_duplicate_results(self) -> None:
        inner_a = _add(self.a_x, "a")
        deep = _add(inner_a, "deep")
        self.assertEqual(resolve(self.root, "a/deep"), [deep])

    def test_matching_is_case_sensitive(self) -> None:
        self.assertEqual(resolve(self.root, "X"), [])


if __name__ == "__main__":
    unittest.main()
