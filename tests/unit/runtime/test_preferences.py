"""Tests for read-only JSON preferences and their input sanitization."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirman.runtime import config


class PreferenceLoadingTests(unittest.TestCase):
    def _with_config(self, payload: object | None, raw: str | None = None):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        config_path = Path(tmp.name) / "config.json"
        if raw is not None:
            config_path.write_text(raw, encoding="utf-8")
        elif payload is not None:
            config_path.write_text(json.dumps(payload), encoding="utf-8")
        patcher = mock.patch("dirman.runtime.config.CONFIG_PATH", config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_missing_config_uses_defaults(self) -> None:
        self._with_config(None)
        self.assertEqual(config.load_config(), {})
        self.assertIsNone(config.load_theme_name())
        self.assertEqual(config.load_scroll_step(), 5)
        self.assertEqual(config.load_tree_pane_percent(), 50.0)

    def test_valid_values_are_loaded(self) -> None:
        self._with_config({"theme": " ocean ", "scroll_step": 3, "tree_pane_percent": 35})
        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertEqual(config.load_scroll_step(), 3)
        self.assertEqual(config.load_tree_pane_percent(), 35.0)

    def test_invalid_values_fall_back(self) -> None:
        self._with_config({"theme": 7, "scroll_step": True, "tree_pane_percent": 100})
        self.assertIsNone(config.load_theme_name())
        self.assertEqual(config.load_scroll_step(), 5)
        self.assertEqual(config.load_tree_pane_percent(), 50.0)

    def test_malformed_json_is_ignored_with_warning(self) -> None:
        self._with_config(None, raw="{not json")
        with self.assertLogs("dirman.runtime", level="WARNING"):
            self.assertEqual(config.load_config(), {})

    def test_non_object_json_is_ignored(self) -> None:
        self._with_config([1, 2, 3])
        self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
