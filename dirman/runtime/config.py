"""Read-only JSON preferences.

Reads theme name, scroll step and tree pane width from ``config.json`` in the
platform config directory. Malformed or missing config falls back to
defaults. Nothing is ever written back.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..input.keys import DEFAULT_SCROLL_STEP
from .layout import DEFAULT_TREE_PANE_PERCENT

logger = logging.getLogger("dirman.runtime")

APP_NAME = "dirman"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name() -> str | None:
    """Load the configured UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_scroll_step() -> int:
    """Return the panel scroll step; booleans and non-positive values fall back."""
    value = load_config().get("scroll_step")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_SCROLL_STEP
    return value


def load_tree_pane_percent() -> float:
    """Return the tree panel width as a percentage in the open interval (0, 100)."""
    value = load_config().get("tree_pane_percent")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_TREE_PANE_PERCENT
    if value <= 0 or value >= 100:
        return DEFAULT_TREE_PANE_PERCENT
    return float(value)


__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "CONFIG_PATH",
    "load_config",
    "load_theme_name",
    "load_scroll_step",
    "load_tree_pane_percent",
]
