"""Command-line front door for dirman.

Parses CLI options, performs startup checks, and scans the target directory.
Then dispatches into the interactive runtime.
"""

from __future__ import annotations

import argparse
import logging
import shutil
from pathlib import Path

from .file_tree_model import LocalFileSystem, build_directory_tree
from .runtime import run_app
from .runtime.config import load_scroll_step, load_theme_name, load_tree_pane_percent
from .runtime.layout import MIN_COLUMNS, MIN_ROWS, fits
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(log_file: str | None) -> None:
    """Attach a file handler; the terminal itself belongs to the UI."""
    if log_file is None:
        return
    try:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Cannot open log file {log_file}: {exc.strerror or exc}") from exc
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("dirman")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.INFO)


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch dirman on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        prog="dirman",
        description="Browse and manage a directory tree in a full-screen terminal UI.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to browse. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Append diagnostic logs to PATH.")
    args = parser.parse_args(argv)

    _configure_logging(args.log_file)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    term = shutil.get_terminal_size((80, 24))
    if not fits(term.lines, term.columns):
        raise SystemExit(f"Terminal too small: need at least {MIN_COLUMNS}x{MIN_ROWS}, have {term.columns}x{term.lines}")

    filesystem = LocalFileSystem()
    try:
        tree = build_directory_tree(path, filesystem)
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc.strerror or exc}") from exc

    theme = resolve_theme(args.theme or load_theme_name(), no_color=args.no_color)
    run_app(tree, filesystem, theme, load_scroll_step(), load_tree_pane_percent())


if __name__ == "__main__":
    main()
