"""Detail listing of the current directory for the right-hand panel."""

from __future__ import annotations

from datetime import datetime, timezone

from ..file_tree_model import Directory
from .styled import StyledLine, plain, printable_text

LISTING_HEADER = "Last Modified           Size  Name"
LISTING_RULE = "-------------           ----  ----"
DIRECTORIES_HEADING = "- Directories -"
FILES_HEADING = "- Files -"
DATE_WIDTH = len("01/01/1970 12:00 AM")

_KB = 1024
_MB = 1024 * 1024
_GB = 1024 * 1024 * 1024


def format_size(size: int) -> str:
    """Format a byte count using the largest 1024-based unit that fits."""
    if size >= _GB:
        return f"{size // _GB} GB"
    if size >= _MB:
        return f"{size // _MB} MB"
    if size >= _KB:
        return f"{size // _KB} KB"
    return f"{size} B"


def format_modified(mtime_ns: int | None) -> str:
    """Format a modification time as ``MM/DD/YYYY hh:MM AM`` in UTC."""
    if mtime_ns is None:
        return " " * DATE_WIDTH
    stamp = datetime.fromtimestamp(mtime_ns // 1_000_000_000, tz=timezone.utc)
    hour = stamp.hour % 12 or 12
    meridiem = "PM" if stamp.hour >= 12 else "AM"
    return f"{stamp.month:02}/{stamp.day:02}/{stamp.year:04} {hour:02}:{stamp.minute:02} {meridiem}"


def render_listing(directory: Directory) -> list[StyledLine]:
    """Render headers, then a directories section and a files section."""
    lines: list[StyledLine] = [plain(LISTING_HEADER), plain(LISTING_RULE)]
    if directory.subdirectories:
        lines.append(plain(DIRECTORIES_HEADING))
        for sub in directory.subdirectories:
            lines.append(plain(f"{format_modified(sub.modified_ns)}           {printable_text(sub.name)}"))
        lines.append(plain(""))
    if directory.files:
        lines.append(plain(FILES_HEADING))
        for file in directory.files:
            size = format_size(file.size_bytes)
            lines.append(plain(f"{format_modified(file.modified_ns)}  {size:>7}  {printable_text(file.name)}"))
    return lines


__all__ = [
    "format_size",
    "format_modified",
    "render_listing",
]
