"""Panel geometry derived from the terminal size."""

from __future__ import annotations

from dataclasses import dataclass

MIN_COLUMNS = 24
MIN_ROWS = 8
DEFAULT_TREE_PANE_PERCENT = 50.0


@dataclass(frozen=True)
class PanelLayout:
    """Screen rectangles for the two panels plus the chrome rows.

    Row 0 is the title/status row, row 1 the top border, ``rows - 2`` the
    bottom border and ``rows - 1`` the command field.
    """

    rows: int
    columns: int
    divider_x: int
    tree_origin: tuple[int, int]
    tree_size: tuple[int, int]
    listing_origin: tuple[int, int]
    listing_size: tuple[int, int]

    @property
    def prompt_row(self) -> int:
        return self.rows - 1


def fits(rows: int, columns: int) -> bool:
    return rows >= MIN_ROWS and columns >= MIN_COLUMNS


def compute_layout(rows: int, columns: int, tree_pane_percent: float = DEFAULT_TREE_PANE_PERCENT) -> PanelLayout:
    """Split the screen into tree and listing panels around a vertical divider."""
    divider_x = int(columns * tree_pane_percent / 100.0)
    divider_x = max(1, min(divider_x, columns - 2))
    panel_height = max(0, rows - 4)
    return PanelLayout(
        rows=rows,
        columns=columns,
        divider_x=divider_x,
        tree_origin=(0, 2),
        tree_size=(divider_x, panel_height),
        listing_origin=(divider_x + 1, 2),
        listing_size=(columns - divider_x - 1, panel_height),
    )


__all__ = [
    "MIN_COLUMNS",
    "MIN_ROWS",
    "DEFAULT_TREE_PANE_PERCENT",
    "PanelLayout",
    "fits",
    "compute_layout",
]
