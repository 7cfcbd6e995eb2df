"""Grid layout engine and column width calculator.

Rows are placed left to right onto a sparse grid. Cells spanning several rows
mark the coordinates below them as occupied, and later rows skip those
coordinates, so a cell's effective column can shift to the right of its
position in the input row. The header lives at row ``-1``.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from boxtable.cells import CellStyle, TableCell, normalize_cell

logger = logging.getLogger(__name__)

HEADER_ROW = -1

# Added to every column's content width (one space either side).
CELL_PADDING = 2

# Assumed width of a column swallowed by a colspan when no width is given.
DEFAULT_SPAN_ESTIMATE = 10


@dataclass(frozen=True)
class PositionedCell:
    """A normalized cell anchored at ``(row, col)``."""

    row: int
    col: int
    content: str
    col_span: int = 1
    row_span: int = 1
    style: CellStyle | None = None

    @property
    def end_col(self) -> int:
        return self.col + self.col_span


class Occupancy:
    """Per-row sets of occupied column indices."""

    def __init__(self) -> None:
        self._rows: defaultdict[int, set[int]] = defaultdict(set)

    def is_occupied(self, row: int, col: int) -> bool:
        cols = self._rows.get(row)
        return cols is not None and col in cols

    def mark(self, cell: PositionedCell) -> None:
        for r in range(cell.row, cell.row + cell.row_span):
            self._rows[r].update(range(cell.col, cell.end_col))

    def mark_row(self, cells: Iterable[PositionedCell]) -> None:
        for cell in cells:
            self.mark(cell)

    def occupied_columns(self, row: int) -> frozenset[int]:
        return frozenset(self._rows.get(row, ()))


def place_row(
    row_cells: Sequence[TableCell], row_index: int, occupancy: Occupancy
) -> list[PositionedCell]:
    """Place one input row onto the grid and mark what it covers."""
    placed: list[PositionedCell] = []
    col = 0

    for position, cell in enumerate(row_cells):
        # Skip columns held by a rowspan from an earlier row
        start = col
        while occupancy.is_occupied(row_index, col):
            col += 1
        if col != start:
            logger.debug(
                "Row %d cell %d shifted from column %d to %d", row_index, position, start, col
            )

        normalized = normalize_cell(cell)
        if normalized is None:
            col += 1
            continue

        placed.append(
            PositionedCell(
                row=row_index,
                col=col,
                content=normalized.content,
                col_span=normalized.col_span,
                row_span=normalized.row_span,
                style=normalized.style,
            )
        )
        col += normalized.col_span

    occupancy.mark_row(placed)
    return placed


@dataclass
class Grid:
    """All positioned cells of one table."""

    head: list[PositionedCell] | None = None
    rows: list[list[PositionedCell]] = field(default_factory=list)
    occupancy: Occupancy = field(default_factory=Occupancy)

    def all_rows(self) -> list[list[PositionedCell]]:
        if self.head is None:
            return list(self.rows)
        return [self.head, *self.rows]

    @property
    def num_cols(self) -> int:
        return max((c.end_col for row in self.all_rows() for c in row), default=0)


def layout_table(
    head: Sequence[TableCell] | None, rows: Sequence[Sequence[TableCell]]
) -> Grid:
    """Place the header (row ``-1``) and every data row onto one grid."""
    grid = Grid()
    if head is not None:
        grid.head = place_row(head, HEADER_ROW, grid.occupancy)
    for row_index, row in enumerate(rows):
        grid.rows.append(place_row(row, row_index, grid.occupancy))
    return grid


def _given_width(col_widths: Sequence[int | None] | None, col: int) -> int | None:
    if col_widths is None or col >= len(col_widths) or col_widths[col] is None:
        return None
    return max(0, col_widths[col])


def compute_widths(grid: Grid, col_widths: Sequence[int | None] | None = None) -> list[int]:
    """Return the rendered width of every column, padding included.

    A colspan adds, for each column it swallows, that column's given width
    or :data:`DEFAULT_SPAN_ESTIMATE`. A given width always wins over the
    measured content.
    """
    widths: list[int] = []
    anchored_rows = [{c.col: c for c in row} for row in grid.all_rows()]

    for col in range(grid.num_cols):
        max_width = 0
        for anchored in anchored_rows:
            cell = anchored.get(col)
            if cell is None:
                continue
            cell_width = len(cell.content)
            for sub in range(col + 1, cell.end_col):
                if sub not in anchored:
                    given = _given_width(col_widths, sub)
                    cell_width += DEFAULT_SPAN_ESTIMATE if given is None else given
            max_width = max(max_width, cell_width)

        given = _given_width(col_widths, col)
        widths.append((max_width if given is None else given) + CELL_PADDING)

    logger.debug("Computed column widths: %s", widths)
    return widths
