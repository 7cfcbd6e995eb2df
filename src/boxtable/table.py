"""Table assembly: options, layout, widths, and line emission."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Mapping, Sequence

from boxtable.cells import TableCell
from boxtable.chars import resolve_chars
from boxtable.colors import apply_style
from boxtable.layout import compute_widths, layout_table
from boxtable.render import render_border, render_row

logger = logging.getLogger(__name__)

Align = Literal["left", "center", "right"]
TableRow = Sequence[TableCell]


@dataclass
class TableStyle:
    """Table-wide styling.

    ``border=False`` drops the top and bottom borders; a list of color
    tokens colors every horizontal border line instead.
    """

    head: list[str] | None = None
    border: list[str] | bool | None = None
    compact: bool = False
    padding: int | None = None

    @property
    def pad(self) -> int:
        if self.compact:
            return 0
        return max(0, 1 if self.padding is None else self.padding)

    @property
    def draw_outer_border(self) -> bool:
        return self.border is not False


@dataclass
class TableOptions:
    """Options for :func:`create_table`."""

    chars: Mapping[str, str | None] | None = None
    style: TableStyle = field(default_factory=TableStyle)
    head: Sequence[TableCell] | None = None
    col_widths: Sequence[int | None] | None = None
    col_aligns: Sequence[Align] | None = None


def _border_colors(style: TableStyle) -> list[str]:
    if isinstance(style.border, (list, tuple)):
        return list(style.border)
    return []


def create_table(data: Sequence[TableRow], options: TableOptions | None = None) -> str:
    """Render *data* as a bordered text table.

    Example::

        create_table(
            [["John", "28"], ["Jane", "32"]],
            TableOptions(head=["Name", "Age"]),
        )

    Raises :class:`~boxtable.errors.InvalidColorFormat` when any color token
    is malformed.
    """
    options = options or TableOptions()
    style = options.style or TableStyle()
    chars = resolve_chars(options.chars)
    pad = style.pad

    if options.col_aligns is not None:
        aligns: list[str] = list(options.col_aligns)
    else:
        aligns = ["left"] * (len(data[0]) if data else 0)

    grid = layout_table(options.head, data)
    widths = compute_widths(grid, options.col_widths)
    # Borders span the inter-cell padding too
    border_widths = [w + 2 * pad for w in widths]
    border_colors = _border_colors(style)

    def border(left: str, mid: str, right: str, fill: str) -> str:
        line = render_border(border_widths, chars, left, mid, right, fill)
        return apply_style(line, border_colors) if border_colors else line

    lines: list[str] = []

    if style.draw_outer_border:
        lines.append(border("top_left", "top_mid", "top_right", "top"))

    if grid.head is not None:
        header = render_row(grid.head, widths, chars, aligns, pad)
        lines.append(apply_style(header, style.head) if style.head else header)
        lines.append(border("left_mid", "mid_mid", "right_mid", "mid"))

    for row in grid.rows:
        lines.append(render_row(row, widths, chars, aligns, pad))

    if style.draw_outer_border:
        lines.append(border("bottom_left", "bottom_mid", "bottom_right", "bottom"))

    logger.debug("Rendered table: %d columns, %d lines", len(widths), len(lines))
    return "\n".join(lines)
