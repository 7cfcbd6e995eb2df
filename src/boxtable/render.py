"""Row and border line rendering."""

from __future__ import annotations

import math
from typing import Mapping, Sequence

from boxtable.colors import apply_style
from boxtable.layout import CELL_PADDING, PositionedCell


# ---------------------------------------------------------------------------
# Cells
# ---------------------------------------------------------------------------


def pad_cell(content: str, width: int, align: str = "left") -> str:
    """Fit *content* into *width* characters, one space kept on each side.

    Content wider than the interior is cut off without an ellipsis.
    """
    inner = max(0, width - CELL_PADDING)
    text = content[:inner]
    extra = inner - len(text)

    if align == "center":
        left = math.ceil(extra / 2)
        return " " + " " * left + text + " " * (extra - left) + " "
    if align == "right":
        return " " + " " * extra + text + " "
    return " " + text + " " * extra + " "


def span_width(widths: Sequence[int], col: int, col_span: int, pad: int) -> int:
    """Width of a cell covering ``widths[col:col + col_span]``.

    The separators and inter-cell padding between the spanned columns are
    absorbed so the cell lines up with the border below it.
    """
    covered = widths[col:col + col_span]
    return sum(covered) + (len(covered) - 1) * (2 * pad + 1) if covered else 0


def render_row(
    cells: Sequence[PositionedCell],
    widths: Sequence[int],
    chars: Mapping[str, str],
    aligns: Sequence[str],
    pad: int = 1,
) -> str:
    """Render one grid row as a single line bounded by ``left``/``right`` glyphs."""
    separator = chars.get("left", "│")
    pad_str = " " * pad
    anchored = {c.col: c for c in cells}
    num_cols = len(widths)

    parts: list[str] = [separator]
    col = 0
    while col < num_cols:
        cell = anchored.get(col)
        if cell is not None:
            align = aligns[col] if col < len(aligns) else "left"
            width = span_width(widths, col, cell.col_span, pad)
            text = pad_cell(cell.content, width, align)
            if cell.style is not None:
                text = apply_style(text, cell.style.color, cell.style.background)
            col += cell.col_span
        else:
            text = " " * widths[col]
            col += 1

        parts.append(f"{pad_str}{text}{pad_str}")
        if col < num_cols:
            parts.append(separator)

    parts.append(chars.get("right", "│"))
    return "".join(parts)


# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------


def render_border(
    widths: Sequence[int],
    chars: Mapping[str, str],
    left: str,
    mid: str,
    right: str,
    fill: str,
) -> str:
    """Render a horizontal border from glyph role names.

    ``┌───┬───┐`` is ``render_border(w, chars, "top_left", "top_mid",
    "top_right", "top")``.
    """
    fill_char = chars.get(fill, "─")
    mid_char = chars.get(mid, "┼")
    inner = mid_char.join(fill_char * w for w in widths)
    return f"{chars.get(left, '')}{inner}{chars.get(right, '')}"
