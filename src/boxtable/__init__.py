"""boxtable: terminal tables with borders, colors, and row/column spans."""

# Cells
from boxtable.cells import CellStyle, NormalizedCell, RichCell, TableCell, normalize_cell

# Border glyph sets
from boxtable.chars import DEFAULT_CHARS, STYLES, resolve_chars

# Colors
from boxtable.colors import (
    ANSI,
    apply_style,
    hex_to_ansi,
    hex_to_ansi_bg,
    resolve_color,
    strip_ansi,
)

# Errors
from boxtable.errors import InvalidColorFormat

# Layout engine
from boxtable.layout import (
    Grid,
    Occupancy,
    PositionedCell,
    compute_widths,
    layout_table,
    place_row,
)

# Rendering
from boxtable.render import pad_cell, render_border, render_row

# Table assembly
from boxtable.table import TableOptions, TableRow, TableStyle, create_table

__all__ = [
    # Cells
    "CellStyle",
    "NormalizedCell",
    "RichCell",
    "TableCell",
    "normalize_cell",
    # Glyphs
    "DEFAULT_CHARS",
    "STYLES",
    "resolve_chars",
    # Colors
    "ANSI",
    "apply_style",
    "hex_to_ansi",
    "hex_to_ansi_bg",
    "resolve_color",
    "strip_ansi",
    # Errors
    "InvalidColorFormat",
    # Layout
    "Grid",
    "Occupancy",
    "PositionedCell",
    "compute_widths",
    "layout_table",
    "place_row",
    # Rendering
    "pad_cell",
    "render_border",
    "render_row",
    # Table
    "TableOptions",
    "TableRow",
    "TableStyle",
    "create_table",
]
