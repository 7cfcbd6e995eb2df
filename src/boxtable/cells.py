"""Cell inputs and their normalized form."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Union

from boxtable.colors import Color

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellStyle:
    """Per-cell colors; each field is one token or a list of tokens."""

    color: Color | None = None
    background: Color | None = None


@dataclass
class RichCell:
    """A cell with spans and optional styling."""

    content: Any = None
    col_span: int = 1
    row_span: int = 1
    style: CellStyle | None = None


# str | int | float | bool | None | RichCell | Mapping of RichCell fields
TableCell = Union[str, int, float, bool, None, RichCell, Mapping[str, Any]]


@dataclass(frozen=True)
class NormalizedCell:
    """Uniform cell descriptor consumed by the layout engine."""

    content: str
    col_span: int = 1
    row_span: int = 1
    style: CellStyle | None = None


def _content_to_str(content: Any) -> str:
    if content is None:
        return ""
    return str(content)


def _clamp_span(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        if value not in (None, 1):
            logger.debug("Clamping %s=%r to 1", name, value)
        return 1
    return value


def _coerce_style(style: Any) -> CellStyle | None:
    if style is None or isinstance(style, CellStyle):
        return style
    if isinstance(style, Mapping):
        return CellStyle(color=style.get("color"), background=style.get("background"))
    return None


def _first(mapping: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in mapping:
            return mapping[key]
    return None


def is_rich_cell(cell: Any) -> bool:
    """True for a :class:`RichCell` or any mapping; a missing ``content`` key renders empty."""
    return isinstance(cell, (RichCell, Mapping))


def normalize_cell(cell: TableCell) -> NormalizedCell | None:
    """Convert any supported cell input to a :class:`NormalizedCell`.

    ``None`` yields ``None``: the cell takes no grid slot and the caller only
    advances its column cursor.
    """
    if cell is None:
        return None

    if isinstance(cell, RichCell):
        return NormalizedCell(
            content=_content_to_str(cell.content),
            col_span=_clamp_span(cell.col_span, "col_span"),
            row_span=_clamp_span(cell.row_span, "row_span"),
            style=_coerce_style(cell.style),
        )

    if is_rich_cell(cell):
        return NormalizedCell(
            content=_content_to_str(cell.get("content")),
            col_span=_clamp_span(_first(cell, "col_span", "colSpan"), "col_span"),
            row_span=_clamp_span(_first(cell, "row_span", "rowSpan"), "row_span"),
            style=_coerce_style(cell.get("style")),
        )

    return NormalizedCell(content=str(cell))
