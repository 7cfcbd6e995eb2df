"""Border glyph sets.

A glyph set maps semantic border positions (``top_left``, ``mid_mid``, ...)
to the characters drawn there. ``left`` doubles as the vertical separator
between cells.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

GLYPH_ROLES = (
    "top",
    "top_mid",
    "top_left",
    "top_right",
    "bottom",
    "bottom_mid",
    "bottom_left",
    "bottom_right",
    "left",
    "left_mid",
    "mid",
    "mid_mid",
    "right",
    "right_mid",
)


def _glyphs(*values: str) -> Mapping[str, str]:
    return MappingProxyType(dict(zip(GLYPH_ROLES, values)))


# ┌───┬───┐
# │   │   │
# ├───┼───┤
# └───┴───┘
DEFAULT_CHARS = _glyphs(
    "─", "┬", "┌", "┐",
    "─", "┴", "└", "┘",
    "│", "├", "─", "┼",
    "│", "┤",
)

STYLES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "ascii": _glyphs(
        "-", "+", "+", "+",
        "-", "+", "+", "+",
        "|", "+", "-", "+",
        "|", "+",
    ),
    "markdown": _glyphs(
        "-", "-", "|", "|",
        "-", "-", "|", "|",
        "|", "|", "-", "|",
        "|", "|",
    ),
    "rounded": _glyphs(
        "─", "┬", "╭", "╮",
        "─", "┴", "╰", "╯",
        "│", "├", "─", "┼",
        "│", "┤",
    ),
    "double": _glyphs(
        "═", "╦", "╔", "╗",
        "═", "╩", "╚", "╝",
        "║", "╠", "═", "╬",
        "║", "╣",
    ),
})


def resolve_chars(overrides: Mapping[str, str | None] | None = None) -> dict[str, str]:
    """Return the default glyph set with non-``None`` *overrides* applied."""
    chars = dict(DEFAULT_CHARS)
    if overrides:
        chars.update({k: v for k, v in overrides.items() if v is not None})
    return chars
