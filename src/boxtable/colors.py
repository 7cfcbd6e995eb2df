"""Color tokens to ANSI SGR sequences.

A color token is a named entry of :data:`ANSI` (``"red"``, ``"bg_blue"``,
``"bold"``), a raw SGR escape sequence, or a ``#RRGGBB`` hex string mapped
onto the 256-color palette.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Sequence, Union

from boxtable.errors import InvalidColorFormat

# A single token or an ordered list of tokens applied in sequence.
Color = Union[str, Sequence[str]]

# ---------------------------------------------------------------------------
# Named tokens
# ---------------------------------------------------------------------------

ANSI = MappingProxyType({
    "reset": "\x1b[0m",
    # decorations
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "italic": "\x1b[3m",
    "underline": "\x1b[4m",
    "inverse": "\x1b[7m",
    "hidden": "\x1b[8m",
    "strikethrough": "\x1b[9m",
    # foreground
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    # background
    "bg_black": "\x1b[40m",
    "bg_red": "\x1b[41m",
    "bg_green": "\x1b[42m",
    "bg_yellow": "\x1b[43m",
    "bg_blue": "\x1b[44m",
    "bg_magenta": "\x1b[45m",
    "bg_cyan": "\x1b[46m",
    "bg_white": "\x1b[47m",
})

_RESET = ANSI["reset"]

_FOREGROUND_NAMES = frozenset(
    ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")
)

_HEX_RE = re.compile(r"#[0-9A-Fa-f]{6}")
# A single CSI SGR sequence, e.g. "\x1b[38;5;196m"
_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences from *text*."""
    return _SGR_RE.sub("", text)


# ---------------------------------------------------------------------------
# Hex conversion
# ---------------------------------------------------------------------------


def _palette_index(hex_code: str) -> int:
    if not isinstance(hex_code, str) or not _HEX_RE.fullmatch(hex_code):
        raise InvalidColorFormat(hex_code)
    r = int(hex_code[1:3], 16)
    g = int(hex_code[3:5], 16)
    b = int(hex_code[5:7], 16)
    # 6x6x6 color cube starting at palette index 16
    return 16 + 36 * round(r / 51) + 6 * round(g / 51) + round(b / 51)


def hex_to_ansi(hex_code: str) -> str:
    """Return the 256-color foreground sequence for ``#RRGGBB``."""
    return f"\x1b[38;5;{_palette_index(hex_code)}m"


def hex_to_ansi_bg(hex_code: str) -> str:
    """Return the 256-color background sequence for ``#RRGGBB``."""
    return f"\x1b[48;5;{_palette_index(hex_code)}m"


# ---------------------------------------------------------------------------
# Token resolution
# ---------------------------------------------------------------------------


def resolve_color(token: str, background: bool = False) -> str:
    """Resolve one color token to its escape sequence.

    With *background*, hex tokens and plain color names (``"red"``) resolve
    to background sequences. Decorations, ``bg_*`` names and raw SGR
    sequences are used as given.
    """
    if not isinstance(token, str):
        raise InvalidColorFormat(token)
    if token.startswith("#"):
        return hex_to_ansi_bg(token) if background else hex_to_ansi(token)
    if background and token in _FOREGROUND_NAMES:
        token = f"bg_{token}"
    named = ANSI.get(token)
    if named is not None:
        return named
    if _SGR_RE.fullmatch(token):
        return token
    raise InvalidColorFormat(token)


def _tokens(color: Color | None) -> list[str]:
    if not color:
        return []
    if isinstance(color, str):
        return [color]
    return list(color)


def style_codes(color: Color | None = None, background: Color | None = None) -> str:
    """Concatenate the sequences for all foreground then all background tokens."""
    codes = [resolve_color(c) for c in _tokens(color)]
    codes.extend(resolve_color(c, background=True) for c in _tokens(background))
    return "".join(codes)


def apply_style(
    text: str, color: Color | None = None, background: Color | None = None
) -> str:
    """Wrap *text* in the given colors followed by a reset.

    Without any color the text is returned unchanged (no reset).
    """
    codes = style_codes(color, background)
    if not codes:
        return text
    return f"{codes}{text}{_RESET}"
