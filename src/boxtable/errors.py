"""Exceptions raised by boxtable."""

from __future__ import annotations


class InvalidColorFormat(ValueError):
    """A color token is neither a known name, a raw SGR sequence, nor ``#RRGGBB``."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}. Expected format: #RRGGBB")
