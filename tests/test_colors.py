"""Tests for boxtable.colors -- color token resolution."""

from __future__ import annotations

import pytest

from boxtable.colors import (
    ANSI,
    apply_style,
    hex_to_ansi,
    hex_to_ansi_bg,
    resolve_color,
    strip_ansi,
    style_codes,
)
from boxtable.errors import InvalidColorFormat

# ---------------------------------------------------------------------------
# Hex conversion
# ---------------------------------------------------------------------------


class TestHexToAnsi:
    """``#RRGGBB`` maps onto the 256-color cube."""

    def test_red_foreground(self) -> None:
        assert hex_to_ansi("#FF0000") == "\x1b[38;5;196m"

    def test_red_background(self) -> None:
        assert hex_to_ansi_bg("#FF0000") == "\x1b[48;5;196m"

    def test_black_is_first_cube_entry(self) -> None:
        assert hex_to_ansi("#000000") == "\x1b[38;5;16m"

    def test_white_is_last_cube_entry(self) -> None:
        assert hex_to_ansi("#ffffff") == "\x1b[38;5;231m"

    def test_green(self) -> None:
        # 16 + 6 * 5
        assert hex_to_ansi("#00FF00") == "\x1b[38;5;46m"

    @pytest.mark.parametrize("value", ["invalid", "#GG0000", "#FF00", "", "FF0000", "#FF00000"])
    def test_invalid_hex_raises(self, value: str) -> None:
        with pytest.raises(InvalidColorFormat) as exc_info:
            hex_to_ansi(value)
        assert exc_info.value.value == value
        assert repr(value) in str(exc_info.value)

    def test_invalid_background_raises(self) -> None:
        with pytest.raises(InvalidColorFormat, match="Invalid hex color"):
            hex_to_ansi_bg("#GG0000")

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            hex_to_ansi("nope")


# ---------------------------------------------------------------------------
# Token resolution
# ---------------------------------------------------------------------------


class TestResolveColor:
    """Named, raw, and hex tokens all resolve to escape sequences."""

    def test_named_token(self) -> None:
        assert resolve_color("red") == "\x1b[31m"

    def test_named_background_token(self) -> None:
        assert resolve_color("bg_green") == "\x1b[42m"

    def test_plain_name_as_background(self) -> None:
        assert resolve_color("red", background=True) == "\x1b[41m"
        assert resolve_color("white", background=True) == "\x1b[47m"

    def test_background_flag_keeps_decorations_and_bg_names(self) -> None:
        assert resolve_color("bold", background=True) == "\x1b[1m"
        assert resolve_color("bg_blue", background=True) == "\x1b[44m"

    def test_hex_respects_background_flag(self) -> None:
        assert resolve_color("#FF0000") == "\x1b[38;5;196m"
        assert resolve_color("#FF0000", background=True) == "\x1b[48;5;196m"

    def test_raw_sequence_passes_through(self) -> None:
        assert resolve_color(ANSI["cyan"]) == "\x1b[36m"
        assert resolve_color("\x1b[38;5;99m") == "\x1b[38;5;99m"

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(InvalidColorFormat):
            resolve_color("purple-ish")

    def test_non_string_raises(self) -> None:
        with pytest.raises(InvalidColorFormat):
            resolve_color(42)  # type: ignore[arg-type]


class TestAnsiTable:
    """The named vocabulary is fixed and read-only."""

    def test_core_entries(self) -> None:
        assert ANSI["reset"] == "\x1b[0m"
        assert ANSI["bold"] == "\x1b[1m"
        assert ANSI["cyan"] == "\x1b[36m"
        assert ANSI["red"] == "\x1b[31m"
        assert ANSI["bg_green"] == "\x1b[42m"

    def test_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            ANSI["red"] = "x"  # type: ignore[index]


# ---------------------------------------------------------------------------
# Applying styles
# ---------------------------------------------------------------------------


class TestApplyStyle:
    """Styles wrap text in sequences followed by a reset."""

    def test_no_style_returns_text_unchanged(self) -> None:
        assert apply_style("hi") == "hi"
        assert apply_style("hi", [], None) == "hi"

    def test_single_color(self) -> None:
        assert apply_style("hi", "red") == "\x1b[31mhi\x1b[0m"

    def test_token_list_concatenates_in_order(self) -> None:
        assert apply_style("hi", ["bold", "red"]) == "\x1b[1m\x1b[31mhi\x1b[0m"

    def test_foreground_before_background(self) -> None:
        codes = style_codes("#FFFFFF", "#000000")
        assert codes == "\x1b[38;5;231m\x1b[48;5;16m"

    def test_named_background_paints_background(self) -> None:
        assert style_codes(None, "red") == "\x1b[41m"
        assert apply_style("hi", "white", "red") == "\x1b[37m\x1b[41mhi\x1b[0m"

    def test_invalid_token_in_list_raises(self) -> None:
        with pytest.raises(InvalidColorFormat):
            apply_style("hi", ["bold", "#XYZXYZ"])

    def test_strip_ansi_recovers_text(self) -> None:
        styled = apply_style("hello", ["underline", "#00FF00"], "bg_blue")
        assert strip_ansi(styled) == "hello"
