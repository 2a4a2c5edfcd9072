from __future__ import annotations

import pytest

from subedit.utils.color import RGB, WHITE, format_ass_color, parse_ass_color


def test_short_hex_left_pads_to_red() -> None:
    assert parse_ass_color("&H0000FF") == RGB(255, 0, 0)
    assert parse_ass_color("&HFF") == RGB(255, 0, 0)


def test_byte_order_is_bgr_and_alpha_is_discarded() -> None:
    assert parse_ass_color("&H00FF0000") == RGB(0, 0, 255)
    assert parse_ass_color("&H0000FF00") == RGB(0, 255, 0)
    assert parse_ass_color("&H80FF0000") == RGB(0, 0, 255)
    assert parse_ass_color("&H0000FFFF") == RGB(255, 255, 0)


def test_hex_and_prefix_are_case_insensitive() -> None:
    assert parse_ass_color("&h00ff00ff") == RGB(255, 0, 255)


def test_trailing_ampersand_is_accepted() -> None:
    assert parse_ass_color("&H000000FF&") == RGB(255, 0, 0)


@pytest.mark.parametrize("text", ["", None, "00FFFFFF", "#FF0000", "&H", "&HZZ", "&H1234567890"])
def test_unparseable_colors_fall_back_to_white(text: str | None) -> None:
    assert parse_ass_color(text) == WHITE


def test_format_ass_color_writes_zero_alpha_and_uppercase() -> None:
    assert format_ass_color(RGB(255, 0, 0)) == "&H000000FF"
    assert format_ass_color(RGB(0x12, 0xAB, 0xCD)) == "&H00CDAB12"


def test_color_round_trip_per_channel() -> None:
    for v in range(256):
        for color in (RGB(v, 0, 0), RGB(0, v, 0), RGB(0, 0, v), RGB(v, 255 - v, v // 2)):
            assert parse_ass_color(format_ass_color(color)) == color


def test_normalized_conversion() -> None:
    assert RGB.from_normalized(1.0, 0.0, 1.0) == RGB(255, 0, 255)
    assert RGB.from_normalized(2.0, -1.0, 0.0) == RGB(255, 0, 0)
    color = RGB(12, 34, 56)
    assert RGB.from_normalized(*color.normalized()) == color
