from __future__ import annotations

import math

from subedit.utils.parsing import format_flag, parse_flag, parse_float, parse_int, parse_or_default


def test_parse_or_default_strips_and_falls_back() -> None:
    assert parse_or_default(" 42 ", int, 0) == 42
    assert parse_or_default("4x", int, 7) == 7
    assert parse_or_default("", int, 7) == 7
    assert parse_or_default(None, int, 7) == 7


def test_parse_int_rejects_floats() -> None:
    assert parse_int("18.5", 18) == 18
    assert parse_int("-3", 0) == -3


def test_underscore_digit_separators_fall_back() -> None:
    assert parse_int("1_000", 18) == 18
    assert parse_float("1_0.5", 100.0) == 100.0
    assert parse_or_default("2_0", int, 7) == 7


def test_parse_float_rejects_non_finite() -> None:
    assert parse_float("95.5", 100.0) == 95.5
    assert parse_float("nan", 100.0) == 100.0
    assert parse_float("inf", 2.0) == 2.0
    assert not math.isnan(parse_float("NaN", 0.0))


def test_flags_use_minus_one() -> None:
    assert parse_flag("-1") is True
    assert parse_flag(" -1 ") is True
    assert parse_flag("1") is False
    assert parse_flag("0") is False
    assert format_flag(True) == "-1"
    assert format_flag(False) == "0"
