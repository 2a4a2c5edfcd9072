"""Best-effort field parsing with silent fallback."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")


def parse_or_default(value: str | None, parser: Callable[[str], T], default: T) -> T:
    """Apply `parser` to a stripped field, returning `default` on any parse failure."""
    raw = (value or "").strip()
    # int() and float() accept "1_000"; ASS fields never do
    if not raw or "_" in raw:
        return default
    try:
        return parser(raw)
    except (TypeError, ValueError, OverflowError):
        return default


def parse_int(value: str | None, default: int) -> int:
    return parse_or_default(value, int, default)


def parse_float(value: str | None, default: float) -> float:
    out = parse_or_default(value, float, default)
    # nan/inf would never survive a serialize/parse round trip
    if out != out or out in (float("inf"), float("-inf")):
        return default
    return out


def parse_flag(value: str | None) -> bool:
    """ASS booleans are true only for the literal `-1`."""
    return (value or "").strip() == "-1"


def format_flag(value: bool) -> str:
    return "-1" if value else "0"
