"""RGB <-> ASS `&HAABBGGRR` color conversion."""

from __future__ import annotations

import string
from typing import NamedTuple


def _clamp_channel(value: int) -> int:
    return max(0, min(255, int(value)))


class RGB(NamedTuple):
    """An opaque 8-bit-per-channel color."""

    r: int
    g: int
    b: int

    @classmethod
    def from_normalized(cls, r: float, g: float, b: float) -> RGB:
        """Build from 0.0-1.0 channel values."""
        return cls(*(_clamp_channel(round(float(c) * 255)) for c in (r, g, b)))

    def normalized(self) -> tuple[float, float, float]:
        return (self.r / 255, self.g / 255, self.b / 255)


WHITE = RGB(255, 255, 255)
BLACK = RGB(0, 0, 0)
RED = RGB(255, 0, 0)

_HEX_DIGITS = frozenset(string.hexdigits)


def parse_ass_color(text: str | None) -> RGB:
    """Parse `&Hhhhhhhhh` (alpha discarded); anything unparseable is white."""
    raw = (text or "").strip()
    if raw[:2].upper() != "&H":
        return WHITE
    digits = raw[2:]
    if digits.endswith("&"):
        digits = digits[:-1]
    if not digits or len(digits) > 8 or not set(digits) <= _HEX_DIGITS:
        return WHITE
    value = int(digits, 16)
    return RGB(r=value & 0xFF, g=(value >> 8) & 0xFF, b=(value >> 16) & 0xFF)


def format_ass_color(color: RGB) -> str:
    r, g, b = (_clamp_channel(c) for c in color)
    return f"&H00{b:02X}{g:02X}{r:02X}"
