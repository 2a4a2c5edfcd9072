"""Millisecond <-> ASS/SRT timestamp conversion."""

from __future__ import annotations

import re

_ASS_TIME_RE = re.compile(r"(\d+):(\d+):(\d+)\.(\d+)")

_MS_PER_HOUR = 3_600_000
_MS_PER_MINUTE = 60_000


def parse_ass_time(text: str | None) -> int:
    """Parse `H:MM:SS.CC` into milliseconds; malformed input yields 0."""
    match = _ASS_TIME_RE.fullmatch((text or "").strip())
    if match is None:
        return 0
    h, m, s, cc = (int(part) for part in match.groups())
    return (h * 3600 + m * 60 + s) * 1000 + cc * 10


def _split_ms(ms: int) -> tuple[int, int, int, int]:
    total = max(0, int(ms))
    h, rest = divmod(total, _MS_PER_HOUR)
    m, rest = divmod(rest, _MS_PER_MINUTE)
    s, millis = divmod(rest, 1000)
    return h, m, s, millis


def format_ass_time(ms: int) -> str:
    # Centisecond precision: the sub-10ms remainder is truncated.
    h, m, s, millis = _split_ms(ms)
    return f"{h:d}:{m:02d}:{s:02d}.{millis // 10:02d}"


def format_srt_time(ms: int) -> str:
    h, m, s, millis = _split_ms(ms)
    return f"{h:02d}:{m:02d}:{s:02d},{millis:03d}"
