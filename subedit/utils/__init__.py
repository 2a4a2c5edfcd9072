"""Utility helpers."""

from subedit.utils.color import RGB, format_ass_color, parse_ass_color
from subedit.utils.timecode import format_ass_time, format_srt_time, parse_ass_time

__all__ = [
    "RGB",
    "format_ass_color",
    "format_ass_time",
    "format_srt_time",
    "parse_ass_color",
    "parse_ass_time",
]
