"""SRT subtitle formatter (events only; styles and metadata are ignored)."""

from __future__ import annotations

from subedit.export.formatters.base import SubtitleFormatter, strip_ass_markup
from subedit.models.document import AssDocument
from subedit.utils.timecode import format_srt_time


class SRTFormatter(SubtitleFormatter):
    def format(self, document: AssDocument) -> str:
        lines: list[str] = []
        for index, event in enumerate(document.events, start=1):
            lines.append(str(index))
            lines.append(f"{format_srt_time(event.start)} --> {format_srt_time(event.end)}")
            lines.append(strip_ass_markup(event.text))
            lines.append("")
        if not lines:
            return ""
        return "\n".join(lines) + "\n"
