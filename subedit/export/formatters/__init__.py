"""Subtitle export formatters."""

from subedit.export.formatters.ass import ASSFormatter
from subedit.export.formatters.base import SubtitleFormatter, strip_ass_markup
from subedit.export.formatters.srt import SRTFormatter

__all__ = ["ASSFormatter", "SRTFormatter", "SubtitleFormatter", "strip_ass_markup"]
