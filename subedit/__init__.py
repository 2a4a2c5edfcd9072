"""subedit: ASS subtitle document engine with SRT export."""

from subedit.export import export_document, to_ass, to_srt
from subedit.models import AssDocument, AssEvent, AssStyle, SubtitleFormat
from subedit.parsers import AssParser, parse_ass

__all__ = [
    "AssDocument",
    "AssEvent",
    "AssParser",
    "AssStyle",
    "SubtitleFormat",
    "export_document",
    "parse_ass",
    "to_ass",
    "to_srt",
]
