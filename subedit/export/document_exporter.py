"""Render an `AssDocument` in a chosen output format."""

from __future__ import annotations

from subedit.export.formatters.ass import ASSFormatter
from subedit.export.formatters.srt import SRTFormatter
from subedit.models.document import AssDocument
from subedit.models.subtitle_types import SubtitleFormat


def export_document(document: AssDocument, fmt: SubtitleFormat) -> str:
    match fmt:
        case SubtitleFormat.ASS:
            return ASSFormatter().format(document)
        case SubtitleFormat.SRT:
            return SRTFormatter().format(document)
        case _:
            raise ValueError(f"Unknown subtitle format: {fmt}")


def to_ass(document: AssDocument) -> str:
    return export_document(document, SubtitleFormat.ASS)


def to_srt(document: AssDocument) -> str:
    return export_document(document, SubtitleFormat.SRT)
