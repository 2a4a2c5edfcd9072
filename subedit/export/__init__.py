"""Subtitle export."""

from subedit.export.document_exporter import export_document, to_ass, to_srt

__all__ = ["export_document", "to_ass", "to_srt"]
