"""Core data models for subedit."""

from subedit.models.document import (
    DEFAULT_STYLE_NAME,
    AssDocument,
    AssEvent,
    AssStyle,
    new_event_id,
)
from subedit.models.subtitle_types import SubtitleFormat

__all__ = [
    "AssDocument",
    "AssEvent",
    "AssStyle",
    "DEFAULT_STYLE_NAME",
    "SubtitleFormat",
    "new_event_id",
]
