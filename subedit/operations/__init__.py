"""Mutation API over `AssDocument` values."""

from subedit.operations.documents import new_document, split_clipboard_lines
from subedit.operations.events import (
    add_event,
    apply_texts,
    delete_event,
    event_texts,
    new_event_at,
    shift_event_timing,
    shift_events_timing,
    shift_timing,
    update_event,
)
from subedit.operations.styles import add_style, find_style, update_style

__all__ = [
    "add_event",
    "add_style",
    "apply_texts",
    "delete_event",
    "event_texts",
    "find_style",
    "new_document",
    "new_event_at",
    "shift_event_timing",
    "shift_events_timing",
    "shift_timing",
    "split_clipboard_lines",
    "update_event",
    "update_style",
]
