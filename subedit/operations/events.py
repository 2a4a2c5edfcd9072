"""Event mutations. Every function returns a new document; a missing id is a no-op."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace

from subedit.config import DocumentDefaults
from subedit.models.document import DEFAULT_STYLE_NAME, AssDocument, AssEvent


def new_event_at(
    start_ms: int,
    *,
    text: str | None = None,
    style: str = DEFAULT_STYLE_NAME,
    duration_ms: int | None = None,
    defaults: DocumentDefaults | None = None,
) -> AssEvent:
    defaults = defaults or DocumentDefaults()
    start = max(0, int(start_ms))
    duration = defaults.new_event_duration_ms if duration_ms is None else int(duration_ms)
    return AssEvent(
        start=start,
        end=start + duration,
        text=defaults.new_event_text if text is None else text,
        style=style,
    )


def add_event(document: AssDocument, event: AssEvent) -> AssDocument:
    return document.add_event(event)


def update_event(document: AssDocument, event_id: str, event: AssEvent) -> AssDocument:
    return document.update_event(event_id, event)


def delete_event(document: AssDocument, event_id: str) -> AssDocument:
    return document.delete_event(event_id)


def shift_timing(document: AssDocument, offset_ms: int) -> AssDocument:
    """Shift every event; bounds that would go negative clamp to 0."""
    return document.shift_timing(offset_ms)


def shift_event_timing(document: AssDocument, event_id: str, offset_ms: int) -> AssDocument:
    return document.shift_events_timing([event_id], offset_ms)


def shift_events_timing(
    document: AssDocument, event_ids: Iterable[str], offset_ms: int
) -> AssDocument:
    return document.shift_events_timing(event_ids, offset_ms)


def event_texts(document: AssDocument) -> list[str]:
    return document.event_texts()


def apply_texts(document: AssDocument, texts: Sequence[str]) -> AssDocument:
    """Replace event bodies by position (e.g. with translations).

    Extra texts are ignored; an empty text keeps the existing body.
    """
    events = list(document.events)
    changed = False
    for i, text in enumerate(texts[: len(events)]):
        if text:
            events[i] = replace(events[i], text=text)
            changed = True
    if not changed:
        return document
    return replace(document, events=tuple(events))
