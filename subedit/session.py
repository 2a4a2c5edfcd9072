"""Single-writer holder for the document being edited.

The engine itself is pure; `EditorSession` is the piece a UI or batch tool
keeps around. It owns the current `AssDocument` value, the selection, and a
list of listeners notified after every change.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from subedit.config import Settings
from subedit.models.document import DEFAULT_STYLE_NAME, AssDocument, AssEvent, AssStyle
from subedit.operations.documents import new_document
from subedit.operations.events import new_event_at

logger = logging.getLogger(__name__)

DocumentListener = Callable[[AssDocument], None]


class EditorSession:
    def __init__(
        self,
        document: AssDocument | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self._lock = threading.Lock()
        self._document = document or new_document(defaults=self.settings.document)
        self._listeners: list[DocumentListener] = []
        self.selected_event_id: str | None = None
        self.selected_style_name: str | None = None

    @property
    def document(self) -> AssDocument:
        return self._document

    def subscribe(self, listener: DocumentListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _publish(self, document: AssDocument) -> None:
        for listener in list(self._listeners):
            try:
                listener(document)
            except Exception:
                logger.exception("Document listener failed")

    def replace(self, document: AssDocument) -> AssDocument:
        """Swap in a whole new document (e.g. after loading a file)."""
        with self._lock:
            self._document = document
            if self.selected_event_id and document.find_event(self.selected_event_id) is None:
                self.selected_event_id = None
        self._publish(document)
        return document

    def apply(self, op: Callable[..., AssDocument], *args: Any, **kwargs: Any) -> AssDocument:
        """Run `op(current, *args, **kwargs)` and store its result."""
        with self._lock:
            before = self._document
            after = op(before, *args, **kwargs)
            self._document = after
            if self.selected_event_id and after.find_event(self.selected_event_id) is None:
                self.selected_event_id = None
        if after is not before:
            self._publish(after)
        return after

    # -- selection -----------------------------------------------------

    def select_event(self, event_id: str | None) -> None:
        with self._lock:
            self.selected_event_id = event_id

    def selected_event(self) -> AssEvent | None:
        if self.selected_event_id is None:
            return None
        return self._document.find_event(self.selected_event_id)

    def select_style(self, name: str | None) -> None:
        with self._lock:
            self.selected_style_name = name

    def selected_style(self) -> AssStyle | None:
        if self.selected_style_name is None:
            return None
        return self._document.find_style(self.selected_style_name)

    # -- editing shortcuts ---------------------------------------------

    def add_event_at(
        self,
        time_ms: int,
        text: str | None = None,
        style: str = DEFAULT_STYLE_NAME,
    ) -> AssEvent:
        event = new_event_at(time_ms, text=text, style=style, defaults=self.settings.document)
        with self._lock:
            document = self._document.add_event(event)
            self._document = document
            self.selected_event_id = event.id
        self._publish(document)
        return event

    def shift_selected(self, offset_ms: int) -> AssDocument:
        if self.selected_event_id is None:
            return self._document
        return self.apply(AssDocument.shift_events_timing, [self.selected_event_id], offset_ms)

    def active_events(self, time_ms: int) -> list[AssEvent]:
        return self._document.active_events_at(time_ms)
