"""ASS document model: script metadata, styles and timed events.

All types are frozen dataclasses. Mutations return a new `AssDocument`
and never touch the original, so a holder can swap the current value
atomically and readers never observe a half-applied edit.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from uuid import uuid4

from subedit.utils.color import BLACK, RED, RGB, WHITE

DEFAULT_STYLE_NAME = "Default"


def new_event_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class AssStyle:
    name: str = DEFAULT_STYLE_NAME
    font_name: str = "Arial"
    font_size: int = 18
    primary_color: RGB = WHITE
    secondary_color: RGB = RED
    outline_color: RGB = BLACK
    shadow_color: RGB = BLACK
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikeout: bool = False
    scale_x: float = 100.0
    scale_y: float = 100.0
    spacing: float = 0.0
    angle: float = 0.0
    border_style: int = 1
    outline: float = 2.0
    shadow: float = 0.0
    alignment: int = 2  # numpad layout, 1-9
    margin_l: int = 10
    margin_r: int = 10
    margin_v: int = 10


@dataclass(frozen=True)
class AssEvent:
    """One `Dialogue:` line. `id` is session-local and never written to disk."""

    start: int  # ms
    end: int  # ms
    text: str
    id: str = field(default_factory=new_event_id)
    style: str = DEFAULT_STYLE_NAME
    name: str = ""
    margin_l: int = 0
    margin_r: int = 0
    margin_v: int = 0
    effect: str = ""
    layer: int = 0

    @property
    def duration_ms(self) -> int:
        # May be negative; end < start is tolerated.
        return self.end - self.start

    def is_active_at(self, time_ms: int) -> bool:
        return self.start <= time_ms <= self.end

    def shifted(self, offset_ms: int) -> AssEvent:
        return replace(
            self,
            start=max(0, self.start + offset_ms),
            end=max(0, self.end + offset_ms),
        )


@dataclass(frozen=True)
class AssDocument:
    title: str = "Untitled"
    original_script: str = "Unknown"
    translator: str = ""
    editor: str = ""
    timer: str = ""
    synch_point: str = ""
    script_type: str = "v4.00+"
    collisions: str = "Normal"
    play_res_x: int = 1920
    play_res_y: int = 1080
    timer_speed: float = 100.0
    wrap_style: int = 0
    scaled_border_and_shadow: str = "no"
    styles: tuple[AssStyle, ...] = (AssStyle(),)
    events: tuple[AssEvent, ...] = ()

    def __post_init__(self) -> None:
        styles = tuple(self.styles)
        if not styles:
            styles = (AssStyle(),)
        object.__setattr__(self, "styles", styles)
        object.__setattr__(self, "events", tuple(self.events))

    # -- queries -------------------------------------------------------

    def find_event(self, event_id: str) -> AssEvent | None:
        return next((e for e in self.events if e.id == event_id), None)

    def find_style(self, name: str) -> AssStyle | None:
        return next((s for s in self.styles if s.name == name), None)

    def active_events_at(self, time_ms: int) -> list[AssEvent]:
        return [e for e in self.events if e.is_active_at(time_ms)]

    def event_texts(self) -> list[str]:
        return [e.text for e in self.events]

    # -- mutations -----------------------------------------------------

    def add_event(self, event: AssEvent) -> AssDocument:
        return replace(self, events=(*self.events, event))

    def update_event(self, event_id: str, event: AssEvent) -> AssDocument:
        for i, current in enumerate(self.events):
            if current.id == event_id:
                events = list(self.events)
                events[i] = event
                return replace(self, events=tuple(events))
        return self

    def delete_event(self, event_id: str) -> AssDocument:
        events = tuple(e for e in self.events if e.id != event_id)
        if len(events) == len(self.events):
            return self
        return replace(self, events=events)

    def shift_timing(self, offset_ms: int) -> AssDocument:
        return replace(self, events=tuple(e.shifted(offset_ms) for e in self.events))

    def shift_events_timing(self, event_ids: Iterable[str], offset_ms: int) -> AssDocument:
        targets = set(event_ids)
        if not targets:
            return self
        return replace(
            self,
            events=tuple(e.shifted(offset_ms) if e.id in targets else e for e in self.events),
        )

    def add_style(self, style: AssStyle) -> AssDocument:
        return replace(self, styles=(*self.styles, style))

    def update_style(self, style: AssStyle) -> AssDocument:
        # Duplicate names are legal; every entry sharing the name is replaced.
        if self.find_style(style.name) is None:
            return self
        return replace(
            self,
            styles=tuple(style if s.name == style.name else s for s in self.styles),
        )
