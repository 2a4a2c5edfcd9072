"""ASS script formatter.

Field order in `Style:` and `Dialogue:` lines mirrors `subedit.parsers.ass`
so that parse -> format -> parse is stable.
"""

from __future__ import annotations

from subedit.export.formatters.base import SubtitleFormatter
from subedit.models.document import AssDocument, AssEvent, AssStyle
from subedit.utils.color import format_ass_color
from subedit.utils.parsing import format_flag
from subedit.utils.timecode import format_ass_time

STYLE_FORMAT = (
    "Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, "
    "Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, "
    "Shadow, Alignment, MarginL, MarginR, MarginV, Encoding"
)
EVENT_FORMAT = "Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text"

# Encoding column; not modelled, always written as 1.
STYLE_ENCODING = 1


def format_style_line(style: AssStyle) -> str:
    fields = [
        style.name,
        style.font_name,
        style.font_size,
        format_ass_color(style.primary_color),
        format_ass_color(style.secondary_color),
        format_ass_color(style.outline_color),
        format_ass_color(style.shadow_color),
        format_flag(style.bold),
        format_flag(style.italic),
        format_flag(style.underline),
        format_flag(style.strikeout),
        style.scale_x,
        style.scale_y,
        style.spacing,
        style.angle,
        style.border_style,
        style.outline,
        style.shadow,
        style.alignment,
        style.margin_l,
        style.margin_r,
        style.margin_v,
        STYLE_ENCODING,
    ]
    return "Style: " + ",".join(str(f) for f in fields)


def format_dialogue_line(event: AssEvent) -> str:
    return (
        f"Dialogue: {event.layer},"
        f"{format_ass_time(event.start)},"
        f"{format_ass_time(event.end)},"
        f"{event.style},{event.name},"
        f"{event.margin_l},{event.margin_r},{event.margin_v},"
        f"{event.effect},{event.text}"
    )


class ASSFormatter(SubtitleFormatter):
    def format(self, document: AssDocument) -> str:
        styles = document.styles or (AssStyle(),)
        lines = [
            "[Script Info]",
            f"Title: {document.title}",
            f"Original Script: {document.original_script}",
            f"Translator: {document.translator}",
            f"Editor: {document.editor}",
            f"Timer: {document.timer}",
            f"Synch Point: {document.synch_point}",
            f"Script Type: {document.script_type}",
            f"Collisions: {document.collisions}",
            f"PlayResX: {document.play_res_x}",
            f"PlayResY: {document.play_res_y}",
            # Timer name above, timer speed here: two distinct fields.
            f"Timer: {document.timer_speed}",
            f"WrapStyle: {document.wrap_style}",
            f"ScaledBorderAndShadow: {document.scaled_border_and_shadow}",
            "",
            "[V4+ Styles]",
            STYLE_FORMAT,
            *(format_style_line(s) for s in styles),
            "",
            "[Events]",
            EVENT_FORMAT,
            *(format_dialogue_line(e) for e in document.events),
        ]
        return "\n".join(lines) + "\n"
