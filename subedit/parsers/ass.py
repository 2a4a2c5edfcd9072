"""Line-oriented ASS script parser.

The parser is deliberately forgiving: a malformed field falls back to its
default, a structurally incomplete `Style:`/`Dialogue:` line is dropped, and
anything it does not recognise is ignored. It never raises on bad input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from subedit.models.document import AssDocument, AssEvent, AssStyle, new_event_id
from subedit.utils.color import parse_ass_color
from subedit.utils.parsing import parse_flag, parse_float, parse_int, parse_or_default
from subedit.utils.timecode import parse_ass_time

logger = logging.getLogger(__name__)

SCRIPT_INFO = "[Script Info]"
STYLES = "[V4+ Styles]"
EVENTS = "[Events]"

STYLE_FIELD_COUNT = 22
DIALOGUE_FIELD_COUNT = 10

_DEFAULTS = AssDocument()
_DEFAULT_STYLE = AssStyle()


@dataclass(frozen=True)
class DroppedLine:
    line_no: int
    section: str
    reason: str


@dataclass
class ParseResult:
    document: AssDocument
    dropped_lines: list[DroppedLine] = field(default_factory=list)


def _value_after(line: str, prefix: str) -> str:
    return line[len(prefix) :].strip()


def parse_style_line(line: str) -> AssStyle | None:
    parts = [p.strip() for p in line[len("Style:") :].split(",")]
    if len(parts) < STYLE_FIELD_COUNT:
        return None
    d = _DEFAULT_STYLE
    return AssStyle(
        name=parts[0],
        font_name=parts[1],
        font_size=parse_int(parts[2], d.font_size),
        primary_color=parse_ass_color(parts[3]),
        secondary_color=parse_ass_color(parts[4]),
        outline_color=parse_ass_color(parts[5]),
        shadow_color=parse_ass_color(parts[6]),
        bold=parse_flag(parts[7]),
        italic=parse_flag(parts[8]),
        underline=parse_flag(parts[9]),
        strikeout=parse_flag(parts[10]),
        scale_x=parse_float(parts[11], d.scale_x),
        scale_y=parse_float(parts[12], d.scale_y),
        spacing=parse_float(parts[13], d.spacing),
        angle=parse_float(parts[14], d.angle),
        border_style=parse_int(parts[15], d.border_style),
        outline=parse_float(parts[16], d.outline),
        shadow=parse_float(parts[17], d.shadow),
        alignment=parse_int(parts[18], d.alignment),
        margin_l=parse_int(parts[19], d.margin_l),
        margin_r=parse_int(parts[20], d.margin_r),
        margin_v=parse_int(parts[21], d.margin_v),
    )


def parse_dialogue_line(line: str) -> AssEvent | None:
    # maxsplit keeps commas inside the text body intact
    parts = line[len("Dialogue:") :].split(",", DIALOGUE_FIELD_COUNT - 1)
    if len(parts) < DIALOGUE_FIELD_COUNT:
        return None
    return AssEvent(
        id=new_event_id(),
        layer=parse_int(parts[0], 0),
        start=parse_ass_time(parts[1]),
        end=parse_ass_time(parts[2]),
        style=parts[3].strip(),
        name=parts[4].strip(),
        margin_l=parse_int(parts[5], 0),
        margin_r=parse_int(parts[6], 0),
        margin_v=parse_int(parts[7], 0),
        effect=parts[8].strip(),
        text=parts[9],
    )


class AssParser:
    """Reconstructs an `AssDocument` from ASS text."""

    def parse(self, text: str) -> AssDocument:
        return self.parse_with_report(text).document

    def parse_with_report(self, text: str) -> ParseResult:
        section = ""
        info: dict[str, str] = {}
        timer_values: list[str] = []
        styles: list[AssStyle] = []
        events: list[AssEvent] = []
        dropped: list[DroppedLine] = []

        for line_no, raw in enumerate((text or "").splitlines(), start=1):
            line = raw.strip()
            if line.startswith("[") and line.endswith("]"):
                section = line
                continue

            if section == SCRIPT_INFO:
                self._read_info_line(line, info, timer_values)
            elif section == STYLES and line.startswith("Style:"):
                style = parse_style_line(line)
                if style is None:
                    dropped.append(DroppedLine(line_no, section, "too few style fields"))
                    logger.debug("Dropping style line %d: too few fields", line_no)
                    continue
                styles.append(style)
            elif section == EVENTS and line.startswith("Dialogue:"):
                event = parse_dialogue_line(line)
                if event is None:
                    dropped.append(DroppedLine(line_no, section, "too few dialogue fields"))
                    logger.debug("Dropping dialogue line %d: too few fields", line_no)
                    continue
                events.append(event)

        timer, timer_speed = self._resolve_timer(timer_values)
        document = AssDocument(
            title=info.get("Title", _DEFAULTS.title),
            original_script=info.get("Original Script", _DEFAULTS.original_script),
            translator=info.get("Translator", _DEFAULTS.translator),
            editor=info.get("Editor", _DEFAULTS.editor),
            timer=timer,
            synch_point=info.get("Synch Point", _DEFAULTS.synch_point),
            script_type=info.get("Script Type", _DEFAULTS.script_type),
            collisions=info.get("Collisions", _DEFAULTS.collisions),
            play_res_x=parse_int(info.get("PlayResX"), _DEFAULTS.play_res_x),
            play_res_y=parse_int(info.get("PlayResY"), _DEFAULTS.play_res_y),
            timer_speed=timer_speed,
            wrap_style=parse_int(info.get("WrapStyle"), _DEFAULTS.wrap_style),
            scaled_border_and_shadow=info.get(
                "ScaledBorderAndShadow", _DEFAULTS.scaled_border_and_shadow
            ),
            styles=tuple(styles),
            events=tuple(events),
        )
        logger.info(
            "Parsed ASS script: %d styles, %d events, %d lines dropped",
            len(styles),
            len(events),
            len(dropped),
        )
        return ParseResult(document=document, dropped_lines=dropped)

    @staticmethod
    def _read_info_line(line: str, info: dict[str, str], timer_values: list[str]) -> None:
        if not line or line.startswith(";") or ":" not in line:
            return
        key, _, value = line.partition(":")
        key = key.strip()
        value = value.strip()
        if key in ("Timer", "Timing"):
            timer_values.append(value)
        elif key == "ScriptType":
            info["Script Type"] = value
        else:
            info[key] = value

    @staticmethod
    def _resolve_timer(values: list[str]) -> tuple[str, float]:
        """Split the `Timer:` lines into (timer name, timer speed).

        Two lines mean name then speed. A lone value is the speed when it is
        numeric, otherwise the name.
        """
        if not values:
            return _DEFAULTS.timer, _DEFAULTS.timer_speed
        if len(values) == 1:
            speed = parse_or_default(values[0], float, None)
            if speed is not None:
                return _DEFAULTS.timer, speed
            return values[0], _DEFAULTS.timer_speed
        return values[0], parse_float(values[1], _DEFAULTS.timer_speed)


def parse_ass(text: str) -> AssDocument:
    return AssParser().parse(text)
