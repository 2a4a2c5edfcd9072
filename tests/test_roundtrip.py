from __future__ import annotations

from dataclasses import replace

from subedit.export.document_exporter import to_ass
from subedit.models.document import AssDocument
from subedit.parsers.ass import parse_ass


def _without_ids(doc: AssDocument) -> AssDocument:
    return replace(doc, events=tuple(replace(e, id="") for e in doc.events))


def test_parse_serialize_parse_is_identity_except_ids(sample_ass: str) -> None:
    doc = parse_ass(sample_ass)
    again = parse_ass(to_ass(doc))
    assert _without_ids(again) == _without_ids(doc)
    assert [e.id for e in again.events] != [e.id for e in doc.events]


def test_serialized_text_is_a_fixed_point(sample_ass: str) -> None:
    once = to_ass(parse_ass(sample_ass))
    assert to_ass(parse_ass(once)) == once


def test_round_trip_of_default_document() -> None:
    doc = parse_ass(to_ass(AssDocument()))
    assert doc == AssDocument()


def test_round_trip_keeps_event_order_not_time_order() -> None:
    text = "\n".join(
        [
            "[Events]",
            "Dialogue: 0,0:00:09.00,0:00:10.00,Default,,0,0,0,,late",
            "Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,early",
        ]
    )
    doc = parse_ass(to_ass(parse_ass(text)))
    assert [e.text for e in doc.events] == ["late", "early"]
