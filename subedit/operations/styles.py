"""Style mutations keyed on style name."""

from __future__ import annotations

from subedit.models.document import AssDocument, AssStyle


def add_style(document: AssDocument, style: AssStyle) -> AssDocument:
    return document.add_style(style)


def update_style(document: AssDocument, style: AssStyle) -> AssDocument:
    """Replace every style named `style.name`; unknown names are a no-op."""
    return document.update_style(style)


def find_style(document: AssDocument, name: str) -> AssStyle | None:
    return document.find_style(name)
