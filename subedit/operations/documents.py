"""Document-level helpers."""

from __future__ import annotations

from subedit.config import DocumentDefaults
from subedit.models.document import AssDocument, AssStyle


def new_document(
    title: str | None = None,
    *,
    defaults: DocumentDefaults | None = None,
) -> AssDocument:
    """A fresh document with the default style and no events."""
    defaults = defaults or DocumentDefaults()
    return AssDocument(
        title=defaults.title if title is None else title,
        original_script=defaults.original_script,
        play_res_x=defaults.play_res_x,
        play_res_y=defaults.play_res_y,
        styles=(AssStyle(),),
        events=(),
    )


def split_clipboard_lines(text: str) -> list[str]:
    """Non-blank lines of a pasted or loaded text block."""
    return [line for line in (text or "").splitlines() if line.strip()]
