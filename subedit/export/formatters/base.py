"""Subtitle formatter base."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from subedit.models.document import AssDocument

_OVERRIDE_BLOCK_RE = re.compile(r"\{[^}]*\}")


def strip_ass_markup(text: str) -> str:
    """Drop `{...}` override blocks and turn `\\N`/`\\n` escapes into line breaks."""
    return _OVERRIDE_BLOCK_RE.sub("", text).replace("\\N", "\n").replace("\\n", "\n")


class SubtitleFormatter(ABC):
    @abstractmethod
    def format(self, document: AssDocument) -> str:
        raise NotImplementedError
