"""Subtitle format identifiers."""

from __future__ import annotations

from enum import Enum


class SubtitleFormat(Enum):
    ASS = "ass"
    SRT = "srt"
