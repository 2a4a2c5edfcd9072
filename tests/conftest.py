from __future__ import annotations

import pytest

from subedit.config import Settings


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(log_dir=str(tmp_path / "logs"))


SAMPLE_ASS = """[Script Info]
; Script generated by hand
Title: Demo Episode
Original Script: Someone
Translator: T
Editor: E
Timer: Tim
Synch Point: 0
Script Type: v4.00+
Collisions: Normal
PlayResX: 1280
PlayResY: 720
Timer: 100.0
WrapStyle: 1
ScaledBorderAndShadow: yes

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding
Style: Default,Arial,20,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,2,0,2,10,10,10,1
Style: Sign,Verdana,32,&H0000FFFF,&H000000FF,&H00202020,&H00000000,-1,-1,0,0,95.5,100,1.5,0,3,1.5,1,8,20,20,30,1

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:01.00,0:00:03.50,Default,,0,0,0,,Hello {\\i1}world{\\i0}
Dialogue: 1,0:00:04.20,0:00:06.00,Sign,Narrator,5,5,5,,Well, commas, stay\\Nin the text
Comment: 0,0:00:07.00,0:00:08.00,Default,,0,0,0,,ignored comment
"""


@pytest.fixture()
def sample_ass() -> str:
    return SAMPLE_ASS
