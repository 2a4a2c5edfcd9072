"""Subtitle parsers."""

from subedit.parsers.ass import AssParser, DroppedLine, ParseResult, parse_ass

__all__ = ["AssParser", "DroppedLine", "ParseResult", "parse_ass"]
