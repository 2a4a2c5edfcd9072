"""Canonical error codes surfaced to callers."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    UNKNOWN = "UNKNOWN"

    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    DECODE_FAILED = "DECODE_FAILED"
    WRITE_FAILED = "WRITE_FAILED"
