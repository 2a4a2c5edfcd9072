"""subedit exception hierarchy."""

from __future__ import annotations

from pathlib import Path

from subedit.error_codes import ErrorCode


class SubEditError(Exception):
    """Base error for subedit."""


class ConfigurationError(SubEditError):
    """Raised when configuration or inputs are invalid."""


class DocumentIOError(SubEditError):
    """Raised when a subtitle file cannot be read or written."""

    def __init__(
        self,
        path: str | Path,
        message: str,
        *,
        error_code: ErrorCode | str | None = None,
    ) -> None:
        super().__init__(f"{path}: {message}")
        self.path = str(path)
        self.message = message
        self.error_code = error_code
