"""Filesystem I/O for subtitle documents.

File access runs in a worker thread; the parser and formatters only ever see
fully buffered text. OS and decoding failures surface as `DocumentIOError`.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from subedit.config import Settings, StorageSettings
from subedit.error_codes import ErrorCode
from subedit.exceptions import DocumentIOError
from subedit.export.document_exporter import export_document
from subedit.models.document import AssDocument
from subedit.models.subtitle_types import SubtitleFormat
from subedit.operations.documents import split_clipboard_lines
from subedit.parsers.ass import AssParser

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


def _read_error_code(exc: OSError) -> ErrorCode:
    if isinstance(exc, FileNotFoundError):
        return ErrorCode.FILE_NOT_FOUND
    if isinstance(exc, PermissionError):
        return ErrorCode.PERMISSION_DENIED
    return ErrorCode.UNKNOWN


class DocumentStore:
    def __init__(self, settings: Settings | None = None) -> None:
        self.storage: StorageSettings = (settings or Settings()).storage
        self._parser = AssParser()

    def _read_sync(self, path: Path) -> str:
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise DocumentIOError(path, str(exc), error_code=_read_error_code(exc)) from exc
        try:
            text = raw.decode(self.storage.encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise DocumentIOError(path, str(exc), error_code=ErrorCode.DECODE_FAILED) from exc
        if self.storage.strip_bom and text.startswith(_BOM):
            text = text[len(_BOM) :]
        return text

    def _write_sync(self, path: Path, text: str) -> None:
        if self.storage.newline != "\n":
            text = text.replace("\n", self.storage.newline)
        try:
            data = text.encode(self.storage.encoding)
        except (UnicodeEncodeError, LookupError) as exc:
            raise DocumentIOError(path, str(exc), error_code=ErrorCode.WRITE_FAILED) from exc
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except PermissionError as exc:
            raise DocumentIOError(path, str(exc), error_code=ErrorCode.PERMISSION_DENIED) from exc
        except OSError as exc:
            raise DocumentIOError(path, str(exc), error_code=ErrorCode.WRITE_FAILED) from exc

    async def read_text(self, path: str | Path) -> str:
        return await asyncio.to_thread(self._read_sync, Path(path))

    async def write_text(self, path: str | Path, text: str) -> str:
        p = Path(path)
        await asyncio.to_thread(self._write_sync, p, text)
        return str(p)

    async def load_document(self, path: str | Path) -> AssDocument:
        text = await self.read_text(path)
        result = self._parser.parse_with_report(text)
        if result.dropped_lines:
            logger.warning("%s: dropped %d malformed lines", path, len(result.dropped_lines))
        return result.document

    async def save_document(self, path: str | Path, document: AssDocument) -> str:
        out = await self.write_text(path, export_document(document, SubtitleFormat.ASS))
        logger.info("Saved ASS: %s", out)
        return out

    async def export_srt(self, path: str | Path, document: AssDocument) -> str:
        out = await self.write_text(path, export_document(document, SubtitleFormat.SRT))
        logger.info("Exported SRT: %s", out)
        return out

    async def load_text_lines(self, path: str | Path) -> list[str]:
        return split_clipboard_lines(await self.read_text(path))

    async def save_text_lines(self, path: str | Path, lines: list[str]) -> str:
        return await self.write_text(path, "\n".join(lines))
