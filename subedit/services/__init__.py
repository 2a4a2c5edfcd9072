"""I/O services."""

from subedit.services.document_store import DocumentStore

__all__ = ["DocumentStore"]
