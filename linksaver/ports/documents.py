"""
Document store port.

Schema-flexible documents grouped into named collections and addressed by
key. Collections nest by path, e.g. ``users/{uid}/links``.
"""

from __future__ import annotations

from typing import Any, Protocol


class DocumentStoreError(Exception):
    """Base class for document store failures (transport, auth, I/O)."""


class DocumentNotFoundError(DocumentStoreError):
    """Raised when a partial update targets a document that does not exist."""

    def __init__(self, collection: str, doc_id: str) -> None:
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"Document not found: {collection}/{doc_id}")


class DocumentStorePort(Protocol):
    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        """Return the document fields, or None if absent."""
        ...

    def set(
        self,
        collection: str,
        doc_id: str,
        data: dict[str, Any],
        *,
        merge: bool = False,
    ) -> None:
        """
        Write a document.

        Without merge the document is replaced wholesale. With merge the
        given fields are upserted and any other existing fields are kept.
        """
        ...

    def update(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        """Update the given fields. Raises DocumentNotFoundError if absent."""
        ...

    def delete(self, collection: str, doc_id: str) -> None:
        """Delete a document. Deleting an absent document is a no-op."""
        ...

    def list(self, collection: str) -> list[tuple[str, dict[str, Any]]]:
        """Return (doc_id, fields) pairs in storage order."""
        ...

    def count(self, collection: str) -> int: ...
