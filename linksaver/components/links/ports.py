"""
Links component - Port interfaces.
"""

from __future__ import annotations

from typing import Any, Protocol


class LinkDocumentsPort(Protocol):
    """The slice of the document store the links component uses."""

    def set(
        self,
        collection: str,
        doc_id: str,
        data: dict[str, Any],
        *,
        merge: bool = False,
    ) -> None: ...

    def update(self, collection: str, doc_id: str, data: dict[str, Any]) -> None: ...

    def delete(self, collection: str, doc_id: str) -> None: ...

    def list(self, collection: str) -> list[tuple[str, dict[str, Any]]]: ...

    def count(self, collection: str) -> int: ...
