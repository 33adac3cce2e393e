from typing import Any, Protocol


class ProfileDocumentsPort(Protocol):
    """The slice of the document store used for profile documents."""

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None: ...

    def set(
        self,
        collection: str,
        doc_id: str,
        data: dict[str, Any],
        *,
        merge: bool = False,
    ) -> None: ...
