"""
LinkService - per-user saved links.

Links live in ``users/{uid}/links`` keyed by title, so adding a title that
already exists replaces that record.

Functional Core - pure business logic. Store errors propagate to the shell.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from linksaver.domain.entities import LinkItem, links_collection

from .models import LinkValidationError
from .ports import LinkDocumentsPort

logger = logging.getLogger(__name__)

# --- Pure Functions ---


def validate_link_input(title: str, url: str) -> list[LinkValidationError]:
    """Validate link data."""
    errors: list[LinkValidationError] = []

    if not title or not title.strip():
        errors.append(
            LinkValidationError(
                code="title_required",
                message="Title is required",
                field="title",
            )
        )

    if not url or not url.strip():
        errors.append(
            LinkValidationError(
                code="url_required",
                message="URL is required",
                field="url",
            )
        )

    return errors


def filter_links(
    items: Iterable[LinkItem],
    query: str | None = None,
    favorites_only: bool = False,
) -> list[LinkItem]:
    """
    Filter links locally.

    Case-insensitive substring match on title (empty query matches all),
    intersected with the favorite flag when favorites_only is set. Input
    order is kept.
    """
    needle = (query or "").casefold()
    result = []
    for item in items:
        if needle and needle not in item.title.casefold():
            continue
        if favorites_only and not item.is_favorite:
            continue
        result.append(item)
    return result


# --- Link Service ---


class LinkService:
    """
    Link service.

    Thin pass-through to the document store; every call is attempted once.
    """

    def __init__(self, documents: LinkDocumentsPort) -> None:
        self._documents = documents

    def list(self, uid: str) -> list[LinkItem]:
        docs = self._documents.list(links_collection(uid))
        return [LinkItem.from_document(data) for _, data in docs]

    def count(self, uid: str) -> int:
        return self._documents.count(links_collection(uid))

    def add(self, uid: str, title: str, url: str) -> LinkItem:
        """Write the link under its title, replacing any record with that title."""
        # title is the key exactly as typed
        link = LinkItem(title=title, url=url.strip(), is_favorite=False)
        self._documents.set(links_collection(uid), link.title, link.to_document())
        logger.info(f"Link saved: {link.title}")
        return link

    def remove(self, uid: str, item: LinkItem) -> None:
        self._documents.delete(links_collection(uid), item.title)
        logger.info(f"Link removed: {item.title}")

    def set_favorite(self, uid: str, item: LinkItem, value: bool) -> LinkItem:
        """
        Mark or unmark a link as favorite.

        Marking merge-upserts the whole record; unmarking updates only the
        flag and fails if the document is gone.
        """
        updated = item.model_copy(update={"is_favorite": value})
        collection = links_collection(uid)
        if value:
            self._documents.set(collection, item.title, updated.to_document(), merge=True)
            logger.info(f"Link marked favorite: {item.title}")
        else:
            self._documents.update(collection, item.title, {"isFavorite": False})
            logger.info(f"Link unmarked favorite: {item.title}")
        return updated
