"""
Links component - saved link collection.

Shell Layer - catches store errors, classifies them and keeps the local
view consistent with what the store has confirmed.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from linksaver.domain.entities import LinkItem
from linksaver.domain.failures import Failure, FailureKind
from linksaver.ports.documents import DocumentNotFoundError

from ._impl import LinkService, filter_links, validate_link_input
from .models import (
    AddLinkInput,
    FilterLinksInput,
    LinkCollectionState,
    LinkCountOutput,
    LinkListOutput,
    LinkOperationOutput,
    ListLinksInput,
    RemoveLinkInput,
    SetFavoriteInput,
)

logger = logging.getLogger(__name__)


def classify_store_error(err: Exception) -> Failure:
    if isinstance(err, DocumentNotFoundError):
        return Failure(kind=FailureKind.NOT_FOUND, message="That link no longer exists.")
    return Failure.transport()


# --- Shell Layer Functions ---


def run_list(input_data: ListLinksInput, service: LinkService) -> LinkListOutput:
    """List the user's links in storage order."""
    try:
        links = service.list(input_data.uid)
    except Exception as err:
        logger.error(f"Failed to list links: {err}")
        return LinkListOutput(links=(), success=False, failure=classify_store_error(err))
    return LinkListOutput(links=tuple(links))


def run_count(input_data: ListLinksInput, service: LinkService) -> LinkCountOutput:
    try:
        count = service.count(input_data.uid)
    except Exception as err:
        logger.error(f"Failed to count links: {err}")
        return LinkCountOutput(count=0, success=False, failure=classify_store_error(err))
    return LinkCountOutput(count=count)


def run_add(input_data: AddLinkInput, service: LinkService) -> LinkOperationOutput:
    """Add a link. An existing title is overwritten and loses its favorite flag."""
    errors = validate_link_input(input_data.title, input_data.url)
    if errors:
        return LinkOperationOutput(
            link=None,
            success=False,
            errors=tuple(errors),
            failure=Failure.validation(errors[0].code, errors[0].message),
        )

    try:
        link = service.add(input_data.uid, input_data.title, input_data.url)
    except Exception as err:
        logger.error(f"Failed to add link: {err}")
        return LinkOperationOutput(link=None, success=False, failure=classify_store_error(err))

    return LinkOperationOutput(link=link, success=True)


def run_remove(input_data: RemoveLinkInput, service: LinkService) -> LinkOperationOutput:
    try:
        service.remove(input_data.uid, input_data.item)
    except Exception as err:
        logger.error(f"Failed to remove link: {err}")
        return LinkOperationOutput(
            link=input_data.item, success=False, failure=classify_store_error(err)
        )

    return LinkOperationOutput(link=input_data.item, success=True)


def run_set_favorite(input_data: SetFavoriteInput, service: LinkService) -> LinkOperationOutput:
    try:
        link = service.set_favorite(input_data.uid, input_data.item, input_data.value)
    except Exception as err:
        logger.error(f"Failed to update favorite: {err}")
        return LinkOperationOutput(
            link=input_data.item, success=False, failure=classify_store_error(err)
        )

    return LinkOperationOutput(link=link, success=True)


def run_filter(input_data: FilterLinksInput) -> list[LinkItem]:
    return filter_links(input_data.items, input_data.query, input_data.favorites_only)


# --- Collection View ---


class LinkCollection:
    """
    A user's links as last confirmed by the store.

    The held list only changes after a remote call succeeds; a failed call
    leaves it as it was.
    """

    def __init__(self, service: LinkService, uid: str) -> None:
        self.service = service
        self.uid = uid
        self.state = LinkCollectionState()

    @property
    def items(self) -> list[LinkItem]:
        return list(self.state.items)

    @property
    def count(self) -> int:
        return self.state.count

    def refresh(self) -> Failure | None:
        """Re-list and re-count. Returns the first failure, if any."""
        listed = run_list(ListLinksInput(uid=self.uid), self.service)
        if listed.success:
            self.state.items = list(listed.links)

        counted = run_count(ListLinksInput(uid=self.uid), self.service)
        if counted.success:
            self.state.count = counted.count

        return listed.failure or counted.failure

    def add(self, title: str, url: str) -> LinkOperationOutput:
        """Add, then re-list. A failed re-list is attached to the successful result."""
        result = run_add(AddLinkInput(uid=self.uid, title=title, url=url), self.service)
        if result.success:
            stale = self.refresh()
            if stale is not None:
                result = replace(result, failure=stale)
        return result

    def remove(self, item: LinkItem) -> LinkOperationOutput:
        result = run_remove(RemoveLinkInput(uid=self.uid, item=item), self.service)
        if result.success:
            self.state.items = [i for i in self.state.items if i.title != item.title]
            counted = run_count(ListLinksInput(uid=self.uid), self.service)
            if counted.success:
                self.state.count = counted.count
        return result

    def set_favorite(self, item: LinkItem, value: bool) -> LinkOperationOutput:
        result = run_set_favorite(
            SetFavoriteInput(uid=self.uid, item=item, value=value), self.service
        )
        if result.success and result.link is not None:
            updated = result.link
            self.state.items = [
                updated if i.title == item.title else i for i in self.state.items
            ]
        return result

    def toggle_favorite(self, item: LinkItem) -> LinkOperationOutput:
        return self.set_favorite(item, not item.is_favorite)

    def set_query(self, query: str | None) -> None:
        self.state.query = query or ""

    def toggle_favorites_only(self) -> bool:
        self.state.favorites_only = not self.state.favorites_only
        return self.state.favorites_only

    def visible(self) -> list[LinkItem]:
        return run_filter(
            FilterLinksInput(
                items=tuple(self.state.items),
                query=self.state.query,
                favorites_only=self.state.favorites_only,
            )
        )
