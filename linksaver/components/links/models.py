"""
Links component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from linksaver.domain.entities import LinkItem
from linksaver.domain.failures import Failure

# --- Validation Errors ---


@dataclass(frozen=True)
class LinkValidationError:
    """Link validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ListLinksInput:
    uid: str


@dataclass(frozen=True)
class AddLinkInput:
    """Input for adding a link. An existing title is overwritten."""

    uid: str
    title: str
    url: str


@dataclass(frozen=True)
class RemoveLinkInput:
    uid: str
    item: LinkItem


@dataclass(frozen=True)
class SetFavoriteInput:
    uid: str
    item: LinkItem
    value: bool


@dataclass(frozen=True)
class FilterLinksInput:
    items: tuple[LinkItem, ...]
    query: str | None = None
    favorites_only: bool = False


# --- Output Models ---


@dataclass(frozen=True)
class LinkOperationOutput:
    """Output from a single-link operation."""

    link: LinkItem | None
    success: bool
    errors: tuple[LinkValidationError, ...] = ()
    failure: Failure | None = None


@dataclass(frozen=True)
class LinkListOutput:
    links: tuple[LinkItem, ...]
    success: bool = True
    failure: Failure | None = None


@dataclass(frozen=True)
class LinkCountOutput:
    count: int
    success: bool = True
    failure: Failure | None = None


@dataclass
class LinkCollectionState:
    """Last confirmed server view plus the local filter settings."""

    items: list[LinkItem] = field(default_factory=list)
    count: int = 0
    query: str = ""
    favorites_only: bool = False
