"""
Links component - saved link collection with favorite flag and local search.
"""

from ._impl import LinkService, filter_links, validate_link_input
from .component import (
    LinkCollection,
    classify_store_error,
    run_add,
    run_count,
    run_filter,
    run_list,
    run_remove,
    run_set_favorite,
)
from .models import (
    AddLinkInput,
    FilterLinksInput,
    LinkCollectionState,
    LinkCountOutput,
    LinkListOutput,
    LinkOperationOutput,
    LinkValidationError,
    ListLinksInput,
    RemoveLinkInput,
    SetFavoriteInput,
)
from .ports import LinkDocumentsPort

__all__ = [
    # Entry points
    "run_list",
    "run_count",
    "run_add",
    "run_remove",
    "run_set_favorite",
    "run_filter",
    "classify_store_error",
    # Collection view
    "LinkCollection",
    "LinkCollectionState",
    # Input models
    "ListLinksInput",
    "AddLinkInput",
    "RemoveLinkInput",
    "SetFavoriteInput",
    "FilterLinksInput",
    # Output models
    "LinkOperationOutput",
    "LinkListOutput",
    "LinkCountOutput",
    "LinkValidationError",
    # Ports
    "LinkDocumentsPort",
    # Core
    "LinkService",
    "filter_links",
    "validate_link_input",
]
