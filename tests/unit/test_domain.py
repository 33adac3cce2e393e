import pytest
from pydantic import ValidationError

from linksaver.domain.entities import LinkItem, UserProfile, links_collection
from linksaver.domain.failures import GENERIC_MESSAGE, Failure, FailureKind


def test_links_collection_path():
    assert links_collection("abc") == "users/abc/links"


def test_link_item_document_fields():
    item = LinkItem(title="A", url="https://a", is_favorite=True)
    assert item.to_document() == {"title": "A", "url": "https://a", "isFavorite": True}


def test_link_item_from_document_defaults_favorite():
    item = LinkItem.from_document({"title": "A", "url": "https://a"})
    assert item.is_favorite is False


def test_link_item_is_immutable():
    item = LinkItem(title="A", url="https://a")
    with pytest.raises(ValidationError):
        item.title = "B"


def test_user_profile_from_document():
    profile = UserProfile.from_document("u1", {"email": "a@x.com", "avatarPath": "/p.jpg"})
    assert profile.email == "a@x.com"
    assert profile.avatar_path == "/p.jpg"

    empty = UserProfile.from_document("u1", {})
    assert empty.email is None
    assert empty.avatar_path is None


def test_failure_constructors():
    transport = Failure.transport()
    assert transport.kind == FailureKind.TRANSPORT
    assert transport.message == GENERIC_MESSAGE

    invalid = Failure.validation("title_required", "Title is required")
    assert invalid.kind == FailureKind.VALIDATION
    assert invalid.code == "title_required"
