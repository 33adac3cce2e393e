import pytest

from linksaver.adapters.sqlite.documents import SQLiteDocumentStore
from linksaver.ports.documents import DocumentNotFoundError, DocumentStoreError


def test_set_and_get(documents):
    documents.set("users", "u1", {"email": "a@x.com"})
    assert documents.get("users", "u1") == {"email": "a@x.com"}
    assert documents.get("users", "missing") is None


def test_set_overwrites_without_merge(documents):
    documents.set("users", "u1", {"email": "a@x.com", "avatarPath": "/p"})
    documents.set("users", "u1", {"email": "b@x.com"})
    assert documents.get("users", "u1") == {"email": "b@x.com"}


def test_merge_keeps_other_fields(documents):
    documents.set("users", "u1", {"email": "a@x.com"})
    documents.set("users", "u1", {"avatarPath": "/p"}, merge=True)
    assert documents.get("users", "u1") == {"email": "a@x.com", "avatarPath": "/p"}


def test_merge_creates_missing_document(documents):
    documents.set("users", "u2", {"avatarPath": "/p"}, merge=True)
    assert documents.get("users", "u2") == {"avatarPath": "/p"}


def test_update_requires_existing(documents):
    with pytest.raises(DocumentNotFoundError):
        documents.update("users/u1/links", "Nope", {"isFavorite": False})


def test_update_changes_only_given_fields(documents):
    documents.set("users/u1/links", "A", {"title": "A", "url": "https://a", "isFavorite": True})
    documents.update("users/u1/links", "A", {"isFavorite": False})
    assert documents.get("users/u1/links", "A") == {
        "title": "A",
        "url": "https://a",
        "isFavorite": False,
    }


def test_list_keeps_insertion_order_across_overwrite(documents):
    col = "users/u1/links"
    for title in ("B", "A", "C"):
        documents.set(col, title, {"title": title})
    documents.set(col, "B", {"title": "B", "url": "new"})

    assert [doc_id for doc_id, _ in documents.list(col)] == ["B", "A", "C"]


def test_collections_are_isolated(documents):
    documents.set("users/u1/links", "A", {"title": "A"})
    documents.set("users/u2/links", "A", {"title": "A"})
    documents.delete("users/u1/links", "A")

    assert documents.count("users/u1/links") == 0
    assert documents.count("users/u2/links") == 1


def test_delete_missing_is_noop(documents):
    documents.delete("users/u1/links", "ghost")
    assert documents.count("users/u1/links") == 0


def test_missing_schema_is_store_error(tmp_path):
    store = SQLiteDocumentStore(str(tmp_path / "empty.db"))
    with pytest.raises(DocumentStoreError):
        store.list("users/u1/links")
