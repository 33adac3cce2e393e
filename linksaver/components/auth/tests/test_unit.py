from typing import Any

import pytest

from linksaver.adapters.memory import InMemoryDocumentStore, InMemoryIdentityProvider
from linksaver.components.auth import (
    AUTH_ERROR_MESSAGES,
    RegisterInput,
    SignInInput,
    load_profile,
    profile_email,
    run_register,
    run_sign_in,
    run_sign_out,
    watch_current_user,
)
from linksaver.domain.entities import USERS_COLLECTION, User
from linksaver.domain.failures import GENERIC_MESSAGE, FailureKind
from linksaver.ports.documents import DocumentStoreError


class BrokenDocumentStore(InMemoryDocumentStore):
    def set(self, collection: str, doc_id: str, data: dict[str, Any], *, merge: bool = False) -> None:
        raise DocumentStoreError("permission denied")


@pytest.fixture
def identity() -> InMemoryIdentityProvider:
    return InMemoryIdentityProvider()


@pytest.fixture
def documents() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


def test_register_creates_profile_document(identity, documents):
    result = run_register(RegisterInput("a@x.com", "secret1"), identity, documents)

    assert result.success is True
    assert result.user is not None
    assert result.profile_written is True
    assert documents.get(USERS_COLLECTION, result.user.uid) == {"email": "a@x.com"}


def test_register_signs_user_in(identity, documents):
    result = run_register(RegisterInput("a@x.com", "secret1"), identity, documents)

    assert identity.current_user() == result.user


def test_register_duplicate_then_sign_in(identity, documents):
    run_register(RegisterInput("a@x.com", "pw1234"), identity, documents)
    run_sign_out(identity)

    dup = run_register(RegisterInput("a@x.com", "pw1234"), identity, documents)
    assert dup.success is False
    assert dup.failure is not None
    assert dup.failure.kind == FailureKind.AUTH
    assert dup.failure.code == "email-already-in-use"
    assert dup.failure.message == AUTH_ERROR_MESSAGES["email-already-in-use"]

    signed_in = run_sign_in(SignInInput("a@x.com", "pw1234"), identity)
    assert signed_in.success is True


def test_register_weak_password(identity, documents):
    result = run_register(RegisterInput("a@x.com", "123"), identity, documents)

    assert result.success is False
    assert result.failure is not None
    assert result.failure.code == "weak-password"


def test_register_survives_profile_write_failure(identity):
    result = run_register(RegisterInput("a@x.com", "secret1"), identity, BrokenDocumentStore())

    assert result.success is True
    assert result.profile_written is False
    assert identity.current_user() is not None


def test_sign_in_wrong_password(identity, documents):
    run_register(RegisterInput("a@x.com", "secret1"), identity, documents)
    run_sign_out(identity)

    result = run_sign_in(SignInInput("a@x.com", "nope-nope"), identity)

    assert result.success is False
    assert result.failure is not None
    assert result.failure.code == "wrong-password"


def test_sign_in_unknown_user(identity):
    result = run_sign_in(SignInInput("who@x.com", "secret1"), identity)

    assert result.failure is not None
    assert result.failure.code == "user-not-found"


def test_sign_in_requires_credentials(identity):
    result = run_sign_in(SignInInput("", ""), identity)

    assert result.success is False
    assert result.failure is not None
    assert result.failure.kind == FailureKind.VALIDATION


def test_unexpected_error_maps_to_generic(documents):
    class ExplodingIdentity(InMemoryIdentityProvider):
        def sign_in(self, email: str, password: str) -> User:
            raise RuntimeError("socket closed")

    result = run_sign_in(SignInInput("a@x.com", "secret1"), ExplodingIdentity())

    assert result.failure is not None
    assert result.failure.kind == FailureKind.TRANSPORT
    assert result.failure.message == GENERIC_MESSAGE


def test_watch_current_user_emits_now_and_on_change(identity, documents):
    seen: list[User | None] = []
    unsubscribe = watch_current_user(identity, seen.append)

    run_register(RegisterInput("a@x.com", "secret1"), identity, documents)
    run_sign_out(identity)

    assert seen[0] is None
    assert seen[1] is not None and seen[1].email == "a@x.com"
    assert seen[2] is None

    unsubscribe()
    run_sign_in(SignInInput("a@x.com", "secret1"), identity)
    assert len(seen) == 3


def test_profile_falls_back_to_session_email(documents):
    user = User(uid="u1", email="session@x.com")

    profile = load_profile(user, documents)

    assert profile.avatar_path is None
    assert profile.email == "session@x.com"
    assert profile_email(user, documents) == "session@x.com"


def test_profile_reads_document(documents):
    documents.set(USERS_COLLECTION, "u1", {"email": "doc@x.com", "avatarPath": "/a/b.jpg"})

    profile = load_profile(User(uid="u1", email="session@x.com"), documents)

    assert profile.email == "doc@x.com"
    assert profile.avatar_path == "/a/b.jpg"


def test_register_survives_failing_session_listener(identity, documents):
    seen: list[User | None] = []

    def broken_screen(user: User | None) -> None:
        if user is not None:
            raise RuntimeError("layout build failed")

    identity.add_listener(broken_screen)
    identity.add_listener(seen.append)

    result = run_register(RegisterInput("a@x.com", "secret1"), identity, documents)

    assert result.success is True
    assert result.profile_written is True
    assert documents.get(USERS_COLLECTION, result.user.uid) == {"email": "a@x.com"}
    assert seen == [result.user]


def test_badly_formatted_email_is_rejected(identity, documents):
    registered = run_register(RegisterInput("a@x", "secret1"), identity, documents)
    signed_in = run_sign_in(SignInInput("not an email", "secret1"), identity)

    assert registered.failure is not None
    assert registered.failure.code == "invalid-email"
    assert signed_in.failure is not None
    assert signed_in.failure.code == "invalid-email"
