"""In-memory adapters.

Suitable for tests and single-process local runs. State lives only as long
as the instance.
"""

from collections.abc import Callable
from typing import Any
from uuid import uuid4

from linksaver.adapters.auth.identity import EMAIL_PATTERN, SessionNotifier, normalize_email
from linksaver.domain.entities import User
from linksaver.ports.documents import DocumentNotFoundError
from linksaver.ports.identity import AuthListener, IdentityProviderError


class InMemoryDocumentStore:
    def __init__(self) -> None:
        # dicts keep insertion order, which stands in for storage order
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}

    def get(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        doc = self._collections.get(collection, {}).get(doc_id)
        return dict(doc) if doc is not None else None

    def set(
        self,
        collection: str,
        doc_id: str,
        data: dict[str, Any],
        *,
        merge: bool = False,
    ) -> None:
        docs = self._collections.setdefault(collection, {})
        if merge and doc_id in docs:
            docs[doc_id] = {**docs[doc_id], **data}
        else:
            docs[doc_id] = dict(data)

    def update(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        docs = self._collections.get(collection, {})
        if doc_id not in docs:
            raise DocumentNotFoundError(collection, doc_id)
        docs[doc_id] = {**docs[doc_id], **data}

    def delete(self, collection: str, doc_id: str) -> None:
        self._collections.get(collection, {}).pop(doc_id, None)

    def list(self, collection: str) -> list[tuple[str, dict[str, Any]]]:
        return [(k, dict(v)) for k, v in self._collections.get(collection, {}).items()]

    def count(self, collection: str) -> int:
        return len(self._collections.get(collection, {}))


class InMemoryIdentityProvider:
    """Identity provider keeping plain accounts in a dict. Never use with real credentials."""

    def __init__(self, password_min_length: int = 6) -> None:
        self.password_min_length = password_min_length
        self._accounts: dict[str, tuple[str, str]] = {}  # email -> (uid, password)
        self._session = SessionNotifier()

    def _check_email(self, email: str) -> str:
        normalized = normalize_email(email)
        if not EMAIL_PATTERN.match(normalized):
            raise IdentityProviderError("invalid-email")
        return normalized

    def create_user(self, email: str, password: str) -> User:
        normalized = self._check_email(email)
        if len(password) < self.password_min_length:
            raise IdentityProviderError("weak-password")
        if normalized in self._accounts:
            raise IdentityProviderError("email-already-in-use")

        uid = uuid4().hex
        self._accounts[normalized] = (uid, password)
        user = User(uid=uid, email=normalized)
        self._session.set(user)
        return user

    def sign_in(self, email: str, password: str) -> User:
        normalized = self._check_email(email)
        account = self._accounts.get(normalized)
        if account is None:
            raise IdentityProviderError("user-not-found")
        uid, stored = account
        if stored != password:
            raise IdentityProviderError("wrong-password")
        user = User(uid=uid, email=normalized)
        self._session.set(user)
        return user

    def sign_out(self) -> None:
        self._session.set(None)

    def current_user(self) -> User | None:
        return self._session.current

    def add_listener(self, listener: AuthListener) -> Callable[[], None]:
        return self._session.add_listener(listener)


class InMemoryPreferenceStore:
    def __init__(self) -> None:
        self._values: dict[str, bool] = {}

    def get_bool(self, key: str) -> bool | None:
        return self._values.get(key)

    def set_bool(self, key: str, value: bool) -> None:
        self._values[key] = value
