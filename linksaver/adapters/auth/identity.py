"""
Account-table identity provider.

Implements IdentityProviderPort over the ``accounts`` table with Argon2
password hashes. Errors are raised with the provider codes the auth
component maps to messages. The signed-in user is held per instance, as an
identity SDK holds its session for the process.
"""

import logging
import re
import sqlite3
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from linksaver.domain.entities import User
from linksaver.ports.identity import AuthListener, IdentityProviderError

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class PasswordHasherPort(Protocol):
    def hash_password(self, password: str) -> str: ...

    def verify_password(self, password: str, hash_str: str) -> bool: ...


def normalize_email(email: str) -> str:
    return email.strip().lower()


class SessionNotifier:
    """Holds the current user and fans session changes out to listeners."""

    def __init__(self) -> None:
        self._current: User | None = None
        self._listeners: list[AuthListener] = []

    @property
    def current(self) -> User | None:
        return self._current

    def set(self, user: User | None) -> None:
        """Record the session user. A failing listener does not stop the others."""
        self._current = user
        for listener in list(self._listeners):
            try:
                listener(user)
            except Exception as e:
                logger.error(f"Session listener failed: {e}")

    def add_listener(self, listener: AuthListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


class SQLiteIdentityProvider:
    def __init__(
        self,
        db_path: str,
        hasher: PasswordHasherPort,
        password_min_length: int = 6,
    ):
        self.db_path = db_path
        self.hasher = hasher
        self.password_min_length = password_min_length
        self._session = SessionNotifier()

    def _get_conn(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _check_email(self, email: str) -> str:
        normalized = normalize_email(email)
        if not EMAIL_PATTERN.match(normalized):
            raise IdentityProviderError("invalid-email", "The email address is badly formatted.")
        return normalized

    def create_user(self, email: str, password: str) -> User:
        normalized = self._check_email(email)
        if len(password) < self.password_min_length:
            raise IdentityProviderError(
                "weak-password",
                f"Password should be at least {self.password_min_length} characters.",
            )

        uid = uuid4().hex
        password_hash = self.hasher.hash_password(password)

        conn = self._get_conn()
        try:
            conn.execute(
                "INSERT INTO accounts (uid, email, password_hash, created_at) VALUES (?, ?, ?, ?)",
                (uid, normalized, password_hash, datetime.now(UTC).isoformat()),
            )
            conn.commit()
        except sqlite3.IntegrityError as e:
            raise IdentityProviderError(
                "email-already-in-use",
                "The email address is already in use by another account.",
            ) from e
        finally:
            conn.close()

        user = User(uid=uid, email=normalized)
        logger.info(f"Account created: {uid}")
        self._session.set(user)
        return user

    def sign_in(self, email: str, password: str) -> User:
        normalized = self._check_email(email)

        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT uid, email, password_hash FROM accounts WHERE email = ?",
                (normalized,),
            ).fetchone()
        finally:
            conn.close()

        if not row:
            raise IdentityProviderError("user-not-found", "No account for this email.")

        uid, stored_email, password_hash = row
        if not self.hasher.verify_password(password, password_hash):
            raise IdentityProviderError("wrong-password", "The password is invalid.")

        user = User(uid=uid, email=stored_email)
        self._session.set(user)
        return user

    def sign_out(self) -> None:
        self._session.set(None)

    def current_user(self) -> User | None:
        return self._session.current

    def add_listener(self, listener: AuthListener) -> Callable[[], None]:
        return self._session.add_listener(listener)
