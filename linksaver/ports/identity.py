from collections.abc import Callable
from typing import Protocol

from linksaver.domain.entities import User

AuthListener = Callable[[User | None], None]


class IdentityProviderError(Exception):
    """Provider failure carrying a provider-defined error code."""

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or code)


class IdentityProviderPort(Protocol):
    def create_user(self, email: str, password: str) -> User:
        """Create an account and sign it in."""
        ...

    def sign_in(self, email: str, password: str) -> User: ...

    def sign_out(self) -> None: ...

    def current_user(self) -> User | None: ...

    def add_listener(self, listener: AuthListener) -> Callable[[], None]:
        """Register a session-change listener. Returns an unsubscribe callable."""
        ...
