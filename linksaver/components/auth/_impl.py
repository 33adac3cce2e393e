"""
Provider error codes and the messages shown for them.
"""

from linksaver.domain.failures import GENERIC_MESSAGE, Failure, FailureKind

AUTH_ERROR_MESSAGES: dict[str, str] = {
    "invalid-email": "That email address is not valid.",
    "weak-password": "The password is too weak.",
    "email-already-in-use": "That email is already in use.",
    "user-not-found": "No account found for that email.",
    "wrong-password": "Wrong password.",
}


def message_for_code(code: str) -> str:
    return AUTH_ERROR_MESSAGES.get(code, GENERIC_MESSAGE)


def auth_failure(code: str) -> Failure:
    return Failure(kind=FailureKind.AUTH, message=message_for_code(code), code=code)


def credentials_missing(email: str, password: str) -> Failure | None:
    if not email or not email.strip() or not password:
        return Failure.validation("credentials_required", "Please enter email and password.")
    return None
