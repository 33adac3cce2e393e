"""
Failure taxonomy shared by the components.

Component entry points never raise past their boundary; they report one of
these instead so callers can show a message and let the user retry.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FailureKind(str, Enum):
    AUTH = "auth"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    TRANSPORT = "transport"


GENERIC_MESSAGE = "Something went wrong. Please try again."


@dataclass(frozen=True)
class Failure:
    """A classified, user-presentable failure."""

    kind: FailureKind
    message: str
    code: str | None = None

    @classmethod
    def transport(cls, message: str = GENERIC_MESSAGE) -> Failure:
        return cls(kind=FailureKind.TRANSPORT, message=message)

    @classmethod
    def validation(cls, code: str, message: str) -> Failure:
        return cls(kind=FailureKind.VALIDATION, message=message, code=code)
