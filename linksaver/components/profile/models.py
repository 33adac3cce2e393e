from dataclasses import dataclass

from linksaver.domain.failures import Failure


@dataclass(frozen=True)
class AvatarInput:
    uid: str


@dataclass(frozen=True)
class AvatarOutput:
    """Avatar path after the operation. changed is False on cancel or failure."""

    path: str | None = None
    changed: bool = False
    success: bool = True
    failure: Failure | None = None
