from dataclasses import dataclass

from linksaver.domain.failures import Failure


@dataclass(frozen=True)
class DarkModeOutput:
    dark_mode: bool
    success: bool = True
    failure: Failure | None = None
