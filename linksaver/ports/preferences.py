from typing import Protocol


class KeyValueStorePort(Protocol):
    def get_bool(self, key: str) -> bool | None:
        """Return the stored flag, or None if unset."""
        ...

    def set_bool(self, key: str, value: bool) -> None: ...
