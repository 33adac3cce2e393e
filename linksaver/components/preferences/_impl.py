"""
ThemePreferences - the persisted dark-mode flag.

One instance per process, built at startup and handed to the UI.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from linksaver.ports.preferences import KeyValueStorePort

logger = logging.getLogger(__name__)

DARK_MODE_KEY = "isDarkMode"

ThemeListener = Callable[[bool], None]


class ThemePreferences:
    def __init__(self, store: KeyValueStorePort) -> None:
        self._store = store
        self._dark_mode = False
        self._listeners: list[ThemeListener] = []

    @property
    def is_dark_mode(self) -> bool:
        return self._dark_mode

    def load(self) -> bool:
        """Read the flag from the store. Unset means light mode."""
        stored = self._store.get_bool(DARK_MODE_KEY)
        self._dark_mode = bool(stored) if stored is not None else False
        self._notify()
        return self._dark_mode

    def toggle(self) -> bool:
        """Flip, write through, then notify. Returns the new value."""
        new_value = not self._dark_mode
        self._store.set_bool(DARK_MODE_KEY, new_value)
        self._dark_mode = new_value
        logger.info(f"Dark mode {'on' if new_value else 'off'}")
        self._notify()
        return new_value

    def subscribe(self, listener: ThemeListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._dark_mode)
