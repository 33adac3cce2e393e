"""
JSON file preference store.

Implements KeyValueStorePort as a flat JSON object on disk, written through
on every set.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class JsonPreferenceStore:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning(f"Unreadable preferences at {self.path}, starting empty")
            return {}
        return data if isinstance(data, dict) else {}

    def get_bool(self, key: str) -> bool | None:
        value = self._load().get(key)
        return value if isinstance(value, bool) else None

    def set_bool(self, key: str, value: bool) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)
