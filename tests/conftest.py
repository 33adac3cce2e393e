from pathlib import Path

import pytest

from linksaver.adapters.auth.identity import SQLiteIdentityProvider
from linksaver.adapters.fs.avatars import AvatarDirectory
from linksaver.adapters.prefs.json_prefs import JsonPreferenceStore
from linksaver.adapters.sqlite.documents import SQLiteDocumentStore
from linksaver.adapters.sqlite.migrator import SQLiteMigrator
from linksaver.components.preferences import ThemePreferences
from linksaver.config.models import AppConfig
from linksaver.domain.entities import CapturedImage
from linksaver.ui.context import ServiceContext


class PlainHasher:
    """Reversible stand-in so identity tests skip the Argon2 work factor."""

    def hash_password(self, password: str) -> str:
        return f"plain${password}"

    def verify_password(self, password: str, hash_str: str) -> bool:
        return hash_str == f"plain${password}"


class QueuedCapture:
    """Image capture that hands out queued images, then reports cancel."""

    def __init__(self) -> None:
        self.queue: list[CapturedImage] = []

    def capture(self) -> CapturedImage | None:
        return self.queue.pop(0) if self.queue else None


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "linksaver.db")
    SQLiteMigrator(path).run_migrations()
    return path


@pytest.fixture
def documents(db_path):
    return SQLiteDocumentStore(db_path)


@pytest.fixture
def identity(db_path):
    return SQLiteIdentityProvider(db_path, PlainHasher())


@pytest.fixture
def capture():
    return QueuedCapture()


@pytest.fixture
def test_ctx(tmp_path, db_path, documents, identity, capture):
    """
    A full ServiceContext over a temporary SQLite DB, avatar directory and
    preferences file.
    """
    avatars = AvatarDirectory(str(tmp_path / "avatars"))
    prefs = ThemePreferences(JsonPreferenceStore(Path(tmp_path) / "preferences.json"))
    return ServiceContext.assemble(AppConfig(), identity, documents, avatars, capture, prefs)
