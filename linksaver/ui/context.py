from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from linksaver.adapters.auth.crypto import Argon2PasswordHasher
from linksaver.adapters.auth.identity import SQLiteIdentityProvider
from linksaver.adapters.fs.avatars import AvatarDirectory
from linksaver.adapters.prefs.json_prefs import JsonPreferenceStore
from linksaver.adapters.sqlite.documents import SQLiteDocumentStore
from linksaver.adapters.sqlite.migrator import SQLiteMigrator
from linksaver.components.links import LinkCollection, LinkService
from linksaver.components.preferences import ThemePreferences
from linksaver.components.profile import ProfileService
from linksaver.config.models import AppConfig
from linksaver.ports.documents import DocumentStorePort
from linksaver.ports.filestore import AvatarStorePort, ImageCapturePort
from linksaver.ports.identity import IdentityProviderPort


@dataclass
class ServiceContext:
    config: AppConfig
    identity: IdentityProviderPort
    documents: DocumentStorePort
    avatars: AvatarStorePort
    link_service: LinkService
    profile_service: ProfileService
    preferences: ThemePreferences

    @classmethod
    def create(cls, config: AppConfig, capture: ImageCapturePort) -> ServiceContext:
        data_dir = Path(config.storage.data_dir)
        data_dir.mkdir(parents=True, exist_ok=True)
        db_path = str(data_dir / config.storage.db_path)

        SQLiteMigrator(db_path).run_migrations()

        # Adapters
        documents = SQLiteDocumentStore(db_path)
        identity = SQLiteIdentityProvider(
            db_path,
            Argon2PasswordHasher(),
            password_min_length=config.auth.password_min_length,
        )
        avatars = AvatarDirectory(str(data_dir / config.storage.avatars_dir))
        prefs_store = JsonPreferenceStore(data_dir / config.storage.preferences_file)

        return cls.assemble(config, identity, documents, avatars, capture, ThemePreferences(prefs_store))

    @classmethod
    def assemble(
        cls,
        config: AppConfig,
        identity: IdentityProviderPort,
        documents: DocumentStorePort,
        avatars: AvatarStorePort,
        capture: ImageCapturePort,
        preferences: ThemePreferences,
    ) -> ServiceContext:
        return cls(
            config=config,
            identity=identity,
            documents=documents,
            avatars=avatars,
            link_service=LinkService(documents),
            profile_service=ProfileService(documents, avatars, capture),
            preferences=preferences,
        )

    def links_for(self, uid: str) -> LinkCollection:
        return LinkCollection(self.link_service, uid)
