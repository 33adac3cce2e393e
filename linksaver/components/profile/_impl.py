"""
ProfileService - per-user avatar.

The avatar is a local file path kept in the ``avatarPath`` field of the
profile document ``users/{uid}``.
"""

from __future__ import annotations

import logging

from linksaver.domain.entities import USERS_COLLECTION, UserProfile

from .ports import AvatarStorePort, ImageCapturePort, ProfileDocumentsPort

logger = logging.getLogger(__name__)

AVATAR_FIELD = "avatarPath"


class ProfileService:
    def __init__(
        self,
        documents: ProfileDocumentsPort,
        avatars: AvatarStorePort,
        capture: ImageCapturePort,
    ) -> None:
        self._documents = documents
        self._avatars = avatars
        self._capture = capture

    def load_avatar(self, uid: str) -> str | None:
        data = self._documents.get(USERS_COLLECTION, uid)
        if data is None:
            return None
        return UserProfile.from_document(uid, data).avatar_path or None

    def capture_and_store_avatar(self, uid: str) -> str | None:
        """
        Capture an image, copy it into the avatar directory and record its path.

        Returns None without touching anything if the capture was cancelled.
        """
        image = self._capture.capture()
        if image is None:
            logger.info("Avatar capture cancelled")
            return None

        path = self._avatars.save(image.name, image.data)
        # merge so a profile document missing since sign-up gets created
        self._documents.set(USERS_COLLECTION, uid, {AVATAR_FIELD: path}, merge=True)
        logger.info(f"Avatar updated for {uid}: {path}")
        return path
