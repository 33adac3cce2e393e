from typing import Protocol

from linksaver.domain.entities import CapturedImage


class AvatarStorePort(Protocol):
    def save(self, name: str, data: bytes) -> str:
        """Save bytes under name and return the local path."""
        ...


class ImageCapturePort(Protocol):
    def capture(self) -> CapturedImage | None:
        """Return the captured image, or None if the user cancelled."""
        ...
