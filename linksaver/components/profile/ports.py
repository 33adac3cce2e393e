from linksaver.components.auth.ports import ProfileDocumentsPort
from linksaver.ports.filestore import AvatarStorePort, ImageCapturePort

__all__ = ["AvatarStorePort", "ImageCapturePort", "ProfileDocumentsPort"]
