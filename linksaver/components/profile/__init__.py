"""
Profile component - avatar stored as a local path on the profile document.
"""

from ._impl import AVATAR_FIELD, ProfileService
from .component import run_change_avatar, run_load_avatar
from .models import AvatarInput, AvatarOutput

__all__ = [
    "run_load_avatar",
    "run_change_avatar",
    "AvatarInput",
    "AvatarOutput",
    "ProfileService",
    "AVATAR_FIELD",
]
