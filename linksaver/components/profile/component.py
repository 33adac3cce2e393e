"""
Profile component - avatar load and change.

Shell Layer - handles I/O and error conversion.
"""

import logging

from linksaver.domain.failures import Failure

from ._impl import ProfileService
from .models import AvatarInput, AvatarOutput

logger = logging.getLogger(__name__)


def run_load_avatar(inp: AvatarInput, service: ProfileService) -> AvatarOutput:
    try:
        path = service.load_avatar(inp.uid)
    except Exception as e:
        logger.error(f"Failed to load avatar: {e}")
        return AvatarOutput(success=False, failure=Failure.transport())
    return AvatarOutput(path=path)


def run_change_avatar(inp: AvatarInput, service: ProfileService) -> AvatarOutput:
    try:
        path = service.capture_and_store_avatar(inp.uid)
    except Exception as e:
        # Directory creation and file writes land here too
        logger.error(f"Failed to change avatar: {e}")
        return AvatarOutput(success=False, failure=Failure.transport())

    if path is None:
        return AvatarOutput(changed=False)
    return AvatarOutput(path=path, changed=True)
