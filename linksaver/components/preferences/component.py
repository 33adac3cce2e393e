import logging

from linksaver.domain.failures import Failure

from ._impl import ThemePreferences
from .models import DarkModeOutput

logger = logging.getLogger(__name__)


def run_load_dark_mode(prefs: ThemePreferences) -> DarkModeOutput:
    try:
        value = prefs.load()
    except Exception as e:
        logger.error(f"Failed to load theme preference: {e}")
        return DarkModeOutput(dark_mode=prefs.is_dark_mode, success=False, failure=Failure.transport())
    return DarkModeOutput(dark_mode=value)


def run_toggle_dark_mode(prefs: ThemePreferences) -> DarkModeOutput:
    """Toggle the flag. On a failed write the in-memory value stays as it was."""
    try:
        value = prefs.toggle()
    except Exception as e:
        logger.error(f"Failed to save theme preference: {e}")
        return DarkModeOutput(dark_mode=prefs.is_dark_mode, success=False, failure=Failure.transport())
    return DarkModeOutput(dark_mode=value)
