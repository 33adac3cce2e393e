"""
Preferences component - persisted light/dark theme flag.
"""

from ._impl import DARK_MODE_KEY, ThemeListener, ThemePreferences
from .component import run_load_dark_mode, run_toggle_dark_mode
from .models import DarkModeOutput

__all__ = [
    "run_load_dark_mode",
    "run_toggle_dark_mode",
    "DarkModeOutput",
    "ThemePreferences",
    "ThemeListener",
    "DARK_MODE_KEY",
]
