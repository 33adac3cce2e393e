"""Home screen variants, selected by enum rather than by list position."""

from enum import Enum


class Screen(str, Enum):
    LINKS = "links"
    PROFILE = "profile"


# Order of the bottom navigation destinations
NAV_ORDER: tuple[Screen, ...] = (Screen.LINKS, Screen.PROFILE)

NAV_LABELS: dict[Screen, str] = {
    Screen.LINKS: "Links",
    Screen.PROFILE: "Profile",
}


def screen_for_index(index: int | None) -> Screen:
    if index is None or not 0 <= index < len(NAV_ORDER):
        return Screen.LINKS
    return NAV_ORDER[index]


def index_for_screen(screen: Screen) -> int:
    return NAV_ORDER.index(screen)


def parse_screen(value: str | None) -> Screen:
    try:
        return Screen(value)
    except ValueError:
        return Screen.LINKS
