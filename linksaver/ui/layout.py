from collections.abc import Callable
from typing import Any

import flet as ft

from linksaver.domain.entities import User
from linksaver.ui.context import ServiceContext
from linksaver.ui.screens import NAV_LABELS, NAV_ORDER, Screen, index_for_screen, screen_for_index
from linksaver.ui.state import AppState
from linksaver.ui.views.links import LinksView
from linksaver.ui.views.profile import ProfileView

NAV_ICONS: dict[Screen, tuple[str, str]] = {
    Screen.LINKS: (ft.Icons.HOME_OUTLINED, ft.Icons.HOME),
    Screen.PROFILE: (ft.Icons.PERSON_OUTLINE, ft.Icons.PERSON),
}


def build_links(page: ft.Page, ctx: ServiceContext, state: AppState, user: User) -> ft.Control:
    if state.links is None:
        state.links = ctx.links_for(user.uid)
    view = LinksView(page, state.links)
    page.floating_action_button = view.fab()
    return view


def build_profile(page: ft.Page, ctx: ServiceContext, state: AppState, user: User) -> ft.Control:
    page.floating_action_button = None
    return ProfileView(page, ctx, user)


SCREEN_BUILDERS: dict[Screen, Callable[[ft.Page, ServiceContext, AppState, User], ft.Control]] = {
    Screen.LINKS: build_links,
    Screen.PROFILE: build_profile,
}


class HomeLayout(ft.Column):  # type: ignore
    """
    Signed-in shell: the selected screen above a bottom navigation bar.
    """

    def __init__(self, page: ft.Page, ctx: ServiceContext, state: AppState, user: User):
        super().__init__(expand=True, spacing=0)
        self.app_page = page
        self.ctx = ctx
        self.state = state
        self.user = user

        self.body = ft.Container(expand=True, padding=16)
        self.nav = ft.NavigationBar(
            selected_index=index_for_screen(state.screen),
            destinations=[
                ft.NavigationBarDestination(
                    icon=NAV_ICONS[screen][0],
                    selected_icon=NAV_ICONS[screen][1],
                    label=NAV_LABELS[screen],
                )
                for screen in NAV_ORDER
            ],
            on_change=self._nav_change,
        )
        self.controls = [ft.SafeArea(self.body, expand=True), self.nav]
        self._show(state.screen)

    def _show(self, screen: Screen) -> None:
        self.state.screen = screen
        self.body.content = SCREEN_BUILDERS[screen](self.app_page, self.ctx, self.state, self.user)

    def _nav_change(self, e: Any) -> None:
        self._show(screen_for_index(e.control.selected_index))
        self.app_page.update()
