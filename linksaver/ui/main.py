import logging

import flet as ft

from linksaver.adapters.capture.flet_picker import FletImagePicker
from linksaver.components.auth import watch_current_user
from linksaver.components.preferences import run_load_dark_mode
from linksaver.config.loader import configure_logging, load_config
from linksaver.domain.entities import User
from linksaver.ui.context import ServiceContext
from linksaver.ui.layout import HomeLayout
from linksaver.ui.screens import parse_screen
from linksaver.ui.state import AppState
from linksaver.ui.theme import AppTheme, theme_mode_for
from linksaver.ui.views.sign_in import SignInView

logger = logging.getLogger(__name__)


def main(page: ft.Page) -> None:
    # 1. Config & logging
    config = load_config()
    configure_logging(config)

    page.title = config.app.title
    page.theme = AppTheme.light_theme()
    page.dark_theme = AppTheme.dark_theme()

    # 2. Services
    ctx = ServiceContext.create(config, FletImagePicker(page))
    logger.info(f"Data directory: {config.storage.data_dir}")

    # 3. Theme preference, loaded once before any screen is shown
    loaded = run_load_dark_mode(ctx.preferences)
    page.theme_mode = theme_mode_for(loaded.dark_mode)

    def on_theme_change(dark_mode: bool) -> None:
        page.theme_mode = theme_mode_for(dark_mode)
        page.update()

    ctx.preferences.subscribe(on_theme_change)

    # 4. Session-driven screen selection
    state = AppState(screen=parse_screen(config.app.default_screen))

    def on_user(user: User | None) -> None:
        page.controls.clear()
        page.floating_action_button = None
        if user is None:
            state.logout()
            page.add(SignInView(page, ctx))
            return

        if state.current_user is None or state.current_user.uid != user.uid:
            state.sign_in(user, ctx.links_for(user.uid))
        logger.info(f"Session user: {user.uid}")
        page.add(HomeLayout(page, ctx, state, user))

    watch_current_user(ctx.identity, on_user)


def run() -> None:
    ft.app(target=main)


if __name__ == "__main__":
    run()
