from collections.abc import Callable
from pathlib import Path

import flet as ft

from linksaver.components.auth import profile_email, run_sign_out
from linksaver.components.preferences import run_toggle_dark_mode
from linksaver.components.profile import AvatarInput, run_change_avatar, run_load_avatar
from linksaver.domain.entities import User
from linksaver.ui.context import ServiceContext
from linksaver.ui.feedback import show_message

AVATAR_RADIUS = 50


def avatar_control(path: str | None, on_click: Callable[[ft.ControlEvent], None]) -> ft.Control:
    if path and Path(path).exists():
        avatar = ft.CircleAvatar(foreground_image_src=path, radius=AVATAR_RADIUS)
    else:
        avatar = ft.CircleAvatar(
            content=ft.Icon(ft.Icons.PERSON, size=AVATAR_RADIUS), radius=AVATAR_RADIUS
        )
    return ft.GestureDetector(content=avatar, on_tap=on_click)


class ProfileView(ft.Column):  # type: ignore
    def __init__(self, page: ft.Page, ctx: ServiceContext, user: User) -> None:
        super().__init__(expand=True)
        self.app_page = page
        self.ctx = ctx
        self.user = user

        self.alignment = ft.MainAxisAlignment.CENTER
        self.horizontal_alignment = ft.CrossAxisAlignment.CENTER

        loaded = run_load_avatar(AvatarInput(uid=user.uid), ctx.profile_service)
        if loaded.failure:
            show_message(page, loaded.failure.message)
        self.avatar_path = loaded.path

        self.avatar_slot = ft.Container(content=avatar_control(self.avatar_path, self.change_avatar))
        self.controls = [
            ft.Row(
                [
                    ft.Text("Profile", size=20, weight=ft.FontWeight.BOLD),
                    ft.IconButton(ft.Icons.LOGOUT, tooltip="Sign out", on_click=self.sign_out),
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            ),
            self.avatar_slot,
            ft.Text(profile_email(user, ctx.documents)),
            ft.Container(height=20),
            ft.ElevatedButton("Change avatar", on_click=self.change_avatar),
            ft.ElevatedButton("Toggle theme", on_click=self.toggle_theme),
        ]

    def change_avatar(self, e: ft.ControlEvent) -> None:
        result = run_change_avatar(AvatarInput(uid=self.user.uid), self.ctx.profile_service)
        if result.failure:
            show_message(self.app_page, result.failure.message)
            return
        if not result.changed:
            return

        self.avatar_path = result.path
        self.avatar_slot.content = avatar_control(self.avatar_path, self.change_avatar)
        show_message(self.app_page, "Avatar updated")
        self.update()

    def toggle_theme(self, e: ft.ControlEvent) -> None:
        # Page theme follows through the preferences subscription set up in main
        result = run_toggle_dark_mode(self.ctx.preferences)
        if result.failure:
            show_message(self.app_page, result.failure.message)

    def sign_out(self, e: ft.ControlEvent) -> None:
        result = run_sign_out(self.ctx.identity)
        if result.failure:
            show_message(self.app_page, result.failure.message)
