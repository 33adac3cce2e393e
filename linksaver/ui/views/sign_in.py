import flet as ft

from linksaver.components.auth import RegisterInput, SignInInput, run_register, run_sign_in
from linksaver.ui.context import ServiceContext
from linksaver.ui.feedback import show_message


class SignInView(ft.Column):  # type: ignore
    """
    Email/password form. Navigation after success is driven by the session
    subscription in main, not by this view.
    """

    def __init__(self, page: ft.Page, ctx: ServiceContext) -> None:
        super().__init__()
        self.app_page = page
        self.ctx = ctx

        self.email = ft.TextField(label="Email", width=300, keyboard_type=ft.KeyboardType.EMAIL)
        self.password = ft.TextField(
            label="Password", width=300, password=True, can_reveal_password=True
        )

        self.alignment = ft.MainAxisAlignment.CENTER
        self.horizontal_alignment = ft.CrossAxisAlignment.CENTER
        self.expand = True
        self.controls = [
            ft.Text("Sign in", style=ft.TextThemeStyle.HEADLINE_MEDIUM),
            self.email,
            self.password,
            ft.ElevatedButton("Sign in", on_click=self.sign_in_click),
            ft.TextButton("Register", on_click=self.register_click),
        ]

    def sign_in_click(self, e: ft.ControlEvent) -> None:
        result = run_sign_in(
            SignInInput(email=self.email.value or "", password=self.password.value or ""),
            self.ctx.identity,
        )
        if result.success:
            show_message(self.app_page, "Signed in")
        elif result.failure:
            show_message(self.app_page, f"Sign-in failed: {result.failure.message}")

    def register_click(self, e: ft.ControlEvent) -> None:
        result = run_register(
            RegisterInput(email=self.email.value or "", password=self.password.value or ""),
            self.ctx.identity,
            self.ctx.documents,
        )
        if result.success:
            show_message(self.app_page, "Registered")
        elif result.failure:
            show_message(self.app_page, f"Registration failed: {result.failure.message}")
