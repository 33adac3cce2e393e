import flet as ft


def show_message(page: ft.Page, message: str) -> None:
    page.open(ft.SnackBar(ft.Text(message)))
