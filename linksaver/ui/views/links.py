import flet as ft

from linksaver.components.links import LinkCollection
from linksaver.domain.entities import LinkItem
from linksaver.ui.feedback import show_message
from linksaver.ui.theme import AppTheme


class LinksView(ft.Column):  # type: ignore
    def __init__(self, page: ft.Page, links: LinkCollection) -> None:
        super().__init__(expand=True)
        self.app_page = page
        self.links = links

        self.total_text = ft.Text()
        self.favorites_button = ft.IconButton(
            ft.Icons.STAR_BORDER, tooltip="Favorites only", on_click=self.toggle_favorites_only
        )
        self.list_view = ft.ListView(expand=True, spacing=4)

        self.controls = [
            ft.Row(
                [
                    ft.Text("Your links", size=20, weight=ft.FontWeight.BOLD),
                    ft.Container(expand=True),
                    self.total_text,
                    ft.IconButton(ft.Icons.SEARCH, tooltip="Search", on_click=self.open_search),
                    self.favorites_button,
                ]
            ),
            self.list_view,
        ]

        failure = self.links.refresh()
        if failure:
            show_message(self.app_page, failure.message)
        self.render()

    def fab(self) -> ft.FloatingActionButton:
        return ft.FloatingActionButton(
            icon=ft.Icons.ADD, tooltip="Add link", on_click=self.open_add_dialog
        )

    # --- Rendering ---

    def render(self) -> None:
        self.total_text.value = f"Total: {self.links.count}"
        self.favorites_button.icon = (
            ft.Icons.STAR if self.links.state.favorites_only else ft.Icons.STAR_BORDER
        )
        self.list_view.controls = [self._tile(item) for item in self.links.visible()]

    def _tile(self, item: LinkItem) -> ft.ListTile:
        return ft.ListTile(
            title=ft.Text(item.title),
            subtitle=ft.Text(item.url),
            on_click=lambda _, i=item: self.copy_url(i),
            trailing=ft.Row(
                [
                    ft.IconButton(
                        ft.Icons.STAR if item.is_favorite else ft.Icons.STAR_BORDER,
                        icon_color=AppTheme.favorite_color if item.is_favorite else None,
                        on_click=lambda _, i=item: self.toggle_favorite(i),
                    ),
                    ft.IconButton(
                        ft.Icons.DELETE, on_click=lambda _, i=item: self.remove(i)
                    ),
                ],
                tight=True,
            ),
        )

    def refresh_ui(self) -> None:
        self.render()
        self.update()

    # --- Actions ---

    def copy_url(self, item: LinkItem) -> None:
        self.app_page.set_clipboard(item.url)
        show_message(self.app_page, "Link copied")

    def toggle_favorite(self, item: LinkItem) -> None:
        result = self.links.toggle_favorite(item)
        if not result.success and result.failure:
            show_message(self.app_page, result.failure.message)
        self.refresh_ui()

    def remove(self, item: LinkItem) -> None:
        result = self.links.remove(item)
        if result.success:
            show_message(self.app_page, "Link removed")
        elif result.failure:
            show_message(self.app_page, result.failure.message)
        self.refresh_ui()

    def toggle_favorites_only(self, e: ft.ControlEvent) -> None:
        self.links.toggle_favorites_only()
        self.refresh_ui()

    def open_search(self, e: ft.ControlEvent) -> None:
        def on_change(ev: ft.ControlEvent) -> None:
            self.links.set_query(ev.control.value)
            self.refresh_ui()

        def clear(_: ft.ControlEvent) -> None:
            self.links.set_query("")
            self.app_page.close(dialog)
            self.refresh_ui()

        dialog = ft.AlertDialog(
            title=ft.Text("Search"),
            content=ft.TextField(
                value=self.links.state.query,
                hint_text="Search by title",
                on_change=on_change,
                autofocus=True,
            ),
            actions=[
                ft.TextButton("Clear", on_click=clear),
                ft.TextButton("Close", on_click=lambda _: self.app_page.close(dialog)),
            ],
        )
        self.app_page.open(dialog)

    def open_add_dialog(self, e: ft.ControlEvent) -> None:
        title_field = ft.TextField(hint_text="Title")
        url_field = ft.TextField(hint_text="Link")

        def add(_: ft.ControlEvent) -> None:
            result = self.links.add(title_field.value or "", url_field.value or "")
            self.app_page.close(dialog)
            if result.failure:
                show_message(self.app_page, result.failure.message)
            self.refresh_ui()

        dialog = ft.AlertDialog(
            title=ft.Text("Add link"),
            content=ft.Column([title_field, url_field], tight=True),
            actions=[
                ft.TextButton("Add", on_click=add),
                ft.TextButton("Cancel", on_click=lambda _: self.app_page.close(dialog)),
            ],
        )
        self.app_page.open(dialog)
