import flet as ft


class AppTheme:
    """
    Centralized theme configuration for the application.
    Plain Material light and dark schemes seeded from one accent.
    """

    seed_color = "#3f51b5"  # Indigo

    # Colors - Light
    primary_light = "#3f51b5"
    surface_light = "#ffffff"

    # Colors - Dark
    primary_dark = "#9fa8da"
    surface_dark = "#1e1e1e"

    favorite_color = "#fbc02d"  # Star yellow

    @classmethod
    def light_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme_seed=cls.seed_color,
            color_scheme=ft.ColorScheme(
                primary=cls.primary_light,
                surface=cls.surface_light,
            ),
            use_material3=True,
        )

    @classmethod
    def dark_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme_seed=cls.seed_color,
            color_scheme=ft.ColorScheme(
                primary=cls.primary_dark,
                surface=cls.surface_dark,
            ),
            use_material3=True,
        )


def theme_mode_for(dark_mode: bool) -> ft.ThemeMode:
    return ft.ThemeMode.DARK if dark_mode else ft.ThemeMode.LIGHT
