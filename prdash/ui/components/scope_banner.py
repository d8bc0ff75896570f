import flet as ft

from prdash.config import (
    BORDER_RADIUS_CARD,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
)


class ScopeBanner(ft.Container):
    """Status line: which repo the query is scoped to and the effective query."""

    def __init__(
        self,
        scope_label: str,
        effective_query: str,
        author_filter_removed: bool,
        on_clear_callback=None,
    ):
        super().__init__()
        self.scope_label = scope_label
        self.effective_query = effective_query
        self.author_filter_removed = author_filter_removed
        self.on_clear_callback = on_clear_callback

        self.padding = 10
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = ft.border.all(1, COLOR_BORDER)
        self.content = self._build_content()

    def _build_content(self):
        author_note = "  ・  author:@me removed" if self.author_filter_removed else ""
        return ft.Row(
            controls=[
                ft.Icon(ft.Icons.FOLDER_OPEN, color=COLOR_PRIMARY, size=16),
                ft.Column(
                    controls=[
                        ft.Text(
                            f"Repository: {self.scope_label}{author_note}",
                            size=13,
                            weight=ft.FontWeight.W_600,
                            color=COLOR_TEXT_MAIN,
                        ),
                        ft.Text(
                            self.effective_query or "(empty query)",
                            size=12,
                            color=COLOR_TEXT_MUTED,
                            selectable=True,
                        ),
                    ],
                    spacing=2,
                    expand=True,
                ),
                *(
                    [
                        ft.IconButton(
                            icon=ft.Icons.CLOSE,
                            tooltip="Search all repositories",
                            on_click=lambda e: self.on_clear_callback(),
                        )
                    ]
                    if self.on_clear_callback
                    else []
                ),
            ],
            vertical_alignment=ft.CrossAxisAlignment.CENTER,
        )
