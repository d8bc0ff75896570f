import flet as ft

from prdash.config import (
    BORDER_RADIUS_CARD,
    COLOR_CARD,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
)
from prdash.domain.models import RowData
from prdash.ui.helpers import author_text, format_age, state_color


class RowCard(ft.Container):
    def __init__(self, row: RowData, show_author_icon: bool, on_click_callback=None):
        super().__init__()
        self.row = row
        self.show_author_icon = show_author_icon
        self.on_click_callback = on_click_callback

        self.padding = 12
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 1),
        )
        self.on_click = self._handle_click
        self.ink = True

        self.content = self._build_content()

    def _handle_click(self, e):
        if self.on_click_callback:
            self.on_click_callback(self.row)

    def _build_content(self):
        row = self.row
        accent_color = state_color(row.state)

        meta = [
            ft.Text(f"{row.repo}#{row.number}", size=12, color=COLOR_TEXT_MUTED),
            ft.Text(author_text(row.author, self.show_author_icon), size=12, color=COLOR_TEXT_MUTED),
        ]
        age = format_age(row.updated_at)
        if age:
            meta.append(ft.Text(f"updated {age} ago", size=12, color=COLOR_TEXT_MUTED))

        return ft.Row(
            controls=[
                ft.Icon(ft.Icons.ADJUST, size=20, color=accent_color),
                ft.Column(
                    controls=[
                        ft.Text(
                            row.title,
                            weight=ft.FontWeight.BOLD,
                            size=15,
                            color=COLOR_TEXT_MAIN,
                            max_lines=1,
                            overflow=ft.TextOverflow.ELLIPSIS,
                        ),
                        ft.Row(controls=meta, spacing=8, wrap=True),
                        *(
                            [
                                ft.Row(
                                    controls=[
                                        ft.Text(lbl, size=11, color=COLOR_PRIMARY)
                                        for lbl in row.labels
                                    ],
                                    spacing=6,
                                    wrap=True,
                                )
                            ]
                            if row.labels
                            else []
                        ),
                    ],
                    spacing=4,
                    expand=True,
                ),
            ],
            spacing=12,
            vertical_alignment=ft.CrossAxisAlignment.START,
        )
