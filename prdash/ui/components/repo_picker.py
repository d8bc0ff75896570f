"""
repo_picker.py - Repository filter picker dialog
Single responsibility: let the user choose origin / upstream / all / a custom repo.
"""
import flet as ft

from prdash.config import BORDER_RADIUS_BTN, COLOR_BORDER, COLOR_PRIMARY, COLOR_TEXT_MUTED
from prdash.domain.models import RepoOption


def show_repo_picker(
    page: ft.Page,
    options: list[RepoOption],
    selected_value: str,
    on_select,
):
    """Open the picker. ``on_select(value, is_custom)`` runs on confirmation."""

    def close():
        dialog.open = False
        page.update()

    def choose(value: str, is_custom: bool):
        close()
        on_select(value, is_custom)

    custom_field = ft.TextField(
        label="Custom repository",
        hint_text="owner/repo",
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
        max_length=100,
        on_submit=lambda e: submit_custom(),
    )

    def submit_custom():
        value = (custom_field.value or "").strip()
        if value:
            choose(value, True)

    def option_tile(opt: RepoOption) -> ft.ListTile:
        marker = " (current)" if opt.value == selected_value else ""
        return ft.ListTile(
            title=ft.Text(f"{opt.label}{marker}"),
            subtitle=ft.Text(opt.description, size=12, color=COLOR_TEXT_MUTED),
            selected=opt.value == selected_value,
            on_click=lambda e, v=opt.value: choose(v, False),
        )

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Select Repository Filter"),
        content=ft.Column(
            controls=[*(option_tile(o) for o in options), ft.Divider(), custom_field],
            tight=True,
            width=420,
        ),
        actions=[
            ft.TextButton("Cancel", on_click=lambda e: close()),
            ft.FilledButton("Use custom", on_click=lambda e: submit_custom()),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()
    return dialog
