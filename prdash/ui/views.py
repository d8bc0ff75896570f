"""
views.py - UI view builders
Single responsibility: build flet Views using provided callbacks/state.
"""

import asyncio
import logging
import webbrowser

import flet as ft

from prdash.config import (
    APP_TITLE,
    BORDER_RADIUS_BTN,
    COLOR_BG,
    COLOR_CARD,
    COLOR_DANGER,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    SEARCH_DEBOUNCE_SECONDS,
)
from prdash.domain.errors import SearchError
from prdash.ui.components.repo_picker import show_repo_picker
from prdash.ui.components.row_card import RowCard
from prdash.ui.components.scope_banner import ScopeBanner

logger = logging.getLogger(__name__)


def build_appbar(repo_dir: str) -> ft.AppBar:
    return ft.AppBar(
        title=ft.Text(APP_TITLE, color=COLOR_TEXT_MAIN, weight=ft.FontWeight.BOLD, size=20),
        bgcolor=COLOR_CARD,
        center_title=False,
        automatically_imply_leading=False,
        actions=[
            ft.Container(
                content=ft.Text(repo_dir, color=COLOR_TEXT_MUTED, size=13),
                padding=ft.Padding.only(right=24),
            ),
        ],
    )


def build_dashboard_view(page: ft.Page, state, search_fn, on_refresh) -> ft.View:
    """
    The list view for ``state.current``. ``search_fn(query, section)`` fetches rows;
    ``on_refresh()`` rebuilds the whole view after scope changes.
    """
    section = state.current
    search_task: asyncio.Task | None = None
    list_column_ref = ft.Ref[ft.Column]()
    banner_ref = ft.Ref[ft.Container]()

    def load_rows():
        try:
            state.rows = section.fetch_rows(lambda q: search_fn(q, section.section))
            state.error = None
        except SearchError as exc:
            logger.warning("Search failed: %s", exc)
            state.rows = []
            state.error = str(exc)

    def build_banner() -> ScopeBanner:
        return ScopeBanner(
            scope_label=section.get_scope_label(),
            effective_query=section.get_effective_query(),
            author_filter_removed=section.state.author_filter_removed,
            on_clear_callback=None if section.config_has_repo else (lambda: on_pick("")),
        )

    def build_row_controls() -> list[ft.Control]:
        if state.error:
            return [ft.Text(f"Search failed: {state.error}", color=COLOR_DANGER)]
        if not state.rows:
            return [
                ft.Container(
                    content=ft.Text(
                        f"No {section.section.type}s were found that match the given filters",
                        color=COLOR_TEXT_MUTED,
                        size=16,
                    ),
                    padding=60,
                )
            ]
        return [
            RowCard(
                row,
                show_author_icon=section.config.show_author_icons,
                on_click_callback=lambda r: webbrowser.open(r.url) if r.url else None,
            )
            for row in state.rows
        ]

    def _update_list_content_inplace():
        """Refresh rows and the status line without rebuilding the whole view."""
        load_rows()
        col = list_column_ref.current
        banner = banner_ref.current
        if col is None or banner is None:
            on_refresh()
            return
        col.controls = build_row_controls()
        banner.content = build_banner()
        col.update()
        banner.update()

    async def _debounced_search(term_snapshot: str):
        try:
            await asyncio.sleep(SEARCH_DEBOUNCE_SECONDS)
        except asyncio.CancelledError:
            return
        if term_snapshot == search_field.value:
            section.set_search_value(term_snapshot)
            _update_list_content_inplace()

    def on_search(e):
        nonlocal search_task
        if search_task and not search_task.done():
            search_task.cancel()

        async def runner(term: str):
            await _debounced_search(term)

        search_task = page.run_task(runner, e.control.value or "")

    def on_submit(e):
        nonlocal search_task
        if search_task and not search_task.done():
            search_task.cancel()
        section.set_search_value(e.control.value or "")
        _update_list_content_inplace()

    def on_pick(value: str, is_custom: bool = False):
        section.select_from_picker(value, is_custom)
        on_refresh()

    def on_toggle_scope():
        section.toggle_scope()
        on_refresh()

    def on_toggle_author():
        section.toggle_author_filter()
        on_refresh()

    def on_reset():
        section.reset_filters()
        on_refresh()

    def on_open_picker():
        show_repo_picker(
            page,
            section.picker_options(),
            section.picker_selected_value(),
            on_pick,
        )

    def on_tab_click(index: int):
        state.current_index = index
        on_refresh()

    def build_tab_btn(label: str, index: int):
        selected = state.current_index == index
        color = COLOR_PRIMARY if selected else COLOR_TEXT_MUTED
        return ft.Container(
            content=ft.Text(
                label,
                color=color,
                weight=ft.FontWeight.BOLD if selected else ft.FontWeight.NORMAL,
            ),
            padding=ft.Padding.symmetric(vertical=10, horizontal=18),
            border=ft.border.only(
                bottom=ft.BorderSide(2, COLOR_PRIMARY if selected else "transparent")
            ),
            on_click=lambda _: on_tab_click(index),
            ink=True,
        )

    tabs = ft.Row(
        controls=[build_tab_btn(s.section.title, i) for i, s in enumerate(state.sections)],
        spacing=0,
        scroll=ft.ScrollMode.AUTO,
    )

    search_field = ft.TextField(
        prefix_icon=ft.Icons.SEARCH,
        prefix_text=f"is:{section.section.type} ",
        value=section.search_value,
        on_change=on_search,
        on_submit=on_submit,
        border_radius=BORDER_RADIUS_BTN,
        bgcolor=COLOR_CARD,
        text_size=14,
        expand=True,
    )

    scope_tooltip = (
        "Repository set in config" if section.config_has_repo else "Cycle origin / upstream / all"
    )
    actions_row = ft.Row(
        controls=[
            ft.OutlinedButton(
                "Scope",
                icon=ft.Icons.SWAP_HORIZ,
                tooltip=scope_tooltip,
                disabled=section.config_has_repo,
                on_click=lambda e: on_toggle_scope(),
            ),
            ft.OutlinedButton(
                "Repository…",
                icon=ft.Icons.FOLDER_OPEN,
                disabled=section.config_has_repo,
                on_click=lambda e: on_open_picker(),
            ),
            ft.OutlinedButton(
                "Show all authors" if not section.state.author_filter_removed else "Only mine",
                icon=ft.Icons.PERSON,
                on_click=lambda e: on_toggle_author(),
            ),
            ft.TextButton(
                "Reset",
                icon=ft.Icons.CLEAR,
                tooltip="Replace the search text with the effective query",
                on_click=lambda e: on_reset(),
            ),
        ],
        spacing=8,
        wrap=True,
    )

    load_rows()

    return ft.View(
        route="/",
        appbar=build_appbar(section.config.repo_dir),
        bgcolor=COLOR_BG,
        padding=16,
        controls=[
            tabs,
            ft.Row(controls=[search_field]),
            actions_row,
            ft.Container(ref=banner_ref, content=build_banner()),
            ft.Column(
                ref=list_column_ref,
                controls=build_row_controls(),
                spacing=8,
                scroll=ft.ScrollMode.AUTO,
                expand=True,
            ),
        ],
    )
