"""
app_main.py - prdash main application
prdash v0.1
"""

import logging
import sys

import flet as ft

from prdash.config import (
    APP_TITLE,
    APP_VERSION,
    COLOR_BG,
    COLOR_PRIMARY,
    LOG_LEVEL,
    DashboardConfig,
    load_config,
)
from prdash.domain.errors import ConfigError
from prdash.services import search_service
from prdash.services.section_service import SectionController
from prdash.ui import views
from prdash.ui.state import AppState

logger = logging.getLogger(__name__)


def build_state(config: DashboardConfig) -> AppState:
    return AppState([SectionController(config, section) for section in config.sections])


def _search(config: DashboardConfig):
    def search(query: str, section) -> list:
        return search_service.search_rows(query, section.type, section.limit or config.page_size)

    return search


# ==========================================================================
# Main app
# ==========================================================================


def main(page: ft.Page):
    page.title = APP_TITLE
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    try:
        config = load_config()
    except ConfigError as exc:
        logger.exception("Failed to load configuration")
        page.overlay.append(
            ft.AlertDialog(
                title=ft.Text("Configuration error"),
                content=ft.Text(f"{exc}\nFalling back to defaults."),
                open=True,
            )
        )
        config = DashboardConfig()

    state = build_state(config)
    search = _search(config)

    def refresh():
        try:
            page.views.clear()
            page.views.append(views.build_dashboard_view(page, state, search, refresh))
            page.update()
        except Exception as exc:
            logger.exception("Error in refresh")
            page.overlay.append(
                ft.AlertDialog(
                    title=ft.Text("Something went wrong"),
                    content=ft.Text(f"Details: {exc}"),
                    open=True,
                )
            )
            page.update()

    def route_change(_e: ft.RouteChangeEvent):
        if page.route == "/":
            refresh()

    page.on_route_change = route_change
    refresh()


# ==========================================================================
# Entry point
# ==========================================================================


def run():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting %s %s", APP_TITLE, APP_VERSION)
    try:
        ft.app(target=main)
    except Exception:
        logging.exception("Unhandled exception running Flet app")
        sys.exit(1)


if __name__ == "__main__":
    run()
