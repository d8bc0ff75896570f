"""
state.py - UI state container
"""
from prdash.domain.models import RowData
from prdash.services.section_service import SectionController


class AppState:
    def __init__(self, sections: list[SectionController]):
        self.sections = sections
        self.current_index: int = 0
        self.rows: list[RowData] = []
        self.error: str | None = None

    @property
    def current(self) -> SectionController:
        return self.sections[self.current_index]
