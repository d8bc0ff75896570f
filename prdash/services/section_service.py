"""
section_service.py - Section controller
Single responsibility: own one dashboard section's search text and scope state
and expose the operations the UI calls.

Identities are resolved on every call through the injected resolver, so adding
or removing a remote while the dashboard runs is picked up without a restart.
"""
import logging
from typing import Callable

from prdash.config import DashboardConfig, SectionConfig
from prdash.domain.models import RepoIdentities, RepoOption, RowData, ScopeState
from prdash.git.remotes import resolve_identities
from prdash.services import query_service, scope_service

logger = logging.getLogger(__name__)

IdentityResolver = Callable[[str], RepoIdentities]
SearchFn = Callable[[str], list[RowData]]


class SectionController:
    def __init__(
        self,
        config: DashboardConfig,
        section: SectionConfig,
        resolver: IdentityResolver = resolve_identities,
    ):
        self.config = config
        self.section = section
        self._resolver = resolver

        identities = self.identities()
        self.search_value: str = query_service.launch_filters(config, section, identities)
        self.state: ScopeState = scope_service.initial_scope(config, section, identities)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def identities(self) -> RepoIdentities:
        try:
            return self._resolver(self.config.repo_dir)
        except Exception:
            logger.exception("Identity resolver failed for %s", self.config.repo_dir)
            return RepoIdentities()

    @property
    def config_has_repo(self) -> bool:
        return self.section.has_repo_filter()

    def get_effective_query(self) -> str:
        return query_service.compose(
            self.search_value,
            self.state,
            self.identities(),
            config_has_repo=self.config_has_repo,
        )

    def get_scope_label(self) -> str:
        return scope_service.scope_label(self.state, self.identities())

    def is_filtered_by_remote(self) -> bool:
        return scope_service.is_filtered_by_remote(self.state)

    def picker_options(self) -> list[RepoOption]:
        return scope_service.build_picker_options(self.identities())

    def picker_selected_value(self) -> str:
        """The repo: value in the search text; the text is the source of truth."""
        return query_service.repo_filter_value(self.search_value) or ""

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _rewrite_repo_token(self, identities: RepoIdentities) -> None:
        """Make the repo: token in the search text match the scope just chosen."""
        if self.config_has_repo:
            return
        if self.state.custom_repo_filter:
            repo = self.state.custom_repo_filter
        else:
            auto = scope_service.auto_scope_identity(self.state, identities)
            repo = auto.full_name if auto else ""
        self.search_value = query_service.apply_repo_filter(self.search_value, repo)

    def toggle_scope(self) -> None:
        identities = self.identities()
        self.state = scope_service.toggle_scope(
            self.state, identities.has_upstream, self.config_has_repo
        )
        self._rewrite_repo_token(identities)
        logger.debug("Scope target -> %s", self.state.target.value)

    def set_custom_filter(self, value: str) -> None:
        """A value naming origin or upstream selects that target instead."""
        if self.config_has_repo:
            return
        identities = self.identities()
        value = scope_service.normalize_repo_value(value)
        if value and value in (
            identities.origin and identities.origin.full_name,
            identities.upstream and identities.upstream.full_name,
        ):
            self.state = scope_service.select_from_picker(self.state, value, True, identities)
        else:
            self.state = scope_service.set_custom_filter(self.state, value)
        self._rewrite_repo_token(identities)

    def clear_custom_filter(self) -> None:
        if self.config_has_repo:
            return
        self.state = scope_service.clear_custom_filter(self.state)
        self._rewrite_repo_token(self.identities())

    def select_from_picker(self, value: str, is_custom: bool = False) -> None:
        """No-op when the section config already pins a repo:, like toggle_scope."""
        if self.config_has_repo:
            return
        identities = self.identities()
        self.state = scope_service.select_from_picker(
            self.state, value, is_custom, identities
        )
        self._rewrite_repo_token(identities)
        logger.debug("Picker selection %r -> %s", value, self.state)

    def toggle_author_filter(self) -> None:
        self.state = scope_service.toggle_author_filter(self.state)

    def set_search_value(self, text: str) -> None:
        """Commit text the user typed and infer the scope it implies."""
        self.search_value = text or ""
        self.state = query_service.sync_from_text(
            self.search_value, self.state, self.identities()
        )

    def reset_filters(self) -> None:
        """Show the effective query in the search box."""
        self.search_value = self.get_effective_query()

    def fetch_rows(self, search: SearchFn) -> list[RowData]:
        return search(self.get_effective_query())
