"""
query_service.py - Effective query composition and scope sync
Single responsibility: turn (search text, scope state, identities) into the query
sent to the service, and infer scope state back from edited search text.

Precedence when composing:
    1. configured section filter with repo:  -> text as-is
    2. custom repo filter                    -> repo:<custom> first
    3. repo: typed by the user that differs
       from what auto-scoping would add      -> kept (moved to the front)
    4. scope target origin/upstream          -> repo:<owner>/<name> first
Author suppression (author:@me removal) applies on top of all four.
"""
from datetime import datetime

from prdash.config import DashboardConfig, SectionConfig
from prdash.domain.models import RepoIdentities, ScopeState
from prdash.services import scope_service
from prdash.services.template_service import expand
from prdash.utils.tokens import (
    AUTHOR_ME_TOKEN,
    first_repo_token,
    is_repo_token,
    join_tokens,
    prepend_token,
    repo_token,
    repo_token_value,
    split_tokens,
    without_repo_tokens,
)


def has_repo_filter(text: str | None) -> bool:
    return any(is_repo_token(t) for t in split_tokens(text))


def repo_filter_value(text: str | None) -> str | None:
    return repo_token_value(text)


def strip_repo_tokens(text: str | None) -> str:
    return join_tokens(without_repo_tokens(text))


def apply_repo_filter(text: str | None, repo: str) -> str:
    """Replace every repo: token in ``text`` with a single leading repo:<repo>."""
    return prepend_token(repo_token(repo) if repo else None, without_repo_tokens(text))


def apply_author_filter(text: str, removed: bool) -> str:
    if not removed:
        return text
    return join_tokens(t for t in split_tokens(text) if t != AUTHOR_ME_TOKEN)


def _is_manual_repo_filter(
    text: str, state: ScopeState, identities: RepoIdentities
) -> bool:
    value = repo_token_value(text)
    if value is None:
        return False
    auto = scope_service.auto_scope_identity(state, identities)
    return auto is None or value != auto.full_name


def compose(
    raw_text: str,
    state: ScopeState,
    identities: RepoIdentities,
    *,
    config_has_repo: bool = False,
    now: datetime | None = None,
) -> str:
    """Build the effective search query. Never raises."""
    expanded = expand(raw_text or "", {"now": now} if now else None)

    if config_has_repo:
        return apply_author_filter(expanded, state.author_filter_removed)

    if state.custom_repo_filter:
        result = apply_repo_filter(expanded, state.custom_repo_filter)
    elif _is_manual_repo_filter(expanded, state, identities):
        # user-typed repo: wins; duplicates collapse onto the first one
        result = prepend_token(first_repo_token(expanded), without_repo_tokens(expanded))
    else:
        auto = scope_service.auto_scope_identity(state, identities)
        result = apply_repo_filter(expanded, auto.full_name if auto else "")

    return apply_author_filter(result, state.author_filter_removed)


def sync_from_text(
    raw_text: str, state: ScopeState, identities: RepoIdentities
) -> ScopeState:
    """Scope state implied by search text the user edited directly."""
    return scope_service.sync_target_from_repo_value(
        state, repo_token_value(raw_text), identities
    )


def launch_filters(
    config: DashboardConfig, section: SectionConfig, identities: RepoIdentities
) -> str:
    """The section's configured filter, with the origin repo: added at launch."""
    filters = section.filters
    if not config.smart_filtering_at_launch or identities.origin is None:
        return filters
    if section.has_repo_filter():
        return filters
    return prepend_token(repo_token(identities.origin.full_name), split_tokens(filters))
