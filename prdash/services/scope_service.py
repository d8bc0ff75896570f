"""
scope_service.py - Repository scope transitions
Single responsibility: pure state transitions for which repo: filter is applied.

Every function takes a ScopeState and returns a new one; nothing here reads git
or configuration on its own.
"""
from prdash.config import DashboardConfig, SectionConfig
from prdash.domain.models import RepoIdentities, RepoOption, RepositoryIdentity, ScopeState, ScopeTarget
from prdash.utils.tokens import split_tokens

ALL_REPOSITORIES_LABEL = "all"


def initial_scope(
    config: DashboardConfig, section: SectionConfig, identities: RepoIdentities
) -> ScopeState:
    """ORIGIN when smart filtering applies at launch, NONE otherwise."""
    if (
        config.smart_filtering_at_launch
        and identities.has_origin
        and not section.has_repo_filter()
    ):
        return ScopeState(target=ScopeTarget.ORIGIN)
    return ScopeState()


def toggle_scope(state: ScopeState, has_upstream: bool, config_has_repo: bool) -> ScopeState:
    """Cycle ORIGIN -> UPSTREAM -> NONE -> ORIGIN (UPSTREAM skipped when absent)."""
    if config_has_repo:
        return state

    if state.target is ScopeTarget.ORIGIN:
        nxt = ScopeTarget.UPSTREAM if has_upstream else ScopeTarget.NONE
    elif state.target is ScopeTarget.UPSTREAM:
        nxt = ScopeTarget.NONE
    else:
        nxt = ScopeTarget.ORIGIN
    return state.with_changes(target=nxt)


def normalize_repo_value(value: str | None) -> str:
    """A repo filter is a single token; anything after the first whitespace is dropped."""
    tokens = split_tokens(value)
    return tokens[0] if tokens else ""


def set_custom_filter(state: ScopeState, value: str) -> ScopeState:
    value = normalize_repo_value(value)
    if value:
        return state.with_changes(custom_repo_filter=value, target=ScopeTarget.NONE)
    return state.with_changes(custom_repo_filter="")


def clear_custom_filter(state: ScopeState) -> ScopeState:
    return state.with_changes(custom_repo_filter="")


def _target_for(value: str, identities: RepoIdentities) -> ScopeTarget | None:
    if identities.origin is not None and value == identities.origin.full_name:
        return ScopeTarget.ORIGIN
    if identities.upstream is not None and value == identities.upstream.full_name:
        return ScopeTarget.UPSTREAM
    return None


def select_from_picker(
    state: ScopeState, value: str, is_custom: bool, identities: RepoIdentities
) -> ScopeState:
    """
    Apply a picker selection. An empty value means "All repositories"; a value
    equal to origin/upstream selects that target; anything else is custom.
    ``is_custom`` only says where the value came from; matching still applies.
    """
    value = normalize_repo_value(value)
    if not value:
        return state.with_changes(target=ScopeTarget.NONE, custom_repo_filter="")

    target = _target_for(value, identities)
    if target is not None:
        return state.with_changes(target=target, custom_repo_filter="")
    return state.with_changes(target=ScopeTarget.NONE, custom_repo_filter=value)


def toggle_author_filter(state: ScopeState) -> ScopeState:
    return state.with_changes(author_filter_removed=not state.author_filter_removed)


def sync_target_from_repo_value(
    state: ScopeState, repo_value: str | None, identities: RepoIdentities
) -> ScopeState:
    """State implied by the repo: value found in edited text (None/"" = no token)."""
    if not repo_value:
        return state.with_changes(target=ScopeTarget.NONE, custom_repo_filter="")
    target = _target_for(repo_value, identities)
    if target is not None:
        return state.with_changes(target=target, custom_repo_filter="")
    return state.with_changes(target=ScopeTarget.NONE, custom_repo_filter=repo_value)


# ---------------------------------------------------------------------------
# Read-only views of the state
# ---------------------------------------------------------------------------

def auto_scope_identity(
    state: ScopeState, identities: RepoIdentities
) -> RepositoryIdentity | None:
    """Identity that auto-scoping injects for the current target, if any."""
    if state.target is ScopeTarget.ORIGIN:
        return identities.origin
    if state.target is ScopeTarget.UPSTREAM:
        # no upstream configured: fall back to origin
        return identities.upstream or identities.origin
    return None


def current_repo_filter(state: ScopeState, identities: RepoIdentities) -> str:
    if state.custom_repo_filter:
        return state.custom_repo_filter
    if state.target is ScopeTarget.ORIGIN and identities.origin is not None:
        return identities.origin.full_name
    if state.target is ScopeTarget.UPSTREAM and identities.upstream is not None:
        return identities.upstream.full_name
    return ""


def scope_label(state: ScopeState, identities: RepoIdentities) -> str:
    if state.custom_repo_filter:
        return state.custom_repo_filter
    if state.target is ScopeTarget.ORIGIN:
        return identities.origin.full_name if identities.origin else "origin"
    if state.target is ScopeTarget.UPSTREAM:
        return identities.upstream.full_name if identities.upstream else "upstream"
    return ALL_REPOSITORIES_LABEL


def is_filtered_by_remote(state: ScopeState) -> bool:
    return state.target is not ScopeTarget.NONE or bool(state.custom_repo_filter)


def build_picker_options(identities: RepoIdentities) -> list[RepoOption]:
    options = []
    if identities.origin is not None:
        repo = identities.origin.full_name
        options.append(RepoOption(f"Origin: {repo}", repo, "Your fork / current repo"))
    if identities.upstream is not None:
        repo = identities.upstream.full_name
        options.append(RepoOption(f"Upstream: {repo}", repo, "Parent repository"))
    options.append(RepoOption("All Repositories", "", "No repo filter"))
    return options
