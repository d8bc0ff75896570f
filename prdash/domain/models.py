"""
models.py - Domain models
Single responsibility: typed containers for repository identities, scope state and rows.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class RepositoryIdentity:
    owner: str
    name: str

    def __post_init__(self):
        if not self.owner or not self.name:
            raise ValueError(
                f"repository identity needs a non-empty owner and name, got {self.owner!r}/{self.name!r}"
            )

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class RepoIdentities:
    """Origin/upstream identities resolved for one lookup. Either may be missing."""

    origin: Optional[RepositoryIdentity] = None
    upstream: Optional[RepositoryIdentity] = None

    @property
    def has_origin(self) -> bool:
        return self.origin is not None

    @property
    def has_upstream(self) -> bool:
        return self.upstream is not None


class ScopeTarget(Enum):
    ORIGIN = "origin"
    UPSTREAM = "upstream"
    NONE = "none"


@dataclass(frozen=True)
class ScopeState:
    target: ScopeTarget = ScopeTarget.NONE
    custom_repo_filter: str = ""
    author_filter_removed: bool = False

    def with_changes(self, **changes) -> "ScopeState":
        return replace(self, **changes)


@dataclass(frozen=True)
class RepoOption:
    label: str
    value: str
    description: str = ""


@dataclass
class RowData:
    number: int
    title: str
    author: str = ""
    repo: str = ""
    state: str = "open"
    updated_at: str | None = None
    url: str = ""
    labels: list[str] = field(default_factory=list)

    def __getitem__(self, key):
        return getattr(self, key)
