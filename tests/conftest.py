from datetime import datetime, timezone

import pytest

from prdash.config import DashboardConfig, SectionConfig
from prdash.domain.models import RepoIdentities, RepositoryIdentity

ORIGIN = RepositoryIdentity("acme", "widgets")
UPSTREAM = RepositoryIdentity("parent", "widgets")


class FakeResolver:
    """Stands in for git: returns whatever identities the test sets, counting calls."""

    def __init__(self, identities: RepoIdentities):
        self.identities = identities
        self.calls = 0
        self.dirs: list[str] = []

    def __call__(self, repo_dir: str) -> RepoIdentities:
        self.calls += 1
        self.dirs.append(repo_dir)
        return self.identities


@pytest.fixture
def both() -> RepoIdentities:
    return RepoIdentities(origin=ORIGIN, upstream=UPSTREAM)


@pytest.fixture
def origin_only() -> RepoIdentities:
    return RepoIdentities(origin=ORIGIN)


@pytest.fixture
def no_remotes() -> RepoIdentities:
    return RepoIdentities()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def config() -> DashboardConfig:
    return DashboardConfig(smart_filtering_at_launch=True, repo_path="/work/widgets")


@pytest.fixture
def section() -> SectionConfig:
    return SectionConfig("My Pull Requests", "is:open author:@me")
