"""Tests for remote lookup and identity resolution."""

import shutil
import subprocess

import pytest

from prdash.domain.errors import GitCommandError, RemoteNotFoundError
from prdash.domain.models import RepoIdentities, RepositoryIdentity
from prdash.git import remotes


class FakeGit:
    def __init__(self, urls: dict[str, list[str]], fail: bool = False):
        self.urls = urls
        self.fail = fail
        self.commands: list[tuple[str, list[str]]] = []

    def __call__(self, repo_dir: str, args: list[str]) -> str:
        self.commands.append((repo_dir, args))
        if self.fail:
            raise GitCommandError(args, "fatal: not a git repository", 128)
        if args == ["remote"]:
            return "".join(f"{name}\n" for name in self.urls)
        name = args[-1]
        if name not in self.urls:
            raise GitCommandError(args, f"error: No such remote '{name}'", 2)
        return "".join(f"{u}\n" for u in self.urls[name])


@pytest.fixture
def fake_git(monkeypatch):
    def install(urls: dict[str, list[str]], fail: bool = False) -> FakeGit:
        fake = FakeGit(urls, fail)
        monkeypatch.setattr(remotes, "_run_git", fake)
        return fake

    return install


class TestFindRemoteURL:
    def test_returns_first_url(self, fake_git):
        fake_git({"origin": ["git@github.com:me/widgets.git", "https://mirror/me/widgets"]})
        assert remotes.find_remote_url(".", "origin") == "git@github.com:me/widgets.git"

    def test_missing_remote(self, fake_git):
        fake_git({"origin": ["git@github.com:me/widgets.git"]})
        with pytest.raises(RemoteNotFoundError) as exc_info:
            remotes.find_remote_url(".", "upstream")
        assert "no upstream remote found" in str(exc_info.value)

    def test_name_match_is_case_sensitive(self, fake_git):
        fake_git({"Origin": ["git@github.com:me/widgets.git"]})
        with pytest.raises(RemoteNotFoundError):
            remotes.get_origin_url(".")

    def test_remote_without_url(self, fake_git):
        fake_git({"upstream": []})
        with pytest.raises(RemoteNotFoundError):
            remotes.get_upstream_url(".")

    def test_git_failure_propagates_as_lookup_error(self, fake_git):
        fake_git({}, fail=True)
        with pytest.raises(GitCommandError):
            remotes.list_remotes("/tmp")


class TestResolveIdentities:
    def test_both_remotes(self, fake_git):
        fake = fake_git(
            {
                "origin": ["git@github.com:me/widgets.git"],
                "upstream": ["https://github.com/acme/widgets.git"],
            }
        )
        ids = remotes.resolve_identities("/work")
        assert ids == RepoIdentities(
            origin=RepositoryIdentity("me", "widgets"),
            upstream=RepositoryIdentity("acme", "widgets"),
        )
        assert all(d == "/work" for d, _ in fake.commands)

    def test_absent_upstream_is_none(self, fake_git):
        fake_git({"origin": ["git@github.com:me/widgets.git"]})
        ids = remotes.resolve_identities(".")
        assert ids.has_origin
        assert not ids.has_upstream

    def test_unparseable_url_is_none(self, fake_git):
        fake_git({"origin": ["/srv/git/widgets.git"]})
        assert remotes.resolve_remote(".", "origin") is None

    def test_not_a_repository_is_none(self, fake_git):
        fake_git({}, fail=True)
        assert remotes.resolve_identities(".") == RepoIdentities()

    def test_recomputed_on_every_call(self, fake_git):
        fake = fake_git({"origin": ["git@github.com:me/widgets.git"]})
        remotes.resolve_identities(".")
        first = len(fake.commands)
        remotes.resolve_identities(".")
        assert len(fake.commands) == 2 * first


@pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
class TestWithRealGit:
    def test_reads_remotes_from_repository(self, tmp_path):
        subprocess.run(["git", "init", "-q", str(tmp_path)], check=True)
        subprocess.run(
            ["git", "-C", str(tmp_path), "remote", "add", "origin", "git@github.com:me/widgets.git"],
            check=True,
        )
        assert remotes.list_remotes(str(tmp_path)) == ["origin"]
        ids = remotes.resolve_identities(str(tmp_path))
        assert ids.origin == RepositoryIdentity("me", "widgets")
        assert ids.upstream is None

    def test_outside_repository(self, tmp_path):
        with pytest.raises(GitCommandError):
            remotes.list_remotes(str(tmp_path))
