"""
remotes.py - Remote lookup
Single responsibility: read configured remotes from the local git repository.
"""
import logging
import subprocess

from prdash.config import GIT_TIMEOUT_SECONDS
from prdash.domain.errors import (
    GitCommandError,
    RemoteLookupError,
    RemoteNotFoundError,
    RemoteURLError,
)
from prdash.domain.models import RepoIdentities, RepositoryIdentity
from prdash.git.remote_url import parse_remote_url

logger = logging.getLogger(__name__)

ORIGIN = "origin"
UPSTREAM = "upstream"


def _run_git(repo_dir: str, args: list[str]) -> str:
    try:
        proc = subprocess.run(
            ["git", *args],
            cwd=repo_dir or ".",
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        raise GitCommandError(args, str(exc)) from exc
    if proc.returncode != 0:
        raise GitCommandError(args, proc.stderr.strip(), proc.returncode)
    return proc.stdout


def list_remotes(repo_dir: str) -> list[str]:
    out = _run_git(repo_dir, ["remote"])
    return [line.strip() for line in out.splitlines() if line.strip()]


def remote_urls(repo_dir: str, remote_name: str) -> list[str]:
    out = _run_git(repo_dir, ["remote", "get-url", "--all", remote_name])
    return [line.strip() for line in out.splitlines() if line.strip()]


def find_remote_url(repo_dir: str, remote_name: str) -> str:
    """First URL of the remote named exactly ``remote_name``."""
    for remote in list_remotes(repo_dir):
        if remote != remote_name:
            continue
        urls = remote_urls(repo_dir, remote)
        if not urls:
            break
        return urls[0]
    raise RemoteNotFoundError(remote_name)


def get_origin_url(repo_dir: str) -> str:
    return find_remote_url(repo_dir, ORIGIN)


def get_upstream_url(repo_dir: str) -> str:
    return find_remote_url(repo_dir, UPSTREAM)


# ---------------------------------------------------------------------------
# Identity resolution (lookup + parse, never raises)
# ---------------------------------------------------------------------------

def resolve_remote(repo_dir: str, remote_name: str) -> RepositoryIdentity | None:
    try:
        url = find_remote_url(repo_dir, remote_name)
        return parse_remote_url(url)
    except (RemoteLookupError, RemoteURLError) as exc:
        logger.debug("No %s identity in %s: %s", remote_name, repo_dir, exc)
        return None


def resolve_identities(repo_dir: str) -> RepoIdentities:
    return RepoIdentities(
        origin=resolve_remote(repo_dir, ORIGIN),
        upstream=resolve_remote(repo_dir, UPSTREAM),
    )
