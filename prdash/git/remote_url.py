"""
remote_url.py - Remote URL parsing
Single responsibility: turn a git remote URL into an owner/repo identity.

Supported shapes (any host, so GitHub Enterprise works unchanged):
    git@host:owner/repo(.git)      git@host:/owner/repo
    https://host/owner/repo(.git)(/)
    http://host/owner/repo(.git)(/)
"""
import logging

from prdash.domain.errors import (
    MalformedOwnerRepoError,
    MissingColonSeparatorError,
    MissingPathError,
    RemoteURLError,
    UnsupportedFormatError,
)
from prdash.domain.models import RepositoryIdentity

logger = logging.getLogger(__name__)

SSH_PREFIX = "git@"
HTTP_PREFIXES = ("https://", "http://")
PUBLIC_HOST_PREFIX = "https://github.com/"


def _split_owner_repo(path: str, kind: str, url: str) -> RepositoryIdentity:
    parts = path.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise MalformedOwnerRepoError(
            f"invalid {kind} URL format: expected owner/repo", url
        )
    return RepositoryIdentity(owner=parts[0], name=parts[1])


def _parse_ssh(url: str) -> RepositoryIdentity:
    colon = url.find(":")
    if colon == -1:
        raise MissingColonSeparatorError(
            "invalid SSH URL format: missing colon separator", url
        )
    path = url[colon + 1:]
    path = path.removesuffix(".git")
    path = path.removeprefix("/")
    return _split_owner_repo(path, "SSH", url)


def _parse_http(url: str) -> RepositoryIdentity:
    for prefix in HTTP_PREFIXES:
        if url.startswith(prefix):
            rest = url[len(prefix):]
            break
    slash = rest.find("/")
    if slash == -1:
        raise MissingPathError("invalid HTTPS URL format: missing path", url)
    path = rest[slash + 1:]
    path = path.removesuffix(".git")
    path = path.removesuffix("/")
    return _split_owner_repo(path, "HTTPS", url)


def parse_remote_url(url: str) -> RepositoryIdentity:
    """Parse ``url`` into a RepositoryIdentity or raise a RemoteURLError subclass."""
    cleaned = (url or "").strip().removesuffix("/")

    if cleaned.startswith(SSH_PREFIX):
        return _parse_ssh(cleaned)
    if cleaned.startswith(HTTP_PREFIXES):
        return _parse_http(cleaned)

    raise UnsupportedFormatError(
        "unsupported URL format: expected git@ or https:// prefix", url
    )


def try_parse_remote_url(url: str) -> RepositoryIdentity | None:
    """Like parse_remote_url, but a malformed URL just means "no identity"."""
    try:
        return parse_remote_url(url)
    except RemoteURLError as exc:
        logger.debug("Cannot parse remote URL %r: %s", url, exc)
        return None


def short_display_name(url: str) -> str:
    """Display helper: "owner/repo" for public github.com HTTPS URLs, else the URL."""
    if not url.startswith(PUBLIC_HOST_PREFIX):
        return url
    identity = try_parse_remote_url(url)
    return identity.full_name if identity is not None else url
