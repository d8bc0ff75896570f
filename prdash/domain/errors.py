"""
errors.py - Exception hierarchy
Single responsibility: name every failure the engine and its collaborators report.
"""


class PrdashError(Exception):
    """Base class for all errors raised by prdash."""


# ---------------------------------------------------------------------------
# Remote URL parsing
# ---------------------------------------------------------------------------

class RemoteURLError(PrdashError, ValueError):
    """A remote URL could not be turned into an owner/repo identity."""

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url


class UnsupportedFormatError(RemoteURLError):
    pass


class MissingColonSeparatorError(RemoteURLError):
    pass


class MissingPathError(RemoteURLError):
    pass


class MalformedOwnerRepoError(RemoteURLError):
    pass


# ---------------------------------------------------------------------------
# Remote lookup
# ---------------------------------------------------------------------------

class RemoteLookupError(PrdashError):
    """The URL of a named remote could not be read."""


class RemoteNotFoundError(RemoteLookupError):
    def __init__(self, remote_name: str):
        super().__init__(f"no {remote_name} remote found")
        self.remote_name = remote_name


class GitCommandError(RemoteLookupError):
    def __init__(self, args: list[str], message: str, returncode: int | None = None):
        super().__init__(f"git {' '.join(args)} failed: {message}")
        self.args_list = args
        self.returncode = returncode


# ---------------------------------------------------------------------------
# Config / search
# ---------------------------------------------------------------------------

class ConfigError(PrdashError):
    pass


class SearchError(PrdashError):
    pass
