"""
tokens.py - Query token helpers
Single responsibility: whitespace tokenizing and re-joining of search query text.
"""

REPO_PREFIX = "repo:"
AUTHOR_ME_TOKEN = "author:@me"


def split_tokens(text: str | None) -> list[str]:
    """Split on runs of whitespace; empty/None text yields no tokens."""
    if not text:
        return []
    return text.split()


def join_tokens(tokens) -> str:
    """Join with single spaces, dropping empty tokens."""
    return " ".join(t for t in tokens if t)


def is_repo_token(token: str) -> bool:
    return token.startswith(REPO_PREFIX)


def first_repo_token(text: str | None) -> str | None:
    for token in split_tokens(text):
        if is_repo_token(token):
            return token
    return None


def repo_token_value(text: str | None) -> str | None:
    """Value of the first ``repo:`` token, or None when the text has none."""
    token = first_repo_token(text)
    if token is None:
        return None
    return token[len(REPO_PREFIX):]


def without_repo_tokens(text: str | None) -> list[str]:
    return [t for t in split_tokens(text) if not is_repo_token(t)]


def prepend_token(token: str | None, rest: list[str]) -> str:
    if not token:
        return join_tokens(rest)
    return join_tokens([token, *rest])


def repo_token(repo: str) -> str:
    return f"{REPO_PREFIX}{repo}"
