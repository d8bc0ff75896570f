"""Tests for query token helpers."""

from prdash.utils import tokens


class TestTokens:
    def test_split_collapses_whitespace(self):
        assert tokens.split_tokens("  is:open\t author:@me \n") == ["is:open", "author:@me"]
        assert tokens.split_tokens(None) == []

    def test_repo_token_value(self):
        assert tokens.repo_token_value("is:open repo:a/b repo:c/d") == "a/b"
        assert tokens.repo_token_value("is:open") is None
        assert tokens.repo_token_value("repo: is:open") == ""

    def test_repo_prefix_must_start_token(self):
        assert tokens.first_repo_token("myrepo:a/b") is None

    def test_without_repo_tokens(self):
        assert tokens.without_repo_tokens("repo:a/b is:open repo:c/d") == ["is:open"]

    def test_prepend(self):
        assert tokens.prepend_token("repo:a/b", ["is:open"]) == "repo:a/b is:open"
        assert tokens.prepend_token(None, ["is:open", ""]) == "is:open"
        assert tokens.repo_token("a/b") == "repo:a/b"
