"""
search_service.py - Row fetching
Single responsibility: run a composed search query against the hosted service
through the gh CLI and return RowData.
"""
import json
import logging
import subprocess

from prdash.config import GH_TIMEOUT_SECONDS, SECTION_TYPE_PRS
from prdash.domain.errors import SearchError
from prdash.domain.models import RowData
from prdash.utils.tokens import join_tokens, split_tokens

logger = logging.getLogger(__name__)

_TYPE_TOKENS = {"is:pr", "is:issue", "type:pr", "type:issue"}


def with_type_qualifier(query: str, section_type: str) -> str:
    tokens = split_tokens(query)
    if any(t in _TYPE_TOKENS for t in tokens):
        return join_tokens(tokens)
    return join_tokens([f"is:{section_type}", *tokens])


def _row_from_item(item: dict) -> RowData:
    repo_url = item.get("repository_url", "")
    return RowData(
        number=item.get("number", 0),
        title=item.get("title", ""),
        author=(item.get("user") or {}).get("login", ""),
        repo="/".join(repo_url.rstrip("/").split("/")[-2:]) if repo_url else "",
        state=item.get("state", "open"),
        updated_at=item.get("updated_at"),
        url=item.get("html_url", ""),
        labels=[lbl.get("name", "") for lbl in item.get("labels") or []],
    )


def search_rows(query: str, section_type: str = SECTION_TYPE_PRS, limit: int = 20) -> list[RowData]:
    q = with_type_qualifier(query, section_type)
    args = [
        "gh", "api", "-X", "GET", "search/issues",
        "-f", f"q={q}",
        "-F", f"per_page={limit}",
    ]
    logger.info("Fetching rows: %s", q)
    try:
        proc = subprocess.run(
            args,
            capture_output=True,
            text=True,
            timeout=GH_TIMEOUT_SECONDS,
            check=False,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        raise SearchError(f"gh search failed: {exc}") from exc
    if proc.returncode != 0:
        raise SearchError(proc.stderr.strip() or f"gh exited with {proc.returncode}")
    try:
        payload = json.loads(proc.stdout)
    except json.JSONDecodeError as exc:
        raise SearchError(f"unexpected gh output: {exc}") from exc
    return [_row_from_item(item) for item in payload.get("items", [])]
