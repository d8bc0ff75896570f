"""
config.py - Path resolution, app constants and user configuration
prdash v0.1
"""

import logging
import os
from dataclasses import dataclass, field

import tomli

from prdash.domain.errors import ConfigError
from prdash.utils.tokens import is_repo_token, split_tokens

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def get_config_path() -> str:
    """PRDASH_CONFIG wins; otherwise $XDG_CONFIG_HOME/prdash/config.toml."""
    explicit = os.environ.get("PRDASH_CONFIG")
    if explicit:
        return explicit
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(
        os.path.expanduser("~"), ".config"
    )
    return os.path.join(config_home, "prdash", "config.toml")


CONFIG_PATH = get_config_path()

# ---------------------------------------------------------------------------
# App constants
# ---------------------------------------------------------------------------

APP_TITLE = "prdash"
APP_VERSION = "0.1.0"
LOG_LEVEL = os.environ.get("PRDASH_LOG_LEVEL", "INFO").upper()

GIT_TIMEOUT_SECONDS = 5
GH_TIMEOUT_SECONDS = 30
SEARCH_DEBOUNCE_SECONDS = 0.5
DEFAULT_PAGE_SIZE = 20

# ---------------------------------------------------------------------------
# Colour palette (GitHub-like)
# ---------------------------------------------------------------------------

COLOR_OPEN = "#2da44e"
COLOR_CLOSED = "#8250df"
COLOR_BG = "#F0F2F5"
COLOR_CARD = "#FFFFFF"
COLOR_BORDER = "#D0D7DE"
COLOR_TEXT_MUTED = "#656D76"
COLOR_TEXT_MAIN = "#1F2328"
COLOR_PRIMARY = "#0969DA"
COLOR_DANGER = "#CF222E"

BORDER_RADIUS_CARD = 10
BORDER_RADIUS_BTN = 6

# ---------------------------------------------------------------------------
# User configuration
# ---------------------------------------------------------------------------

SECTION_TYPE_PRS = "pr"
SECTION_TYPE_ISSUES = "issue"


@dataclass
class SectionConfig:
    title: str
    filters: str = ""
    type: str = SECTION_TYPE_PRS
    limit: int | None = None

    def has_repo_filter(self) -> bool:
        """True when the configured filter already hard-codes a repo: token."""
        return any(is_repo_token(t) for t in split_tokens(self.filters))


def _default_sections() -> list[SectionConfig]:
    return [
        SectionConfig("My Pull Requests", "is:open author:@me", SECTION_TYPE_PRS),
        SectionConfig("Needs My Review", "is:open review-requested:@me", SECTION_TYPE_PRS),
        SectionConfig("My Issues", "is:open author:@me", SECTION_TYPE_ISSUES),
    ]


@dataclass
class DashboardConfig:
    smart_filtering_at_launch: bool = True
    show_author_icons: bool = True
    repo_path: str = ""
    page_size: int = DEFAULT_PAGE_SIZE
    sections: list[SectionConfig] = field(default_factory=_default_sections)

    @property
    def repo_dir(self) -> str:
        return self.repo_path or "."


def _parse_sections(raw, section_type: str) -> list[SectionConfig]:
    if not isinstance(raw, list):
        raise ConfigError(f"{section_type} sections must be an array of tables")
    sections = []
    for entry in raw:
        if not isinstance(entry, dict) or not entry.get("title"):
            raise ConfigError(f"every {section_type} section needs a title")
        limit = entry.get("limit")
        if limit is not None and not isinstance(limit, int):
            raise ConfigError(f"section {entry['title']!r}: limit must be an integer")
        sections.append(
            SectionConfig(
                title=str(entry["title"]),
                filters=str(entry.get("filters", "")),
                type=section_type,
                limit=limit,
            )
        )
    return sections


def parse_config(data: dict) -> DashboardConfig:
    """Build a DashboardConfig from an already-decoded TOML document."""
    config = DashboardConfig()
    for key in ("smart_filtering_at_launch", "show_author_icons"):
        if key in data:
            if not isinstance(data[key], bool):
                raise ConfigError(f"{key} must be true or false")
            setattr(config, key, data[key])
    if "repo_path" in data:
        config.repo_path = str(data["repo_path"])
    if "page_size" in data:
        if not isinstance(data["page_size"], int) or data["page_size"] <= 0:
            raise ConfigError("page_size must be a positive integer")
        config.page_size = data["page_size"]

    if "prs_sections" in data or "issues_sections" in data:
        config.sections = _parse_sections(
            data.get("prs_sections", []), SECTION_TYPE_PRS
        ) + _parse_sections(data.get("issues_sections", []), SECTION_TYPE_ISSUES)
    return config


def load_config(path: str | None = None) -> DashboardConfig:
    """
    Read the TOML config. A missing file yields defaults; an unreadable or
    invalid file raises ConfigError.
    """
    path = path or CONFIG_PATH
    if not os.path.exists(path):
        logger.info("No config at %s, using defaults", path)
        return DashboardConfig()
    try:
        with open(path, "rb") as f:
            data = tomli.load(f)
    except (tomli.TOMLDecodeError, OSError) as exc:
        raise ConfigError(f"failed to read config {path}: {exc}") from exc
    return parse_config(data)
