"""Tests for configuration loading."""

import pytest

from prdash.config import (
    SECTION_TYPE_ISSUES,
    SECTION_TYPE_PRS,
    DashboardConfig,
    SectionConfig,
    get_config_path,
    load_config,
    parse_config,
)
from prdash.domain.errors import ConfigError


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(str(tmp_path / "nope.toml"))
        assert config == DashboardConfig()
        assert config.smart_filtering_at_launch is True
        assert [s.title for s in config.sections] == ["My Pull Requests", "Needs My Review", "My Issues"]

    def test_reads_sections(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            """
smart_filtering_at_launch = false
show_author_icons = false
repo_path = "/src/widgets"
page_size = 50

[[prs_sections]]
title = "Mine"
filters = "is:open author:@me"

[[issues_sections]]
title = "Bugs"
filters = "is:open label:bug"
limit = 10
""",
            encoding="utf-8",
        )
        config = load_config(str(path))
        assert config.smart_filtering_at_launch is False
        assert config.show_author_icons is False
        assert config.repo_dir == "/src/widgets"
        assert config.page_size == 50
        assert config.sections == [
            SectionConfig("Mine", "is:open author:@me", SECTION_TYPE_PRS),
            SectionConfig("Bugs", "is:open label:bug", SECTION_TYPE_ISSUES, limit=10),
        ]

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("smart_filtering_at_launch = ", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PRDASH_CONFIG", str(tmp_path / "c.toml"))
        assert get_config_path() == str(tmp_path / "c.toml")


class TestParseConfig:
    @pytest.mark.parametrize(
        "data",
        [
            {"smart_filtering_at_launch": "yes"},
            {"page_size": 0},
            {"prs_sections": [{"filters": "is:open"}]},
            {"prs_sections": {"title": "x"}},
            {"issues_sections": [{"title": "x", "limit": "ten"}]},
        ],
    )
    def test_rejects_bad_values(self, data):
        with pytest.raises(ConfigError):
            parse_config(data)

    def test_repo_dir_default(self):
        assert DashboardConfig().repo_dir == "."

    def test_has_repo_filter(self):
        assert SectionConfig("x", "is:open repo:a/b").has_repo_filter()
        assert not SectionConfig("x", "is:open myrepo:a/b").has_repo_filter()
        assert not SectionConfig("x", "").has_repo_filter()
