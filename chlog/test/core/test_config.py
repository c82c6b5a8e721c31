"""Tests for chlog.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from chlog.core.config import (
    ChangelogConfig,
    Config,
    load_config,
    load_config_or_default,
)
from chlog.core.result import Err, Ok


class TestConfig:
    """Test Config defaults and from_dict."""

    def test_defaults(self) -> None:
        config = Config()
        assert config.changelog == ChangelogConfig()
        assert config.changelog.path == "CHANGELOG.md"
        assert config.changelog.repository_url is None
        assert config.commit_types == ()

    def test_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.commit_types = ()  # type: ignore[misc]

    def test_from_dict_empty(self) -> None:
        assert Config.from_dict({}) == Config()

    def test_from_dict_full(self) -> None:
        config = Config.from_dict(
            {
                "changelog": {
                    "path": "docs/CHANGES.md",
                    "repository_url": "https://github.com/acme/widget",
                    "tool_name": "chlog",
                    "tool_url": "https://example.com/chlog",
                },
                "commit_types": {
                    "hotfix": {"changelog_title": "Hotfixes"},
                    "release": {"changelog_title": "Releases"},
                },
            }
        )
        assert config.changelog.path == "docs/CHANGES.md"
        assert config.changelog.repository_url == "https://github.com/acme/widget"
        assert config.changelog.tool_name == "chlog"
        assert config.commit_types == (("hotfix", "Hotfixes"), ("release", "Releases"))

    def test_from_dict_rejects_untitled_type(self) -> None:
        with pytest.raises(ValueError, match="changelog_title"):
            Config.from_dict({"commit_types": {"hotfix": {}}})


class TestLoadConfig:
    """Test load_config function."""

    def test_load_valid_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "chlog.toml"
        config_file.write_text(
            """
[changelog]
path = "CHANGES.md"
repository_url = "https://github.com/acme/widget"

[commit_types]
hotfix = { changelog_title = "Hotfixes" }
""",
            encoding="utf-8",
        )
        result = load_config(config_file)
        assert isinstance(result, Ok)
        assert result.value.changelog.path == "CHANGES.md"
        assert result.value.commit_types == (("hotfix", "Hotfixes"),)

    def test_load_empty_config(self, tmp_path: Path) -> None:
        config_file = tmp_path / "chlog.toml"
        config_file.write_text("", encoding="utf-8")
        result = load_config(config_file)
        assert isinstance(result, Ok)
        assert result.value == Config()

    def test_load_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message

    def test_load_invalid_toml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "chlog.toml"
        config_file.write_text("this is not valid toml [[[", encoding="utf-8")
        result = load_config(config_file)
        assert isinstance(result, Err)
        assert "TOML" in result.error.message
        assert result.error.path == config_file

    def test_load_invalid_structure(self, tmp_path: Path) -> None:
        config_file = tmp_path / "chlog.toml"
        config_file.write_text('[commit_types]\nhotfix = "Hotfixes"\n', encoding="utf-8")
        result = load_config(config_file)
        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message


class TestLoadConfigOrDefault:
    def test_missing_file_gives_defaults(self, tmp_path: Path) -> None:
        result = load_config_or_default(tmp_path / "chlog.toml")
        assert result == Ok(Config())

    def test_broken_file_is_still_an_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "chlog.toml"
        config_file.write_text("[[[", encoding="utf-8")
        assert isinstance(load_config_or_default(config_file), Err)
