"""Typed configuration loading for chlog.toml.

Example:

    [changelog]
    path = "CHANGELOG.md"
    repository_url = "https://github.com/acme/widget"
    tool_name = "chlog"
    tool_url = "https://github.com/acme/chlog"

    [commit_types]
    hotfix = { changelog_title = "Hotfixes" }

Every key is optional. Unset values fall back to the changelog defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "ChangelogConfig",
    "Config",
    "ConfigError",
    "load_config",
    "load_config_or_default",
]

CONFIG_FILENAME = "chlog.toml"
DEFAULT_CHANGELOG_PATH = "CHANGELOG.md"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class ChangelogConfig:
    """Where the changelog lives and how links and footer are built.

    None means "use the built-in default".
    """

    path: str = DEFAULT_CHANGELOG_PATH
    repository_url: str | None = None
    tool_name: str | None = None
    tool_url: str | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    changelog: ChangelogConfig = field(default_factory=ChangelogConfig)
    # (commit type, changelog title) in declaration order
    commit_types: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If a custom commit type has no changelog_title.
        """
        changelog: StrDict = get_table(data, "changelog") or {}
        types_table: StrDict = get_table(data, "commit_types") or {}

        commit_types: list[tuple[str, str]] = []
        for commit_type in types_table:
            entry = get_table(types_table, commit_type)
            title = get_str(entry, "changelog_title") if entry is not None else None
            if title is None:
                raise ValueError(f"commit_types.{commit_type} needs a changelog_title")
            commit_types.append((commit_type, title))

        return cls(
            changelog=ChangelogConfig(
                path=get_str(changelog, "path") or DEFAULT_CHANGELOG_PATH,
                repository_url=get_str(changelog, "repository_url"),
                tool_name=get_str(changelog, "tool_name"),
                tool_url=get_str(changelog, "tool_url"),
            ),
            commit_types=tuple(commit_types),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to chlog.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Result[Config, ConfigError]:
    """Like load_config, but a missing file yields the default Config.

    A file that exists but is broken is still an error.
    """
    if not path.exists():
        return Ok(Config())
    return load_config(path)
