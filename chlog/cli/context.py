from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from chlog.changelog.merge import ChangelogTemplate
from chlog.changelog.metadata import CommitTypeTable, default_table
from chlog.changelog.render import CommitLinks
from chlog.core.config import CONFIG_FILENAME, Config, load_config, load_config_or_default
from chlog.core.errors import ErrorCode
from chlog.core.result import Err
from chlog.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    table: CommitTypeTable
    links: CommitLinks
    template: ChangelogTemplate
    console: ConsoleProtocol


def context_from_config(config: Config, console: ConsoleProtocol) -> CLIContext:
    defaults = ChangelogTemplate()
    template = ChangelogTemplate(
        tool_name=config.changelog.tool_name or defaults.tool_name,
        tool_url=config.changelog.tool_url or defaults.tool_url,
    )

    links = CommitLinks()
    if config.changelog.repository_url is not None:
        links = CommitLinks(repository_url=config.changelog.repository_url)

    return CLIContext(
        config=config,
        table=default_table().with_custom(config.commit_types),
        links=links,
        template=template,
        console=console,
    )


def build_context(config_path: Path | None) -> CLIContext:
    """Load configuration and wire up the changelog collaborators.

    An explicit ``--config`` must exist; the implicit ./chlog.toml is optional.
    """
    if config_path is not None:
        config_result = load_config(config_path)
    else:
        config_result = load_config_or_default(Path.cwd() / CONFIG_FILENAME)

    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.CONFIG_ERROR))

    return context_from_config(config_result.value, RichConsole())
