"""show / write commands: render a release file and merge it into CHANGELOG.md."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer

from chlog.changelog.errors import ChangelogError, ChangelogErrorKind
from chlog.changelog.merge import WriterMode, update_changelog
from chlog.changelog.release_file import load_release_file
from chlog.changelog.render import render_release, render_title
from chlog.cli.context import build_context
from chlog.core.errors import ErrorCode
from chlog.core.result import Err
from chlog.output.console import ConsoleProtocol, Style


def changelog_error_code(kind: ChangelogErrorKind) -> ErrorCode:
    if kind == "missing_separator":
        return ErrorCode.FORMAT_ERROR
    if kind == "io_failed":
        return ErrorCode.IO_ERROR
    if kind == "config_mismatch":
        return ErrorCode.CONFIG_ERROR
    return ErrorCode.USER_ERROR


def exit_changelog(console: ConsoleProtocol, error: ChangelogError) -> NoReturn:
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)
    raise typer.Exit(code=int(changelog_error_code(error.kind)))


def show(
    release_file: Path = typer.Argument(..., help="Release JSON file"),
    color: bool = typer.Option(True, "--color/--no-color", help="Colorize commit lines"),
    config: Path | None = typer.Option(None, "--config", help="Path to chlog.toml"),
) -> None:
    """Print the changelog fragment for a release."""
    ctx = build_context(config)

    release = load_release_file(release_file)
    if isinstance(release, Err):
        exit_changelog(ctx.console, release.error)

    rendered = render_release(release.value, table=ctx.table, links=ctx.links, colored=color)
    if isinstance(rendered, Err):
        exit_changelog(ctx.console, rendered.error)

    ctx.console.raw(rendered.value)


def write(
    release_file: Path = typer.Argument(..., help="Release JSON file"),
    path: Path | None = typer.Option(
        None, "--path", help="Changelog file (default: [changelog].path from chlog.toml)"
    ),
    mode: WriterMode = typer.Option(
        WriterMode.PREPEND, "--mode", case_sensitive=False, help="replace | prepend | append"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the result, do not write"),
    config: Path | None = typer.Option(None, "--config", help="Path to chlog.toml"),
) -> None:
    """Merge a release into the changelog file."""
    ctx = build_context(config)
    target = path if path is not None else Path(ctx.config.changelog.path)

    release = load_release_file(release_file)
    if isinstance(release, Err):
        exit_changelog(ctx.console, release.error)

    result = update_changelog(
        release.value,
        path=target,
        mode=mode,
        table=ctx.table,
        links=ctx.links,
        template=ctx.template,
        dry_run=dry_run,
    )
    if isinstance(result, Err):
        exit_changelog(ctx.console, result.error)

    if dry_run:
        ctx.console.raw(result.value)
        return

    title = render_title(release.value.title)
    label = title.unwrap_or("release")
    ctx.console.success(f"{label}: {mode} -> {target}")
