"""Merge a rendered release into a changelog file.

Three strategies:
- replace: regenerate the whole file from the template around the fragment
- prepend: insert after the first ``- - -`` marker (newest release on top)
- append: insert after the last ``- - -`` marker (newest release at the bottom)

A fresh separator follows every inserted fragment so the next merge always
has an anchor.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from chlog.changelog.errors import ChangelogError
from chlog.changelog.metadata import CommitTypeTable
from chlog.changelog.model import Release
from chlog.changelog.render import CommitLinks, render_release
from chlog.core.result import Err, Ok, Result
from chlog.platform.files import atomic_write_text, read_text_if_exists

__all__ = [
    "SEPARATOR",
    "ChangelogTemplate",
    "WriterMode",
    "merge_changelog",
    "update_changelog",
    "write_changelog",
]

SEPARATOR = "- - -"

DEFAULT_TOOL_NAME = "cocogitto"
DEFAULT_TOOL_URL = "https://github.com/oknozor/cocogitto"


class WriterMode(StrEnum):
    REPLACE = "replace"
    PREPEND = "prepend"
    APPEND = "append"


@dataclass(frozen=True, slots=True)
class ChangelogTemplate:
    """Fixed header and footer wrapped around generated releases."""

    tool_name: str = DEFAULT_TOOL_NAME
    tool_url: str = DEFAULT_TOOL_URL

    def header(self) -> str:
        return (
            "# Changelog\n"
            "All notable changes to this project will be documented in this file. "
            "See [conventional commits](https://www.conventionalcommits.org/) "
            "for commit guidelines.\n"
            "\n"
            f"{SEPARATOR}\n"
        )

    def footer(self) -> str:
        return f"\nThis changelog was generated by [{self.tool_name}]({self.tool_url})."

    def blank(self) -> str:
        """A changelog with no releases yet."""
        return self.header() + self.footer()


def _missing_separator(path: Path | None) -> ChangelogError:
    where = str(path) if path is not None else "<changelog>"
    return ChangelogError(
        kind="missing_separator",
        message=f"cannot find default separator '{SEPARATOR}' in {where}",
        hint=where,
    )


def merge_changelog(
    fragment: str,
    *,
    existing: str | None,
    mode: WriterMode,
    template: ChangelogTemplate,
    path: Path | None = None,
) -> Result[str, ChangelogError]:
    """Compute the new changelog content.

    ``existing`` is the current file content, or None when there is no file
    (prepend/append then start from ``template.blank()``). ``path`` is only
    used in error messages.
    """
    if mode is WriterMode.REPLACE:
        return Ok(template.header() + fragment + template.footer())

    content = existing if existing is not None else template.blank()
    if mode is WriterMode.PREPEND:
        idx = content.find(SEPARATOR)
    else:
        idx = content.rfind(SEPARATOR)

    if idx < 0:
        return Err(_missing_separator(path))

    cut = idx + len(SEPARATOR)
    return Ok(content[:cut] + fragment + "\n" + SEPARATOR + content[cut:])


def _read_existing(path: Path, mode: WriterMode) -> Result[str | None, ChangelogError]:
    if mode is WriterMode.REPLACE:
        return Ok(None)
    try:
        return Ok(read_text_if_exists(path))
    except (OSError, UnicodeDecodeError) as e:
        return Err(
            ChangelogError(
                kind="io_failed",
                message=f"failed to read changelog: {e}",
                hint=str(path),
            )
        )


def write_changelog(
    fragment: str,
    *,
    path: Path,
    mode: WriterMode,
    template: ChangelogTemplate,
) -> Result[str, ChangelogError]:
    """Merge ``fragment`` into the file at ``path`` and write it back.

    Nothing is written unless the merge succeeds. Returns the new content.
    """
    existing = _read_existing(path, mode)
    if isinstance(existing, Err):
        return existing

    merged = merge_changelog(
        fragment, existing=existing.value, mode=mode, template=template, path=path
    )
    if isinstance(merged, Err):
        return merged

    try:
        atomic_write_text(path, merged.value)
    except OSError as e:
        return Err(
            ChangelogError(
                kind="io_failed",
                message=f"failed to write changelog: {e}",
                hint=str(path),
            )
        )

    return merged


def update_changelog(
    release: Release,
    *,
    path: Path,
    mode: WriterMode,
    table: CommitTypeTable,
    links: CommitLinks,
    template: ChangelogTemplate,
    dry_run: bool = False,
) -> Result[str, ChangelogError]:
    """Render ``release`` and merge it into ``path``.

    With ``dry_run`` the merged content is computed (including the separator
    check) and returned without touching the file.
    """
    rendered = render_release(release, table=table, links=links, colored=False)
    if isinstance(rendered, Err):
        return rendered

    if not dry_run:
        return write_changelog(rendered.value, path=path, mode=mode, template=template)

    existing = _read_existing(path, mode)
    if isinstance(existing, Err):
        return existing
    return merge_changelog(
        rendered.value, existing=existing.value, mode=mode, template=template, path=path
    )
