"""Render a release into a markdown changelog fragment.

Rendering is a pure function of the release, the commit type table and the
commit link base; it does no file I/O.
"""

from __future__ import annotations

from dataclasses import dataclass

from chlog.changelog.errors import ChangelogError
from chlog.changelog.metadata import CommitTypeTable
from chlog.changelog.model import SHORT_OID_LEN, Commit, RangeTitle, Release, ReleaseTitle
from chlog.core.result import Err, Ok, Result
from chlog.output.console import ansi

__all__ = [
    "CommitLinks",
    "Section",
    "commit_markdown",
    "partition_commits",
    "render_release",
    "render_title",
]

DEFAULT_REPOSITORY_URL = "https://github.com/oknozor/cocogitto"


@dataclass(frozen=True, slots=True)
class CommitLinks:
    """Builds commit URLs for a hosted repository."""

    repository_url: str = DEFAULT_REPOSITORY_URL

    def commit_url(self, oid: str) -> str:
        return f"{self.repository_url.rstrip('/')}/commit/{oid}"


@dataclass(frozen=True, slots=True)
class Section:
    commit_type: str
    title: str
    commits: tuple[Commit, ...]


def _check_identifier(oid: str, *, what: str) -> ChangelogError | None:
    if len(oid) < SHORT_OID_LEN:
        return ChangelogError(
            kind="invalid_identifier",
            message=f"{what} must be a full commit hash, got {oid!r}",
            hint=f"expected at least {SHORT_OID_LEN} characters",
        )
    return None


def render_title(title: ReleaseTitle) -> Result[str, ChangelogError]:
    match title:
        case RangeTitle(from_id=from_id, to_id=to_id):
            for oid, what in ((from_id, "range start"), (to_id, "range end")):
                bad = _check_identifier(oid, what=what)
                if bad is not None:
                    return Err(bad)
            return Ok(f"{from_id[:SHORT_OID_LEN]}..{to_id[:SHORT_OID_LEN]}")
        case _:
            return Ok(title.name)


def partition_commits(
    commits: tuple[Commit, ...] | list[Commit],
    table: CommitTypeTable,
) -> Result[list[Section], ChangelogError]:
    """Group commits into sections following the table's order.

    Each commit lands in exactly one section; relative order inside a section
    is the input order. Types with no commits yield no section.
    """
    for commit in commits:
        if commit.commit_type not in table:
            return Err(
                ChangelogError(
                    kind="config_mismatch",
                    message=f"commit type '{commit.commit_type}' has no changelog title",
                    hint=commit.oid,
                )
            )

    remaining = list(commits)
    sections: list[Section] = []
    for commit_type in table:
        matched = [c for c in remaining if c.commit_type == commit_type]
        if not matched:
            continue
        remaining = [c for c in remaining if c.commit_type != commit_type]
        title = table.title_for(commit_type)
        assert title is not None
        sections.append(Section(commit_type=commit_type, title=title, commits=tuple(matched)))

    assert not remaining, "every commit type was checked against the table"
    return Ok(sections)


def commit_markdown(commit: Commit, *, links: CommitLinks, colored: bool = False) -> str:
    """One changelog line: ``[abcdef](url) - description - author``."""
    shorthand = f"[{commit.short_oid}]({links.commit_url(commit.oid)})"
    author = commit.author
    if colored:
        shorthand = ansi(shorthand, "yellow")
        author = ansi(author, "blue")
    return f"{shorthand} - {commit.message.description} - {author}\n"


def render_release(
    release: Release,
    *,
    table: CommitTypeTable,
    links: CommitLinks,
    colored: bool = False,
) -> Result[str, ChangelogError]:
    """Render ``release`` as a markdown fragment.

    The fragment starts with the ``## <title> - <date>`` heading and contains
    one ``### <Section Title>`` block per commit type that has commits.
    """
    title = render_title(release.title)
    if isinstance(title, Err):
        return title

    for commit in release.commits:
        bad = _check_identifier(commit.oid, what="commit id")
        if bad is not None:
            return Err(bad)

    sections = partition_commits(release.commits, table)
    if isinstance(sections, Err):
        return sections

    out: list[str] = [f"\n## {title.value} - {release.date}\n\n"]
    for section in sections.value:
        out.append(f"\n### {section.title}\n\n")
        for commit in section.commits:
            out.append(commit_markdown(commit, links=links, colored=colored))

    return Ok("".join(out))
