from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

SHORT_OID_LEN = 6


@dataclass(frozen=True, slots=True)
class CommitMessage:
    """A conventional commit message, already parsed."""

    commit_type: str
    description: str
    scope: str | None = None
    body: str | None = None
    footer: str | None = None
    is_breaking_change: bool = False


@dataclass(frozen=True, slots=True)
class Commit:
    oid: str
    author: str
    message: CommitMessage
    date: str | None = None

    @property
    def commit_type(self) -> str:
        return self.message.commit_type

    @property
    def short_oid(self) -> str:
        return self.oid[:SHORT_OID_LEN]


@dataclass(frozen=True, slots=True)
class TagTitle:
    """Release titled by a tag name, rendered verbatim."""

    name: str


@dataclass(frozen=True, slots=True)
class RangeTitle:
    """Release titled by its commit range, rendered as ``abcdef..123456``."""

    from_id: str
    to_id: str


ReleaseTitle: TypeAlias = TagTitle | RangeTitle


@dataclass(frozen=True, slots=True)
class Release:
    """One changelog entry: a commit range, its date and its commits."""

    from_id: str
    to_id: str
    date: str
    title: ReleaseTitle
    commits: tuple[Commit, ...] = ()

    @classmethod
    def create(
        cls,
        *,
        from_id: str,
        to_id: str,
        date: str,
        commits: tuple[Commit, ...] | list[Commit] = (),
        tag_name: str | None = None,
    ) -> Release:
        title: ReleaseTitle
        if tag_name is not None:
            title = TagTitle(tag_name)
        else:
            title = RangeTitle(from_id=from_id, to_id=to_id)
        return cls(
            from_id=from_id,
            to_id=to_id,
            date=date,
            title=title,
            commits=tuple(commits),
        )

    @property
    def tag_name(self) -> str | None:
        if isinstance(self.title, TagTitle):
            return self.title.name
        return None
