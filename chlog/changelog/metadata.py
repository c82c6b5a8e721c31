"""Commit type -> changelog section title table.

The table's order is the order sections appear in a rendered release. It is
an immutable value handed to the renderer, never module-level state that
rendering reads implicitly.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = [
    "CommitTypeTable",
    "DEFAULT_COMMIT_TYPES",
    "default_table",
]

DEFAULT_COMMIT_TYPES: tuple[tuple[str, str], ...] = (
    ("feat", "Features"),
    ("fix", "Bug Fixes"),
    ("chore", "Miscellaneous Chores"),
    ("revert", "Revert"),
    ("perf", "Performance Improvements"),
    ("docs", "Documentation"),
    ("style", "Style"),
    ("refactor", "Refactoring"),
    ("test", "Tests"),
    ("build", "Build system"),
    ("ci", "Continuous Integration"),
)


@dataclass(frozen=True, slots=True)
class CommitTypeTable:
    """Ordered, read-only mapping of commit type to section title."""

    entries: tuple[tuple[str, str], ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for commit_type, _ in self.entries:
            if commit_type in seen:
                raise ValueError(f"duplicate commit type in table: {commit_type}")
            seen.add(commit_type)

    def __iter__(self) -> Iterator[str]:
        return (commit_type for commit_type, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, commit_type: object) -> bool:
        return any(commit_type == t for t, _ in self.entries)

    def title_for(self, commit_type: str) -> str | None:
        for t, title in self.entries:
            if t == commit_type:
                return title
        return None

    def with_custom(self, custom: Iterable[tuple[str, str]]) -> CommitTypeTable:
        """Return a table extended with custom types.

        Known types keep their position and take the new title; unknown types
        are appended in the order given.
        """
        titles = dict(self.entries)
        order = [t for t, _ in self.entries]
        for commit_type, title in custom:
            if commit_type not in titles:
                order.append(commit_type)
            titles[commit_type] = title
        return CommitTypeTable(tuple((t, titles[t]) for t in order))


def default_table() -> CommitTypeTable:
    return CommitTypeTable(DEFAULT_COMMIT_TYPES)
