"""Changelog rendering and merging."""

from .errors import ChangelogError
from .merge import (
    SEPARATOR,
    ChangelogTemplate,
    WriterMode,
    merge_changelog,
    update_changelog,
    write_changelog,
)
from .metadata import CommitTypeTable, default_table
from .model import Commit, CommitMessage, RangeTitle, Release, TagTitle
from .release_file import load_release_file
from .render import CommitLinks, Section, partition_commits, render_release

__all__ = [
    # errors
    "ChangelogError",
    # merge
    "SEPARATOR",
    "ChangelogTemplate",
    "WriterMode",
    "merge_changelog",
    "update_changelog",
    "write_changelog",
    # metadata
    "CommitTypeTable",
    "default_table",
    # model
    "Commit",
    "CommitMessage",
    "RangeTitle",
    "Release",
    "TagTitle",
    # release file
    "load_release_file",
    # render
    "CommitLinks",
    "Section",
    "partition_commits",
    "render_release",
]
