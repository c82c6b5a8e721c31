"""JSON release files: the hand-off format from a commit collector."""

from __future__ import annotations

import json
from pathlib import Path

from chlog.changelog.errors import ChangelogError
from chlog.changelog.model import Commit, CommitMessage, Release
from chlog.core.result import Err, Ok, Result
from chlog.core.structured import (
    StrDict,
    as_str_dict,
    get_bool,
    get_list,
    get_raw_str,
    get_str,
)

__all__ = ["load_release_file", "parse_release"]


def _invalid(message: str, path: Path) -> Err[ChangelogError]:
    return Err(ChangelogError(kind="invalid_input", message=message, hint=str(path)))


def _parse_commit(data: StrDict, *, index: int, path: Path) -> Result[Commit, ChangelogError]:
    oid = get_str(data, "oid")
    if oid is None:
        return _invalid(f"commits[{index}]: missing oid", path)

    author = get_raw_str(data, "author")
    if author is None:
        return _invalid(f"commits[{index}]: missing author", path)

    commit_type = get_str(data, "type")
    if commit_type is None:
        return _invalid(f"commits[{index}]: missing type", path)

    description = get_raw_str(data, "description")
    if description is None:
        return _invalid(f"commits[{index}]: missing description", path)

    message = CommitMessage(
        commit_type=commit_type,
        description=description,
        scope=get_str(data, "scope"),
        body=get_raw_str(data, "body"),
        footer=get_raw_str(data, "footer"),
        is_breaking_change=get_bool(data, "breaking") or False,
    )
    return Ok(Commit(oid=oid, author=author, message=message, date=get_raw_str(data, "date")))


def parse_release(data: StrDict, *, path: Path) -> Result[Release, ChangelogError]:
    from_id = get_str(data, "from")
    if from_id is None:
        return _invalid("missing 'from' commit id", path)

    to_id = get_str(data, "to")
    if to_id is None:
        return _invalid("missing 'to' commit id", path)

    date = get_raw_str(data, "date")
    if date is None:
        return _invalid("missing date", path)

    commits_obj = get_list(data, "commits")
    if commits_obj is None and "commits" in data:
        return _invalid("commits must be a list", path)

    commits: list[Commit] = []
    for i, item in enumerate(commits_obj or []):
        item_data = as_str_dict(item)
        if item_data is None:
            return _invalid(f"commits[{i}] must be an object", path)
        parsed = _parse_commit(item_data, index=i, path=path)
        if isinstance(parsed, Err):
            return parsed
        commits.append(parsed.value)

    return Ok(
        Release.create(
            from_id=from_id,
            to_id=to_id,
            date=date,
            commits=commits,
            tag_name=get_str(data, "tag"),
        )
    )


def load_release_file(path: Path) -> Result[Release, ChangelogError]:
    """Load a release descriptor from a JSON release file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return _invalid(f"failed to read release file: {e}", path)

    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return _invalid(f"invalid JSON in release file: {e}", path)

    data = as_str_dict(obj)
    if data is None:
        return _invalid("release file root must be a JSON object", path)

    return parse_release(data, path=path)
