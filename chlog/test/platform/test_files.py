from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from chlog.platform.files import atomic_write_text, read_text_if_exists


def test_read_text_if_exists_missing(tmp_path: Path) -> None:
    assert read_text_if_exists(tmp_path / "CHANGELOG.md") is None


def test_read_text_if_exists_reads(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"
    path.write_text("# Changelog\n", encoding="utf-8")

    assert read_text_if_exists(path) == "# Changelog\n"


def test_read_text_if_exists_propagates_other_errors(tmp_path: Path) -> None:
    with pytest.raises(IsADirectoryError):
        read_text_if_exists(tmp_path)


def test_atomic_write_text_creates_parent_dirs(tmp_path: Path) -> None:
    path = tmp_path / "docs" / "CHANGELOG.md"
    atomic_write_text(path, "# Changelog\n")

    assert path.read_text(encoding="utf-8") == "# Changelog\n"


def test_atomic_write_text_keeps_newlines_verbatim(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"
    atomic_write_text(path, "a\nb\n")

    assert path.read_bytes() == b"a\nb\n"


def test_atomic_write_text_cleans_temp_file_on_replace_failure(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    path = tmp_path / "CHANGELOG.md"
    path.write_text("old", encoding="utf-8")

    def fail_replace(_src: Path, _dst: Path) -> None:
        raise OSError("replace failed")

    monkeypatch.setattr(os, "replace", fail_replace)

    with pytest.raises(OSError, match="replace failed"):
        atomic_write_text(path, "new", encoding="utf-8")

    assert path.read_text(encoding="utf-8") == "old"
    assert list(path.parent.glob(f".{path.name}.*.tmp")) == []


posix_only = pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")


@posix_only
def test_atomic_write_text_keeps_existing_mode(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"
    path.write_text("old", encoding="utf-8")
    path.chmod(0o644)

    atomic_write_text(path, "new")

    assert path.read_text(encoding="utf-8") == "new"
    assert stat.S_IMODE(path.stat().st_mode) == 0o644


@posix_only
def test_atomic_write_text_new_file_follows_umask(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"

    previous = os.umask(0o022)
    try:
        atomic_write_text(path, "new")
    finally:
        os.umask(previous)

    assert stat.S_IMODE(path.stat().st_mode) == 0o644


@posix_only
def test_atomic_write_text_writes_through_symlink(tmp_path: Path) -> None:
    target = tmp_path / "docs" / "CHANGELOG.md"
    target.parent.mkdir()
    target.write_text("old", encoding="utf-8")
    link = tmp_path / "CHANGELOG.md"
    link.symlink_to(target)

    atomic_write_text(link, "new")

    assert link.is_symlink()
    assert target.read_text(encoding="utf-8") == "new"
    assert list(tmp_path.glob(".CHANGELOG.md.*.tmp")) == []
