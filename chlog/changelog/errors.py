"""Error types for changelog rendering and merging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ChangelogErrorKind = Literal[
    "missing_separator",
    "io_failed",
    "config_mismatch",
    "invalid_identifier",
    "invalid_input",
]


@dataclass(frozen=True, slots=True)
class ChangelogError:
    """Canonical changelog error payload.

    ``hint`` usually carries the path or identifier the error is about.
    """

    kind: ChangelogErrorKind
    message: str
    hint: str | None = None
