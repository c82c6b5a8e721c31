"""Error codes for CLI exit status.

Each failure the changelog tooling can report maps to one of these codes so
scripts wrapping ``chlog`` can tell a bad invocation from a broken changelog.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad arguments, malformed release file)
    - 2: Config error (unreadable chlog.toml, unknown commit type)
    - 3: Format error (changelog file lost its separator marker)
    - 5: I/O error (permission denied, disk full)
    """

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    FORMAT_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        """Check if this code indicates success."""
        return self == ErrorCode.OK
