"""Exit codes for the release command.

The numeric values are part of the command-line contract:
- 0: release (or dry run, or help) completed
- 1: validation, tagging, archiving or configuration failure, and
  command-line usage errors (unknown option, extra VERSION)

A failed push is not an error at this level; the tag exists locally and
the run still exits with 0.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes."""

    OK = 0
    RELEASE_ERROR = 1

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
