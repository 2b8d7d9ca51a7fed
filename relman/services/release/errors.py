from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ReleaseErrorKind = Literal[
    "invalid_version_format",
    "not_a_repository",
    "dirty_working_tree",
    "tag_already_exists",
    "version_not_advanced",
    "tag_creation_failed",
    "archive_creation_failed",
    "push_failed",
]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Release failure payload.

    ``details`` holds extra lines to show under the message, such as the
    changed paths of a dirty working tree.
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None
    details: tuple[str, ...] = ()

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
