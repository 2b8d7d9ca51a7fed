"""Version-control capabilities the release pipeline depends on.

The pipeline only talks to ``RepositoryBackend``; ``Repository`` binds it
to the git command line, and tests bind it to an in-memory fake.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Protocol

from relman.core.result import Result

__all__ = [
    "ArchiveFormat",
    "GitError",
    "RepositoryBackend",
    "StatusEntry",
]

ArchiveFormat = Literal["tar.gz", "zip"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a version-control operation.

    Attributes:
        command: The git subcommand that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """A changed path in the working tree.

    Attributes:
        xy: Two-character porcelain status code (e.g., "M ", " M")
        path: File path relative to the repository root
    """

    xy: str
    path: str

    def __str__(self) -> str:
        return f"{self.xy} {self.path}"


class RepositoryBackend(Protocol):
    """Operations a release needs from the repository."""

    def is_repository(self) -> bool:
        """True if the backend points inside a repository."""
        ...

    def toplevel(self) -> Result[Path, GitError]:
        """Root directory of the working tree."""
        ...

    def head(self) -> Result[str, GitError]:
        """Full identifier of the current head commit."""
        ...

    def latest_tag(self) -> str | None:
        """Nearest tag reachable from head, or None if there is none."""
        ...

    def tag_exists(self, tag: str) -> bool:
        ...

    def changed_paths(self) -> Result[tuple[StatusEntry, ...], GitError]:
        """Uncommitted changes to tracked files."""
        ...

    def create_tag(self, tag: str, message: str) -> Result[None, GitError]:
        """Create an annotated tag at head."""
        ...

    def delete_tag(self, tag: str) -> Result[None, GitError]:
        ...

    def commits_between(self, since: str | None, until: str = "HEAD") -> Result[list[str], GitError]:
        """Commit subjects reachable from ``until`` but not from ``since``."""
        ...

    def archive(
        self,
        ref: str,
        fmt: ArchiveFormat,
        prefix: str,
        output: Path,
    ) -> Result[None, GitError]:
        """Write the tree of ``ref`` to ``output`` with every path under ``prefix/``."""
        ...

    def push_tag(self, remote: str, tag: str) -> Result[str, GitError]:
        ...
