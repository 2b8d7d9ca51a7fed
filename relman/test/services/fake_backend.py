"""In-memory RepositoryBackend for pipeline tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from relman.core.result import Err, Ok, Result
from relman.git.backend import ArchiveFormat, GitError, StatusEntry

HEAD_SHA = "0123456789abcdef0123456789abcdef01234567"


def _empty_tags() -> dict[str, str]:
    return {}


def _empty_entries() -> list[StatusEntry]:
    return []


def _empty_strs() -> list[str]:
    return []


@dataclass
class FakeBackend:
    root: Path
    repository: bool = True
    head_sha: str | None = HEAD_SHA
    latest: str | None = None
    tags: dict[str, str] = field(default_factory=_empty_tags)
    changed: list[StatusEntry] = field(default_factory=_empty_entries)
    subjects: list[str] = field(default_factory=_empty_strs)
    fail_create_tag: bool = False
    fail_archive_formats: frozenset[str] = frozenset()
    fail_push: bool = False
    calls: list[str] = field(default_factory=_empty_strs)
    pushed: list[str] = field(default_factory=_empty_strs)

    def is_repository(self) -> bool:
        return self.repository

    def toplevel(self) -> Result[Path, GitError]:
        if not self.repository:
            return Err(GitError(command="rev-parse --show-toplevel", message="not a git repository"))
        return Ok(self.root)

    def head(self) -> Result[str, GitError]:
        if self.head_sha is None:
            return Err(GitError(command="rev-parse HEAD", message="unknown revision HEAD"))
        return Ok(self.head_sha)

    def latest_tag(self) -> str | None:
        return self.latest

    def tag_exists(self, tag: str) -> bool:
        return tag in self.tags

    def changed_paths(self) -> Result[tuple[StatusEntry, ...], GitError]:
        self.calls.append("status")
        return Ok(tuple(self.changed))

    def create_tag(self, tag: str, message: str) -> Result[None, GitError]:
        self.calls.append(f"create_tag {tag}")
        if self.fail_create_tag:
            return Err(GitError(command="tag -a", message="cannot lock ref"))
        self.tags[tag] = message
        return Ok(None)

    def delete_tag(self, tag: str) -> Result[None, GitError]:
        self.calls.append(f"delete_tag {tag}")
        self.tags.pop(tag, None)
        return Ok(None)

    def commits_between(self, since: str | None, until: str = "HEAD") -> Result[list[str], GitError]:
        self.calls.append(f"log {since}..{until}")
        return Ok(list(self.subjects))

    def archive(
        self,
        ref: str,
        fmt: ArchiveFormat,
        prefix: str,
        output: Path,
    ) -> Result[None, GitError]:
        self.calls.append(f"archive {fmt} {ref}")
        if fmt in self.fail_archive_formats:
            return Err(GitError(command="archive", message=f"{fmt} failed"))
        output.write_bytes(f"{prefix}/ from {ref}\n".encode())
        return Ok(None)

    def push_tag(self, remote: str, tag: str) -> Result[str, GitError]:
        self.calls.append(f"push {remote} {tag}")
        if self.fail_push:
            return Err(GitError(command="push", message=f"'{remote}' does not appear to be a git repository"))
        self.pushed.append(f"{remote} {tag}")
        return Ok("")

    @property
    def mutations(self) -> list[str]:
        return [c for c in self.calls if c.split(" ", 1)[0] in {"create_tag", "delete_tag", "archive", "push"}]
