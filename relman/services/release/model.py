from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from relman.git.backend import ArchiveFormat, StatusEntry
from relman.services.release.errors import ReleaseError
from relman.services.release.semver import Version


@dataclass(frozen=True, slots=True)
class ReleaseFlags:
    dry_run: bool = False
    force: bool = False
    no_archive: bool = False
    push: bool = False


@dataclass(frozen=True, slots=True)
class ReleaseRequest:
    """Validated input for one run."""

    version: Version
    flags: ReleaseFlags
    remote: str = "origin"

    @property
    def tag(self) -> str:
        return self.version.tag


@dataclass(frozen=True, slots=True)
class RepositoryState:
    """Snapshot of the repository taken during validation."""

    root: Path
    head_commit: str
    latest_tag: str | None
    changed: tuple[StatusEntry, ...]
    target_tag_exists: bool

    @property
    def is_clean(self) -> bool:
        return not self.changed


@dataclass(frozen=True, slots=True)
class ReleasePlan:
    version: Version
    tag: str
    head_commit: str
    previous_tag: str | None
    tag_message: str
    archive_prefix: str
    releases_dir: Path
    tar_path: Path
    zip_path: Path
    replace_existing_tag: bool

    def archive_targets(self) -> tuple[tuple[ArchiveFormat, Path], ...]:
        return (("tar.gz", self.tar_path), ("zip", self.zip_path))


@dataclass(frozen=True, slots=True)
class ArchiveFile:
    path: Path
    size_bytes: int


@dataclass(frozen=True, slots=True)
class ReleaseOutcome:
    request: ReleaseRequest
    plan: ReleasePlan
    tag_created: bool
    archives: tuple[ArchiveFile, ...] = ()
    pushed: bool = False
    push_error: ReleaseError | None = None
