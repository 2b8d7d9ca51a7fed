"""Pre-flight checks run before anything is mutated.

Order matches what users see on failure: version format, repository,
working tree, tag existence. Version progression lives in
``progression.py``.
"""

from __future__ import annotations

from relman.core.result import Err, Ok, Result
from relman.git.backend import RepositoryBackend, StatusEntry
from relman.output.console import ConsoleProtocol
from relman.services.release.errors import ReleaseError
from relman.services.release.model import ReleaseFlags, ReleaseRequest, RepositoryState
from relman.services.release.semver import parse_version


def parse_request(
    raw_version: str,
    *,
    flags: ReleaseFlags,
    remote: str,
) -> Result[ReleaseRequest, ReleaseError]:
    version = parse_version(raw_version)
    if version is None:
        return Err(
            ReleaseError(
                kind="invalid_version_format",
                message=f"Invalid version format: {raw_version}",
                hint="Expected format: X.Y.Z (e.g., 1.2.3)",
            )
        )
    return Ok(ReleaseRequest(version=version, flags=flags, remote=remote))


def inspect_repository(
    *,
    backend: RepositoryBackend,
    request: ReleaseRequest,
    console: ConsoleProtocol,
) -> Result[RepositoryState, ReleaseError]:
    if not backend.is_repository():
        return Err(ReleaseError(kind="not_a_repository", message="Not in a Git repository"))

    root = backend.toplevel()
    if isinstance(root, Err):
        return Err(
            ReleaseError(
                kind="not_a_repository",
                message="Not in a Git working tree",
                hint=root.error.message,
            )
        )

    head = backend.head()
    if isinstance(head, Err):
        return Err(
            ReleaseError(
                kind="not_a_repository",
                message="Repository has no commits",
                hint="Create at least one commit before releasing.",
            )
        )

    flags = request.flags
    changed: tuple[StatusEntry, ...] = ()
    if flags.dry_run:
        console.info("dry-run: skipping working directory check")
    else:
        status = backend.changed_paths()
        if isinstance(status, Err):
            return Err(
                ReleaseError(
                    kind="dirty_working_tree",
                    message="Unable to determine working tree state",
                    hint=status.error.message,
                )
            )
        changed = status.value
        if changed:
            return Err(
                ReleaseError(
                    kind="dirty_working_tree",
                    message="Working directory is not clean",
                    hint="Commit or stash your changes before creating a release",
                    details=tuple(str(entry) for entry in changed),
                )
            )

    tag = request.tag
    exists = backend.tag_exists(tag)
    if exists:
        if not flags.force:
            return Err(
                ReleaseError(
                    kind="tag_already_exists",
                    message=f"Tag {tag} already exists",
                    hint="Use --force to overwrite or choose a different version",
                )
            )
        console.warning(f"Tag {tag} already exists but --force specified")

    return Ok(
        RepositoryState(
            root=root.value,
            head_commit=head.value,
            latest_tag=backend.latest_tag(),
            changed=changed,
            target_tag_exists=exists,
        )
    )
