from __future__ import annotations

from relman.core.result import Err, Ok, Result
from relman.git.backend import RepositoryBackend
from relman.output.console import ConsoleProtocol
from relman.services.release.errors import ReleaseError


def push_command(remote: str, tag: str) -> str:
    return f"git push {remote} {tag}"


def push_release_tag(
    *,
    backend: RepositoryBackend,
    remote: str,
    tag: str,
    push: bool,
    dry_run: bool,
    console: ConsoleProtocol,
) -> Result[bool, ReleaseError]:
    """Push the tag when requested.

    Returns Ok(True) only when the tag reached the remote. Err(push_failed)
    is for the caller to downgrade; the local tag is unaffected.
    """
    if not push:
        console.info("To push this release to remote repository:")
        console.info(f"  {push_command(remote, tag)}")
        return Ok(False)

    if dry_run:
        console.info(f"dry-run: push tag: {tag} to {remote}")
        return Ok(False)

    console.info(f"push tag: {tag} to {remote}")
    result = backend.push_tag(remote, tag)
    if isinstance(result, Err):
        return Err(
            ReleaseError(
                kind="push_failed",
                message=f"Failed to push tag {tag} to {remote}",
                hint=result.error.message,
            )
        )

    console.success(f"Pushed tag to remote: {tag}")
    return Ok(True)
