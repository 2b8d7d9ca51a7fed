from __future__ import annotations

from datetime import datetime

from relman.core.result import Err, Ok, Result
from relman.git.backend import RepositoryBackend
from relman.output.console import ConsoleProtocol
from relman.services.release.errors import ReleaseError
from relman.services.release.model import ReleasePlan

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"
INITIAL_RELEASE_BODY = "Initial release."


def render_changelog(subjects: list[str], *, previous_tag: str | None) -> str:
    if previous_tag is None:
        return INITIAL_RELEASE_BODY
    return "\n".join(f"- {subject}" for subject in subjects)


def render_tag_message(
    *,
    tag: str,
    changelog: str,
    head_commit: str,
    released_at: datetime,
) -> str:
    lines = [
        f"Release {tag}",
        "",
        "Changelog:",
        changelog,
        "",
        f"Release Date: {released_at.strftime(TIMESTAMP_FORMAT)}",
        f"Git Commit: {head_commit}",
    ]
    return "\n".join(lines)


def load_changelog(
    *,
    backend: RepositoryBackend,
    previous_tag: str | None,
) -> Result[str, ReleaseError]:
    if previous_tag is None:
        return Ok(render_changelog([], previous_tag=None))

    subjects = backend.commits_between(previous_tag, "HEAD")
    if isinstance(subjects, Err):
        return Err(
            ReleaseError(
                kind="tag_creation_failed",
                message=f"Failed to read commits since {previous_tag}",
                hint=subjects.error.message,
            )
        )
    return Ok(render_changelog(subjects.value, previous_tag=previous_tag))


def create_release_tag(
    *,
    backend: RepositoryBackend,
    plan: ReleasePlan,
    dry_run: bool,
    console: ConsoleProtocol,
) -> Result[bool, ReleaseError]:
    """Create the annotated release tag.

    Returns Ok(True) when a tag was written, Ok(False) on a dry run.
    With ``plan.replace_existing_tag`` the old tag is deleted first.
    """
    tag = plan.tag
    prefix = "dry-run: " if dry_run else ""

    if plan.replace_existing_tag:
        console.warning(f"{prefix}delete existing tag: {tag}")
        if not dry_run:
            deleted = backend.delete_tag(tag)
            if isinstance(deleted, Err):
                return Err(
                    ReleaseError(
                        kind="tag_creation_failed",
                        message=f"Failed to delete existing tag: {tag}",
                        hint=deleted.error.message,
                    )
                )

    console.info(f"{prefix}create tag: {tag}")
    if dry_run:
        return Ok(False)

    created = backend.create_tag(tag, plan.tag_message)
    if isinstance(created, Err):
        return Err(
            ReleaseError(
                kind="tag_creation_failed",
                message=f"Failed to create tag: {tag}",
                hint=created.error.message,
            )
        )

    console.success(f"Created tag: {tag}")
    return Ok(True)
