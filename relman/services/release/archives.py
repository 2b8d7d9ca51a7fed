from __future__ import annotations

from relman.core.result import Err, Ok, Result
from relman.git.backend import RepositoryBackend
from relman.output.console import ConsoleProtocol, Style
from relman.services.release.errors import ReleaseError
from relman.services.release.model import ArchiveFile, ReleasePlan

_SIZE_UNITS = ("B", "K", "M", "G", "T")


def human_size(size_bytes: int) -> str:
    """Format a byte count like ``du -h`` (1024-based, one decimal below 10)."""
    if size_bytes < 1024:
        return f"{size_bytes}B"
    size = float(size_bytes)
    unit = _SIZE_UNITS[0]
    for unit in _SIZE_UNITS[1:]:
        size /= 1024
        if size < 1024:
            break
    if size < 10:
        return f"{size:.1f}{unit}"
    return f"{size:.0f}{unit}"


def create_source_archives(
    *,
    backend: RepositoryBackend,
    plan: ReleasePlan,
    dry_run: bool,
    no_archive: bool,
    console: ConsoleProtocol,
) -> Result[tuple[ArchiveFile, ...], ReleaseError]:
    """Write ``.tar.gz`` and ``.zip`` archives of the release tag.

    Archives come from the tag's tree, not the working directory. A
    failure here leaves an already-created tag in place.
    """
    if no_archive:
        console.info("Skipping archive creation (--no-archive specified)")
        return Ok(())

    if dry_run:
        for _, path in plan.archive_targets():
            console.info(f"dry-run: create archive: {path}")
        return Ok(())

    try:
        plan.releases_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return Err(
            ReleaseError(
                kind="archive_creation_failed",
                message=f"Failed to create releases directory: {plan.releases_dir}",
                hint=str(e),
            )
        )

    created: list[ArchiveFile] = []
    for fmt, path in plan.archive_targets():
        console.info(f"create archive: {path}")
        result = backend.archive(plan.tag, fmt, plan.archive_prefix, path)
        if isinstance(result, Err):
            return Err(
                ReleaseError(
                    kind="archive_creation_failed",
                    message=f"Failed to create {fmt} archive",
                    hint=result.error.message,
                )
            )
        try:
            size = path.stat().st_size
        except OSError as e:
            return Err(
                ReleaseError(
                    kind="archive_creation_failed",
                    message=f"Archive missing after creation: {path}",
                    hint=str(e),
                )
            )
        console.success(f"Created: {path}")
        created.append(ArchiveFile(path=path, size_bytes=size))

    console.info("Archive sizes:")
    for archive in created:
        console.print(f"  {human_size(archive.size_bytes)} {archive.path.name}", Style.DIM)

    return Ok(tuple(created))
