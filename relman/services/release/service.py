"""Release pipeline.

One call to ``ReleaseManager.release`` runs, in order: request parsing,
repository validation, version progression, planning, tag creation,
archive packaging, tag push and the summary. The first fatal error stops
the pipeline and is returned; completed steps are never rolled back.
A failed push is recorded on the outcome instead of failing the run.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from relman.core.config import ReleaseConfig
from relman.core.result import Err, Ok, Result
from relman.git.backend import RepositoryBackend
from relman.output.console import ConsoleProtocol
from relman.services.release.archives import create_source_archives
from relman.services.release.errors import ReleaseError
from relman.services.release.model import (
    ReleaseFlags,
    ReleaseOutcome,
    ReleasePlan,
    ReleaseRequest,
    RepositoryState,
)
from relman.services.release.progression import check_progression
from relman.services.release.publish import push_command, push_release_tag
from relman.services.release.summary import print_summary
from relman.services.release.tagging import (
    create_release_tag,
    load_changelog,
    render_tag_message,
)
from relman.services.release.validation import inspect_repository, parse_request

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


def archive_prefix(project_name: str, request: ReleaseRequest) -> str:
    return f"{project_name}-{request.tag}"


def plan_release(
    *,
    backend: RepositoryBackend,
    request: ReleaseRequest,
    state: RepositoryState,
    previous_tag: str | None,
    config: ReleaseConfig,
    released_at: datetime,
) -> Result[ReleasePlan, ReleaseError]:
    changelog = load_changelog(backend=backend, previous_tag=previous_tag)
    if isinstance(changelog, Err):
        return changelog

    prefix = archive_prefix(config.project_name, request)
    releases_dir = config.releases_path(state.root)
    message = render_tag_message(
        tag=request.tag,
        changelog=changelog.value,
        head_commit=state.head_commit,
        released_at=released_at,
    )
    return Ok(
        ReleasePlan(
            version=request.version,
            tag=request.tag,
            head_commit=state.head_commit,
            previous_tag=previous_tag,
            tag_message=message,
            archive_prefix=prefix,
            releases_dir=releases_dir,
            tar_path=releases_dir / f"{prefix}.tar.gz",
            zip_path=releases_dir / f"{prefix}.zip",
            replace_existing_tag=request.flags.force and state.target_tag_exists,
        )
    )


class ReleaseManager:
    """Runs a release against one repository."""

    def __init__(
        self,
        *,
        backend: RepositoryBackend,
        console: ConsoleProtocol,
        config: ReleaseConfig,
        clock: Clock = utc_now,
    ) -> None:
        self._backend = backend
        self._console = console
        self._config = config
        self._clock = clock

    def release(self, raw_version: str, flags: ReleaseFlags) -> Result[ReleaseOutcome, ReleaseError]:
        console = self._console
        console.header(f"=== {self._config.display_name} Release Creator ===")
        console.newline()

        request = parse_request(raw_version, flags=flags, remote=self._config.remote)
        if isinstance(request, Err):
            return request
        req = request.value

        state = inspect_repository(backend=self._backend, request=req, console=console)
        if isinstance(state, Err):
            return state

        previous = check_progression(
            version=req.version,
            latest_tag=state.value.latest_tag,
            force=flags.force,
            console=console,
        )
        if isinstance(previous, Err):
            return previous

        console.info(f"Current version: {state.value.latest_tag or 'No previous releases'}")
        console.info(f"New version: {req.tag}")
        if flags.dry_run:
            console.warning("DRY RUN MODE - No changes will be made")
        console.newline()

        plan = plan_release(
            backend=self._backend,
            request=req,
            state=state.value,
            previous_tag=previous.value,
            config=self._config,
            released_at=self._clock(),
        )
        if isinstance(plan, Err):
            return plan

        return self._execute(req, plan.value)

    def _execute(self, request: ReleaseRequest, plan: ReleasePlan) -> Result[ReleaseOutcome, ReleaseError]:
        console = self._console
        flags = request.flags

        tagged = create_release_tag(
            backend=self._backend,
            plan=plan,
            dry_run=flags.dry_run,
            console=console,
        )
        if isinstance(tagged, Err):
            return tagged

        archives = create_source_archives(
            backend=self._backend,
            plan=plan,
            dry_run=flags.dry_run,
            no_archive=flags.no_archive,
            console=console,
        )
        if isinstance(archives, Err):
            return archives

        pushed = push_release_tag(
            backend=self._backend,
            remote=request.remote,
            tag=plan.tag,
            push=flags.push,
            dry_run=flags.dry_run,
            console=console,
        )
        push_error: ReleaseError | None = None
        if isinstance(pushed, Err):
            push_error = pushed.error
            console.warning(push_error.pretty())
            console.warning(f"Retry manually with: {push_command(request.remote, plan.tag)}")

        outcome = ReleaseOutcome(
            request=request,
            plan=plan,
            tag_created=tagged.value,
            archives=archives.value,
            pushed=isinstance(pushed, Ok) and pushed.value,
            push_error=push_error,
        )
        print_summary(outcome=outcome, console=console)
        return Ok(outcome)
