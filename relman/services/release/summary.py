from __future__ import annotations

from relman.output.console import ConsoleProtocol, Style
from relman.services.release.model import ReleaseOutcome, ReleaseRequest
from relman.services.release.publish import push_command

PROG_NAME = "relman"


def real_run_command(request: ReleaseRequest) -> str:
    """The command that repeats a dry run for real."""
    flags = request.flags
    args = [PROG_NAME]
    if flags.force:
        args.append("--force")
    if flags.no_archive:
        args.append("--no-archive")
    if flags.push:
        args.append("--push")
    args.append(str(request.version))
    return " ".join(args)


def print_summary(*, outcome: ReleaseOutcome, console: ConsoleProtocol) -> None:
    request = outcome.request
    plan = outcome.plan
    flags = request.flags

    console.newline()
    console.header("=== Release Summary ===")
    console.newline()
    console.info(f"Version: {plan.version}")
    console.info(f"Git Tag: {plan.tag}")
    console.info(f"Commit: {plan.head_commit}")

    if outcome.archives:
        console.newline()
        console.info("Release Archives:")
        for archive in outcome.archives:
            console.success(str(archive.path))

    console.newline()
    if flags.dry_run:
        console.warning("This was a dry run - no changes were made")
        console.newline()
        console.info("To create the release for real:")
        console.info(f"  {real_run_command(request)}")
        return

    console.success(f"Release {plan.tag} created successfully!")
    if outcome.pushed:
        return

    console.newline()
    if outcome.push_error is not None:
        console.warning("Tag was created locally but not pushed")
    console.info("Next steps:")
    console.print(f"  1. Push the tag: {push_command(request.remote, plan.tag)}", Style.DIM)
    console.print("  2. Create a release on your hosting service (optional)", Style.DIM)
    console.print("  3. Update documentation (if needed)", Style.DIM)
