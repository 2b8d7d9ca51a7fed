from __future__ import annotations

import click
import typer
from typer.core import TyperCommand

from relman.cli.context import build_context
from relman.core.errors import ErrorCode
from relman.core.result import Err
from relman.output.errors import print_release_error, release_error_exit_code
from relman.services.release.model import ReleaseFlags
from relman.services.release.service import ReleaseManager

_EPILOG = """\
VERSION is X.Y.Z: major (breaking changes), minor (new features), patch (bug fixes).
Components are plain integers without leading zeros: 1.2.0 is accepted, 1.02.0 is not.

Examples: 'relman 1.2.3' creates v1.2.3; 'relman --dry-run 1.2.3' previews it;
'relman --push 1.2.3' also pushes the tag; 'relman --force 1.2.3' recreates an existing tag.

Prerequisites: a clean working directory, a Git repository with at least one commit.

Environment: GIT_REMOTE overrides the remote name (default: origin).
"""

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


class ReleaseCommand(TyperCommand):
    """Reports command-line usage errors with the release failure exit code."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = int(ErrorCode.RELEASE_ERROR)
            raise


@app.command(cls=ReleaseCommand, epilog=_EPILOG)
def release(
    version: str | None = typer.Argument(
        None,
        metavar="VERSION",
        help="Semantic version in format X.Y.Z (e.g., 1.2.3)",
        show_default=False,
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show what would be done without making changes"),
    force: bool = typer.Option(False, "--force", help="Force creation even if the tag exists"),
    no_archive: bool = typer.Option(False, "--no-archive", help="Skip creating source archives"),
    push: bool = typer.Option(False, "--push", help="Push the tag to the remote repository"),
) -> None:
    """Create a semantic versioned release with a Git tag and source archives."""
    ctx = build_context()

    if version is None:
        ctx.console.error("Version is required")
        ctx.console.detail("Run 'relman --help' for usage.")
        raise typer.Exit(code=int(ErrorCode.RELEASE_ERROR))

    manager = ReleaseManager(backend=ctx.repo, console=ctx.console, config=ctx.config)
    flags = ReleaseFlags(dry_run=dry_run, force=force, no_archive=no_archive, push=push)

    result = manager.release(version, flags)
    if isinstance(result, Err):
        print_release_error(result.error, ctx.console)
        raise typer.Exit(code=release_error_exit_code(result.error))


def main() -> None:
    app()
