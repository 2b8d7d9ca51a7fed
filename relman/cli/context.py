from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relman.core.config import ReleaseConfig, load_release_config
from relman.core.errors import ErrorCode
from relman.core.result import Err
from relman.git.backend import RepositoryBackend
from relman.git.repository import Repository
from relman.output.console import ConsoleProtocol, RichConsole
from relman.output.errors import print_config_error


@dataclass(frozen=True, slots=True)
class CLIContext:
    repo: RepositoryBackend
    config: ReleaseConfig
    console: ConsoleProtocol


def build_context(cwd: Path | None = None) -> CLIContext:
    console = RichConsole()
    repo = Repository(cwd or Path.cwd())

    # Outside a repository the config falls back to cwd; validation reports the error.
    top = repo.toplevel()
    root = repo.path if isinstance(top, Err) else top.value

    config_result = load_release_config(root)
    if isinstance(config_result, Err):
        print_config_error(config_result.error, console)
        raise typer.Exit(code=int(ErrorCode.RELEASE_ERROR))

    return CLIContext(repo=repo, config=config_result.value, console=console)
