"""Git implementation of RepositoryBackend.

Every operation shells out to ``git -C <path>`` through
``relman.platform.process.run`` and returns a Result.

Usage:
    repo = Repository(Path.cwd())

    match repo.head():
        case Ok(sha):
            print(f"HEAD is {sha}")
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from pathlib import Path

from relman.core.result import Err, Ok, Result
from relman.git.backend import ArchiveFormat, GitError, StatusEntry
from relman.platform.process import ProcessError
from relman.platform.process import run as run_process

__all__ = ["Repository"]


def _git_error(command: str, e: ProcessError, fallback: str) -> GitError:
    return GitError(
        command=command,
        message=e.stderr.strip() or e.stdout.strip() or fallback,
        returncode=e.returncode,
    )


class Repository:
    """Git repository backend.

    Attributes:
        path: Any directory inside the working tree
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def is_repository(self) -> bool:
        """Check that ``path`` is inside a git working tree."""
        return isinstance(self._run(["rev-parse", "--git-dir"]), Ok)

    def toplevel(self) -> Result[Path, GitError]:
        result = self._run(["rev-parse", "--show-toplevel"])
        match result:
            case Err(e):
                return Err(_git_error("rev-parse --show-toplevel", e, "not a git repository"))
            case Ok(stdout):
                return Ok(Path(stdout.strip()))

    def head(self) -> Result[str, GitError]:
        result = self._run(["rev-parse", "HEAD"])
        match result:
            case Err(e):
                return Err(_git_error("rev-parse HEAD", e, "no commits yet"))
            case Ok(stdout):
                return Ok(stdout.strip())

    def latest_tag(self) -> str | None:
        """Nearest tag reachable from HEAD (``git describe --tags --abbrev=0``)."""
        result = self._run(["describe", "--tags", "--abbrev=0"])
        match result:
            case Ok(stdout):
                return stdout.strip() or None
            case Err(_):
                return None

    def tag_exists(self, tag: str) -> bool:
        result = self._run(["rev-parse", "--verify", "--quiet", f"refs/tags/{tag}"])
        return isinstance(result, Ok)

    def changed_paths(self) -> Result[tuple[StatusEntry, ...], GitError]:
        """Staged and unstaged changes to tracked files.

        Untracked files are ignored; they never end up in an archive built
        from a tag.
        """
        result = self._run(["status", "--porcelain=v1", "--untracked-files=no"])
        match result:
            case Err(e):
                return Err(_git_error("status", e, "git status failed"))
            case Ok(stdout):
                entries = [self._parse_entry(line) for line in stdout.splitlines()]
                return Ok(tuple(e for e in entries if e is not None))

    def create_tag(self, tag: str, message: str) -> Result[None, GitError]:
        result = self._run(["tag", "-a", tag, "-m", message])
        if isinstance(result, Err):
            return Err(_git_error("tag -a", result.error, f"failed to create tag {tag}"))
        return Ok(None)

    def delete_tag(self, tag: str) -> Result[None, GitError]:
        result = self._run(["tag", "-d", tag])
        if isinstance(result, Err):
            return Err(_git_error("tag -d", result.error, f"failed to delete tag {tag}"))
        return Ok(None)

    def commits_between(self, since: str | None, until: str = "HEAD") -> Result[list[str], GitError]:
        rev_range = until if since is None else f"{since}..{until}"
        result = self._run(["log", "--pretty=format:%s", rev_range])
        match result:
            case Err(e):
                return Err(_git_error("log", e, f"git log {rev_range} failed"))
            case Ok(stdout):
                return Ok([line for line in stdout.splitlines() if line.strip()])

    def archive(
        self,
        ref: str,
        fmt: ArchiveFormat,
        prefix: str,
        output: Path,
    ) -> Result[None, GitError]:
        result = self._run(
            [
                "archive",
                f"--format={fmt}",
                f"--prefix={prefix}/",
                f"--output={output}",
                ref,
            ]
        )
        if isinstance(result, Err):
            return Err(_git_error("archive", result.error, f"failed to create {fmt} archive"))
        return Ok(None)

    def push_tag(self, remote: str, tag: str) -> Result[str, GitError]:
        result = self._run(["push", remote, tag])
        match result:
            case Err(e):
                return Err(_git_error("push", e, f"failed to push {tag} to {remote}"))
            case Ok(stdout):
                return Ok(stdout.strip())

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path)

    def _parse_entry(self, line: str) -> StatusEntry | None:
        """Parse a porcelain v1 line: ``XY path``."""
        if len(line) < 4:
            return None
        return StatusEntry(xy=line[:2], path=line[3:])
