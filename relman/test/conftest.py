"""Shared fixtures: throwaway git repositories for end-to-end tests."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from relman.test._git import commit_file, git


@pytest.fixture
def empty_git_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A freshly initialized repository with no commits."""
    if shutil.which("git") is None:
        pytest.skip("git is not available")

    monkeypatch.delenv("GIT_REMOTE", raising=False)
    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "config", "user.name", "Release Tester")
    git(repo, "config", "user.email", "release-tester@example.com")
    git(repo, "config", "commit.gpgsign", "false")
    git(repo, "config", "tag.gpgsign", "false")
    return repo


@pytest.fixture
def git_repo(empty_git_repo: Path) -> Path:
    """A repository with a single commit and no tags."""
    commit_file(empty_git_repo, "README.md", "hello\n", "initial commit")
    return empty_git_repo
