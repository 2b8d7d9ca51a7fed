"""Version-control access.

Usage:
    from relman.git import Repository

    repo = Repository(Path.cwd())
    if repo.is_repository():
        print(repo.latest_tag())
"""

from relman.git.backend import ArchiveFormat, GitError, RepositoryBackend, StatusEntry
from relman.git.repository import Repository

__all__ = [
    "ArchiveFormat",
    "GitError",
    "Repository",
    "RepositoryBackend",
    "StatusEntry",
]
