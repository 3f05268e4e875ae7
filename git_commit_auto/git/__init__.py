"""Git Operations Package"""

from git_commit_auto.git.repository import GitError, GitRepository, VersionControl

__all__ = [
    "GitError",
    "GitRepository",
    "VersionControl",
]
