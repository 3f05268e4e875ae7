"""Git Repository - The version-control operations the commit flow needs."""

import subprocess
from abc import ABC, abstractmethod
from typing import Optional


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class VersionControl(ABC):
    """Narrow port over the version-control tool.

    The commit flow only talks to this interface, so tests can swap in
    an in-memory fake.
    """

    @abstractmethod
    def staged_diff(self) -> str:
        """Diff of the index against HEAD."""

    @abstractmethod
    def last_commit_diff(self) -> str:
        """Diff of HEAD against its parent."""

    @abstractmethod
    def has_parent_commit(self) -> bool:
        """True when HEAD has a parent to diff against."""

    @abstractmethod
    def commit(self, message: str) -> None:
        pass

    @abstractmethod
    def amend(self, message: str) -> None:
        pass

    @abstractmethod
    def push(self) -> None:
        pass


class GitRepository(VersionControl):
    """VersionControl backed by the git executable."""

    def __init__(self, cwd: Optional[str] = None):
        self.cwd = cwd
        self._verify_in_repo()

    def _run_git(self, *args: str, capture: bool = True) -> str:
        """Run a git command and return stdout.

        With capture=False git writes straight to the terminal, which is what
        we want for commit and push progress.
        """
        try:
            result = subprocess.run(
                ['git', *args],
                cwd=self.cwd,
                capture_output=capture,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout or ""
        except subprocess.CalledProcessError as e:
            details = f"\n{e.stderr.strip()}" if e.stderr else ""
            raise GitError(f"Git command failed: git {' '.join(args)}{details}")
        except FileNotFoundError:
            raise GitError("git is not installed or not in PATH")

    def _verify_in_repo(self) -> None:
        """Fail fast if we're not in a git repository."""
        try:
            self._run_git('rev-parse', '--git-dir')
        except GitError as e:
            if "not installed" in str(e):
                raise
            raise GitError("Not inside a git repository")

    def staged_diff(self) -> str:
        return self._run_git('diff', '--staged')

    def last_commit_diff(self) -> str:
        return self._run_git('diff', 'HEAD~1..HEAD')

    def has_parent_commit(self) -> bool:
        try:
            self._run_git('rev-parse', '--verify', '--quiet', 'HEAD~1')
        except GitError:
            return False
        return True

    def commit(self, message: str) -> None:
        self._run_git('commit', '-m', message, capture=False)

    def amend(self, message: str) -> None:
        self._run_git('commit', '--amend', '-m', message, capture=False)

    def push(self) -> None:
        self._run_git('push', capture=False)
