"""Fake git remote operations for testing."""

from pathlib import Path

from git_open.core.errors import ExecutionError
from git_open.gateway.remotes.abc import GitRemotes


class FakeGitRemotes(GitRemotes):
    """In-memory fake implementation of git remote operations.

    State Management:
    - remote_output: dict[Path, str] - cwd -> `git remote --verbose` output
    - list_error: ExecutionError | None - raised by list_remotes() when set

    Mutation Tracking:
    - listed_dirs: list[Path] - cwd of each list_remotes() call
    """

    def __init__(
        self,
        *,
        remote_output: dict[Path, str] | None = None,
        list_error: ExecutionError | None = None,
    ) -> None:
        self._remote_output = remote_output or {}
        self._list_error = list_error

        # Mutation tracking
        self._listed_dirs: list[Path] = []

    def list_remotes(self, cwd: Path) -> str:
        self._listed_dirs.append(cwd)
        if self._list_error is not None:
            raise self._list_error
        return self._remote_output.get(cwd, "")

    # Read-only properties for test assertions
    @property
    def listed_dirs(self) -> list[Path]:
        return self._listed_dirs.copy()
