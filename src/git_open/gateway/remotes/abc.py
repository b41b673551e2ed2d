"""Abstract interface for git remote operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class GitRemotes(ABC):
    """Abstract interface for git remote operations.

    All implementations (real, fake) must implement this interface.
    """

    @abstractmethod
    def list_remotes(self, cwd: Path) -> str:
        """Return the output of `git remote --verbose` run in cwd.

        Each line has the form `<name> <url> (<direction>)`.

        Raises:
            ExecutionError: If git could not be run
        """
        ...
