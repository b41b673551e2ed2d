"""Console abstraction for testability.

This module provides an ABC for the interactive terminal I/O used when the
user has to choose between several remotes, so tests can script input
without a real TTY.
"""

from abc import ABC, abstractmethod


class Console(ABC):
    """Abstract interface for line-based console interaction."""

    @abstractmethod
    def echo(self, message: str) -> None:
        """Write a line to standard output."""
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        """Write a line to standard error."""
        ...

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """Show a prompt on standard output and read one line of input.

        Args:
            prompt: Text shown before the cursor

        Returns:
            The line entered by the user, which may be empty

        Raises:
            click.Abort: If input ends or the user interrupts the prompt
        """
        ...
