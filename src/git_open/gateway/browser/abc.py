"""Interface for opening the chosen remote URL.

Implementations either spawn a real browser command, report the URL in
dry-run mode, or record it in memory for tests.
"""

from abc import ABC, abstractmethod


class BrowserLauncher(ABC):
    """Opens a URL and reports the exit status of whatever opened it."""

    @abstractmethod
    def launch(self, url: str) -> int:
        """Launch a URL in a web browser and wait for the command to exit.

        Args:
            url: The URL to open in the browser

        Returns:
            Exit status of the browser command

        Raises:
            ExecutionError: If the browser command could not be run
            UnsupportedPlatformError: If this platform has no launch command
        """
        ...
