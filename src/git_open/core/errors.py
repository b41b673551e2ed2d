"""Errors raised while resolving and opening a remote URL."""


class GitOpenError(Exception):
    """Base exception for git-open failures reported to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(GitOpenError):
    """Raised when no remote URL is configured."""


class ExecutionError(GitOpenError):
    """Raised when an external command could not be run."""


class UnsupportedPlatformError(GitOpenError):
    """Raised when there is no known way to open a browser on this platform."""
