"""Recording BrowserLauncher for tests."""

from git_open.gateway.browser.abc import BrowserLauncher


class FakeBrowserLauncher(BrowserLauncher):
    """Records every URL passed to launch() and returns a fixed exit status.

    The exit status lets tests check that a failing browser command does not
    change the outcome of git-open.
    """

    def __init__(self, *, exit_code: int = 0) -> None:
        """Create FakeBrowserLauncher.

        Args:
            exit_code: Status returned from every launch() call
        """
        self._exit_code = exit_code
        self._launched_urls: list[str] = []

    def launch(self, url: str) -> int:
        self._launched_urls.append(url)
        return self._exit_code

    @property
    def launched_urls(self) -> list[str]:
        """URLs passed to launch(), in call order."""
        return self._launched_urls
