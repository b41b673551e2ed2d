"""No-op BrowserLauncher for dry-run mode."""

from git_open.core.output import user_output
from git_open.gateway.browser.abc import BrowserLauncher


class DryRunBrowserLauncher(BrowserLauncher):
    """Reports the URL that would be opened instead of launching a browser."""

    def launch(self, url: str) -> int:
        user_output(f"Would open: {url}")
        return 0
