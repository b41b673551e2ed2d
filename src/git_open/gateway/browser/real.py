"""Real BrowserLauncher implementation using a platform-specific command."""

import logging
import subprocess
import sys

from git_open.core.errors import ExecutionError
from git_open.gateway.browser.abc import BrowserLauncher
from git_open.gateway.browser.platform import Platform

logger = logging.getLogger(__name__)


class RealBrowserLauncher(BrowserLauncher):
    """Production implementation that runs `open` on macOS or $BROWSER on Linux."""

    def __init__(self, *, browser: str, sys_platform: str | None = None) -> None:
        """Create RealBrowserLauncher.

        Args:
            browser: Browser command used on Linux
            sys_platform: Platform name to dispatch on. If None, uses sys.platform.
        """
        self._browser = browser
        self._sys_platform = sys_platform if sys_platform is not None else sys.platform
        self._platform = Platform.detect(self._sys_platform)

    def launch(self, url: str) -> int:
        """Run the platform's open command on url and wait for it to exit.

        The exit status is returned as-is; a browser that exits non-zero is
        not treated as a failure.
        """
        cmd = self._platform.launch_command(
            url, browser=self._browser, sys_platform=self._sys_platform
        )
        logger.debug("Launching browser: %s", " ".join(cmd))
        try:
            result = subprocess.run(cmd, check=False)
        except OSError as e:
            raise ExecutionError(f"Failed to run '{cmd[0]}': {e}") from e

        logger.debug("%s exited with %d", cmd[0], result.returncode)
        return result.returncode
