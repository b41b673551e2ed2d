"""Platform detection and the command each platform uses to open a URL."""

from enum import Enum

from git_open.core.errors import UnsupportedPlatformError


class Platform(Enum):
    """Desktop platform families, each with its own way of opening a URL."""

    MACOS = "macos"
    LINUX = "linux"
    UNSUPPORTED = "unsupported"

    @classmethod
    def detect(cls, sys_platform: str) -> "Platform":
        """Map a `sys.platform` value to a Platform.

        Args:
            sys_platform: Value of sys.platform, e.g. "darwin" or "linux"

        Returns:
            The matching Platform, or UNSUPPORTED for anything else
        """
        if sys_platform == "darwin":
            return cls.MACOS
        if sys_platform.startswith("linux"):
            return cls.LINUX
        return cls.UNSUPPORTED

    def launch_command(self, url: str, *, browser: str, sys_platform: str) -> list[str]:
        """Build the command that opens url on this platform.

        Args:
            url: URL to open
            browser: Browser command, used on Linux only
            sys_platform: Raw platform name, reported when unsupported

        Raises:
            UnsupportedPlatformError: On platforms other than macOS and Linux
        """
        if self is Platform.MACOS:
            return ["open", url]
        if self is Platform.LINUX:
            return [browser, url]
        raise UnsupportedPlatformError(
            f"Opening a browser is not supported on {sys_platform}; "
            "only macOS and Linux are supported"
        )
