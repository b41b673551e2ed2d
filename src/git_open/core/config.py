"""Configuration read from the environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

BROWSER_ENV_VAR = "BROWSER"
DEFAULT_BROWSER = "firefox"


@dataclass(frozen=True)
class OpenConfig:
    """In-memory representation of git-open settings.

    browser: command used to open URLs on Linux
    """

    browser: str


def load_config(environ: Mapping[str, str] | None = None) -> OpenConfig:
    """Load settings from the environment, falling back to defaults.

    Args:
        environ: Environment mapping to read. If None, uses os.environ.

    Returns:
        OpenConfig with the browser command resolved
    """
    if environ is None:
        environ = os.environ

    browser = environ.get(BROWSER_ENV_VAR, "").strip()
    if not browser:
        browser = DEFAULT_BROWSER
    return OpenConfig(browser=browser)
