"""Tests for RealBrowserLauncher with subprocess patched out."""

from subprocess import CompletedProcess
from unittest.mock import patch

import pytest

from git_open.core.errors import ExecutionError, UnsupportedPlatformError
from git_open.gateway.browser.real import RealBrowserLauncher

URL = "https://github.com/owner/repo.git"


def test_launch_on_linux_runs_browser_and_returns_status() -> None:
    launcher = RealBrowserLauncher(browser="chromium", sys_platform="linux")

    with patch("git_open.gateway.browser.real.subprocess.run") as mock_run:
        mock_run.return_value = CompletedProcess(args=["chromium", URL], returncode=3)
        status = launcher.launch(URL)

    mock_run.assert_called_once_with(["chromium", URL], check=False)
    assert status == 3


def test_launch_on_macos_runs_open() -> None:
    launcher = RealBrowserLauncher(browser="chromium", sys_platform="darwin")

    with patch("git_open.gateway.browser.real.subprocess.run") as mock_run:
        mock_run.return_value = CompletedProcess(args=["open", URL], returncode=0)
        launcher.launch(URL)

    mock_run.assert_called_once_with(["open", URL], check=False)


def test_launch_missing_browser_raises_execution_error() -> None:
    launcher = RealBrowserLauncher(browser="no-such-browser", sys_platform="linux")

    with patch("git_open.gateway.browser.real.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory")
        with pytest.raises(ExecutionError, match="no-such-browser") as exc_info:
            launcher.launch(URL)

    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_launch_on_unsupported_platform_does_not_spawn() -> None:
    launcher = RealBrowserLauncher(browser="firefox", sys_platform="win32")

    with patch("git_open.gateway.browser.real.subprocess.run") as mock_run:
        with pytest.raises(UnsupportedPlatformError):
            launcher.launch(URL)

    mock_run.assert_not_called()


def test_unsupported_platform_error_names_detected_platform() -> None:
    """The rejected sys.platform value appears in the error shown to the user."""
    with patch("git_open.gateway.browser.real.sys.platform", "win32"):
        launcher = RealBrowserLauncher(browser="firefox")

    with pytest.raises(UnsupportedPlatformError) as exc_info:
        launcher.launch(URL)

    assert "win32" in exc_info.value.message


def test_platform_detected_from_sys_platform() -> None:
    with patch("git_open.gateway.browser.real.sys.platform", "darwin"):
        launcher = RealBrowserLauncher(browser="firefox")

    with patch("git_open.gateway.browser.real.subprocess.run") as mock_run:
        mock_run.return_value = CompletedProcess(args=["open", URL], returncode=0)
        launcher.launch(URL)

    assert mock_run.call_args.args[0] == ["open", URL]
