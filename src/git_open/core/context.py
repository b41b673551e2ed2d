"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from git_open.core.config import load_config
from git_open.gateway.browser.abc import BrowserLauncher
from git_open.gateway.browser.dry_run import DryRunBrowserLauncher
from git_open.gateway.browser.fake import FakeBrowserLauncher
from git_open.gateway.browser.real import RealBrowserLauncher
from git_open.gateway.console.abc import Console
from git_open.gateway.console.fake import FakeConsole
from git_open.gateway.console.real import RealConsole
from git_open.gateway.remotes.abc import GitRemotes
from git_open.gateway.remotes.fake import FakeGitRemotes
from git_open.gateway.remotes.real import RealGitRemotes


@dataclass(frozen=True)
class GitOpenContext:
    """Immutable context holding all dependencies for git-open.

    Created at the CLI entry point and passed to the command.
    Frozen to prevent accidental modification at runtime.
    """

    cwd: Path
    remotes: GitRemotes
    console: Console
    browser: BrowserLauncher

    @classmethod
    def for_production(cls, *, dry_run: bool) -> "GitOpenContext":
        """Create production context with real implementations.

        Args:
            dry_run: If True, report the URL instead of launching a browser

        Returns:
            GitOpenContext configured for the current directory and environment
        """
        config = load_config()
        browser: BrowserLauncher
        if dry_run:
            browser = DryRunBrowserLauncher()
        else:
            browser = RealBrowserLauncher(browser=config.browser)

        return cls(
            cwd=Path.cwd(),
            remotes=RealGitRemotes(),
            console=RealConsole(),
            browser=browser,
        )

    @classmethod
    def for_test(
        cls,
        *,
        cwd: Path | None = None,
        remotes: GitRemotes | None = None,
        console: Console | None = None,
        browser: BrowserLauncher | None = None,
    ) -> "GitOpenContext":
        """Create test context with injectable fakes.

        Args:
            cwd: Working directory. If None, uses Path("/repo").
            remotes: Optional GitRemotes. If None, creates FakeGitRemotes.
            console: Optional Console. If None, creates FakeConsole.
            browser: Optional BrowserLauncher. If None, creates FakeBrowserLauncher.

        Example:
            remotes = FakeGitRemotes(remote_output={Path("/repo"): output})
            browser = FakeBrowserLauncher()
            ctx = GitOpenContext.for_test(remotes=remotes, browser=browser)
            CliRunner().invoke(cli, obj=ctx)
            assert browser.launched_urls == ["https://github.com/owner/repo.git"]
        """
        return cls(
            cwd=cwd or Path("/repo"),
            remotes=remotes or FakeGitRemotes(),
            console=console or FakeConsole(),
            browser=browser or FakeBrowserLauncher(),
        )
