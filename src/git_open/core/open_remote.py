"""The git-open pipeline: list remotes, choose one, format it and open it."""

import logging

from git_open.core.context import GitOpenContext
from git_open.core.remote_urls import format_url, urls_from_output
from git_open.core.selection import choose_remote_url

logger = logging.getLogger(__name__)


def open_remote(ctx: GitOpenContext) -> str:
    """Open the web page of a remote of the repository in ctx.cwd.

    Returns:
        The URL passed to the browser

    Raises:
        NotFoundError: If no remote URL is configured
        ExecutionError: If git or the browser could not be run
        UnsupportedPlatformError: If there is no way to open a browser here
    """
    output = ctx.remotes.list_remotes(ctx.cwd)
    urls = urls_from_output(output)
    logger.debug("Found %d remote URL(s) in %s", len(urls), ctx.cwd)

    url = format_url(choose_remote_url(urls, ctx.console))
    ctx.browser.launch(url)
    return url
