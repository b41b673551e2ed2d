import logging

import click

from git_open.core.context import GitOpenContext
from git_open.core.errors import GitOpenError
from git_open.core.open_remote import open_remote
from git_open.core.output import user_error

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.command(name="git-open", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="git-open")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--dry-run", is_flag=True, help="Print the URL instead of opening a browser")
@click.pass_context
def cli(ctx: click.Context, debug: bool, dry_run: bool) -> None:
    """Open the current repository's remote in a web browser.

    SSH remotes such as git@github.com:owner/repo.git are opened as
    https://github.com/owner/repo.git. When several remote URLs are
    configured you are asked to pick one. On Linux the browser is taken
    from $BROWSER (default: firefox).
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = GitOpenContext.for_production(dry_run=dry_run)

    try:
        open_remote(ctx.obj)
    except GitOpenError as e:
        user_error(e.message)
        raise SystemExit(1) from None
