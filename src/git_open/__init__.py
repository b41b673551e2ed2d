"""git-open CLI entry point.

This package provides a Click-based CLI that opens the web page of the
current repository's remote in a browser. See `git-open --help` for details.
"""

from git_open.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `git-open` console script."""
    cli()
