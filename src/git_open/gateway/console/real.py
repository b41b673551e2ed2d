"""Real Console implementation using click."""

import click

from git_open.gateway.console.abc import Console


class RealConsole(Console):
    """Production implementation reading from stdin and writing to stdout/stderr."""

    def echo(self, message: str) -> None:
        click.echo(message)

    def error(self, message: str) -> None:
        click.echo(message, err=True)

    def read_line(self, prompt: str) -> str:
        # default="" returns an empty line instead of re-prompting; click adds ": "
        return click.prompt(prompt, default="", show_default=False, type=str)
