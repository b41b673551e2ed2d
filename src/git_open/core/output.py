"""Output helpers separating user messages from prompt output."""

import click


def user_output(message: str) -> None:
    """Write a user-facing status or error message to stderr."""
    click.echo(message, err=True)


def user_error(message: str) -> None:
    """Write an error message to stderr with a red "Error:" prefix."""
    user_output(click.style("Error: ", fg="red") + message)
