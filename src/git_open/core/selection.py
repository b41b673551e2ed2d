"""Choosing one remote URL, interactively when there are several."""

from collections.abc import Collection

from git_open.core.errors import NotFoundError
from git_open.gateway.console.abc import Console

SELECTION_PROMPT = "Choose a number from above"


def choose_remote_url(urls: Collection[str], console: Console) -> str:
    """Pick the remote URL to open.

    A single URL is returned without any console interaction. With several,
    the user is asked to choose one by index.

    Raises:
        NotFoundError: If urls is empty
    """
    if not urls:
        raise NotFoundError("No URL found")
    if len(urls) == 1:
        return next(iter(urls))
    return select_from_list(urls, console)


def select_from_list(choices: Collection[str], console: Console) -> str:
    """Print choices with 0-based indices and prompt until a valid index is entered.

    The index is resolved by enumerating choices again, so choices must
    iterate in the same order each time (true for an unmodified set).
    Invalid input is reported on stderr and the prompt repeats with no limit.
    """
    for index, choice in enumerate(choices):
        console.echo(f"{index}: {choice}")

    while True:
        text = console.read_line(SELECTION_PROMPT).strip()
        index = _parse_index(text)
        if index is None:
            console.error(f"Invalid number: '{text}'")
            continue

        choice = _nth(choices, index)
        if choice is None:
            console.error(f"{index} is out of range, expected 0 to {len(choices) - 1}")
            continue
        return choice


def _parse_index(text: str) -> int | None:
    """Parse a non-negative decimal integer, returning None if text is not one.

    Only ASCII digits are accepted; a sign of either kind, including a leading
    "+", makes the input invalid.
    """
    if not text.isascii() or not text.isdigit():
        return None
    return int(text)


def _nth(choices: Collection[str], index: int) -> str | None:
    for position, choice in enumerate(choices):
        if position == index:
            return choice
    return None
