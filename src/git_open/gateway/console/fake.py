"""Fake Console implementation for testing.

FakeConsole replays scripted input lines and captures everything written,
enabling deterministic tests of interactive selection.
"""

import click

from git_open.gateway.console.abc import Console


class FakeConsole(Console):
    """In-memory fake that replays input and records output.

    This class has NO public setup methods. Input lines are provided via
    constructor; output is captured for test assertions.
    """

    def __init__(self, *, input_lines: list[str] | None = None) -> None:
        """Create FakeConsole with scripted input.

        Args:
            input_lines: Lines returned by successive read_line() calls.
                Reading past the last line raises click.Abort, like EOF.
        """
        self._input_lines = list(input_lines or [])
        self._stdout: list[str] = []
        self._stderr: list[str] = []
        self._prompts: list[str] = []

    def echo(self, message: str) -> None:
        self._stdout.append(message)

    def error(self, message: str) -> None:
        self._stderr.append(message)

    def read_line(self, prompt: str) -> str:
        self._prompts.append(prompt)
        if not self._input_lines:
            raise click.Abort()
        return self._input_lines.pop(0)

    @property
    def stdout(self) -> list[str]:
        """Lines written with echo(), in order."""
        return self._stdout.copy()

    @property
    def stderr(self) -> list[str]:
        """Lines written with error(), in order."""
        return self._stderr.copy()

    @property
    def prompts(self) -> list[str]:
        """Prompts shown, one per read_line() call."""
        return self._prompts.copy()
