"""Tests for RealGitRemotes with subprocess patched out."""

from pathlib import Path
from subprocess import CompletedProcess
from unittest.mock import patch

import pytest

from git_open.core.errors import ExecutionError
from git_open.gateway.remotes import RealGitRemotes


def test_list_remotes_runs_git_remote_verbose() -> None:
    stdout = b"origin\tgit@github.com:owner/repo.git (fetch)\n"
    with patch("git_open.gateway.remotes.real.subprocess.run") as mock_run:
        mock_run.return_value = CompletedProcess(args=[], returncode=0, stdout=stdout, stderr=b"")
        result = RealGitRemotes().list_remotes(Path("/repo"))

    assert result == "origin\tgit@github.com:owner/repo.git (fetch)\n"
    mock_run.assert_called_once_with(
        ["git", "remote", "--verbose"],
        cwd=Path("/repo"),
        capture_output=True,
        check=False,
    )


def test_list_remotes_replaces_invalid_utf8() -> None:
    stdout = b"origin\tgit@host:caf\xe9.git (fetch)\n"
    with patch("git_open.gateway.remotes.real.subprocess.run") as mock_run:
        mock_run.return_value = CompletedProcess(args=[], returncode=0, stdout=stdout, stderr=b"")
        result = RealGitRemotes().list_remotes(Path("/repo"))

    assert result == "origin\tgit@host:caf\ufffd.git (fetch)\n"


def test_list_remotes_outside_repository_returns_stdout() -> None:
    """A failing git command is not an error; its (empty) stdout is returned."""
    stderr = b"fatal: not a git repository (or any of the parent directories): .git\n"
    with patch("git_open.gateway.remotes.real.subprocess.run") as mock_run:
        mock_run.return_value = CompletedProcess(args=[], returncode=128, stdout=b"", stderr=stderr)
        result = RealGitRemotes().list_remotes(Path("/tmp"))

    assert result == ""


def test_list_remotes_without_git_raises_execution_error() -> None:
    with patch("git_open.gateway.remotes.real.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory: 'git'")
        with pytest.raises(ExecutionError, match="git remote --verbose"):
            RealGitRemotes().list_remotes(Path("/repo"))
