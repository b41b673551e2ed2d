"""Git remote listing gateway."""

from git_open.gateway.remotes.abc import GitRemotes
from git_open.gateway.remotes.fake import FakeGitRemotes
from git_open.gateway.remotes.real import RealGitRemotes

__all__ = ["FakeGitRemotes", "GitRemotes", "RealGitRemotes"]
