"""Production GitRemotes implementation using subprocess."""

import logging
import subprocess
from pathlib import Path

from git_open.core.errors import ExecutionError
from git_open.gateway.remotes.abc import GitRemotes

logger = logging.getLogger(__name__)

LIST_REMOTES_COMMAND = ["git", "remote", "--verbose"]


class RealGitRemotes(GitRemotes):
    """Production implementation using subprocess."""

    def list_remotes(self, cwd: Path) -> str:
        """Run `git remote --verbose` and decode its stdout.

        Invalid UTF-8 in the output is replaced rather than rejected. A
        non-zero exit status is not an error here: outside a repository git
        prints nothing on stdout, which callers treat as "no remotes".

        Raises:
            ExecutionError: If git could not be spawned
        """
        logger.debug("Running %s in %s", " ".join(LIST_REMOTES_COMMAND), cwd)
        try:
            result = subprocess.run(
                LIST_REMOTES_COMMAND,
                cwd=cwd,
                capture_output=True,
                check=False,
            )
        except OSError as e:
            raise ExecutionError(f"Failed to run '{' '.join(LIST_REMOTES_COMMAND)}': {e}") from e

        if result.returncode != 0:
            stderr = result.stderr.decode("utf-8", errors="replace").strip()
            logger.debug("git remote exited with %d: %s", result.returncode, stderr)

        return result.stdout.decode("utf-8", errors="replace")
