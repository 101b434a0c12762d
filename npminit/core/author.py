"""
Default author detection.

Reads ``user.name`` from git configuration so the manifest author can be
filled in without asking.
"""
import logging
import os
import subprocess
from typing import Optional

from npminit.utils.exceptions import AuthorLookupError

logger = logging.getLogger(__name__)


class GitAuthorResolver:
    """Resolve the default author name from ``git config user.name``."""

    COMMAND = ["git", "config", "user.name"]

    def __init__(self, working_directory: Optional[str] = None, timeout: int = 10):
        self.working_directory = working_directory or os.getcwd()
        self.timeout = timeout

    def resolve(self) -> str:
        """Return the configured git user name, stripped of whitespace.

        Raises:
            AuthorLookupError: if git is missing, fails, times out, or
                writes anything to stderr.
        """
        try:
            result = subprocess.run(
                self.COMMAND,
                cwd=self.working_directory,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except (subprocess.TimeoutExpired, FileNotFoundError, OSError) as e:
            raise AuthorLookupError(f"Error getting default author name: {e}") from e

        if result.returncode != 0:
            detail = result.stderr.strip() or f"git exited with status {result.returncode}"
            raise AuthorLookupError(f"Error getting default author name: {detail}")

        if result.stderr:
            raise AuthorLookupError(f"Error getting default author name: {result.stderr.strip()}")

        author = result.stdout.strip()
        logger.debug("Default author from git: %r", author)
        return author
