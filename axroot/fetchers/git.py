"""
Git clone fetcher.

Clones into a staging directory next to the destination and renames it into
place, so an interrupted or failed clone never leaves a half-populated
dependency root behind.
"""
import logging
import shutil
import subprocess
import uuid
from pathlib import Path
from typing import List, Optional

from axroot.errors import FetchError
from axroot.fetchers.base import SourceFetcher

logger = logging.getLogger(__name__)

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127


class GitCloneFetcher(SourceFetcher):
    """Fetches the dependency with `git clone`."""

    def __init__(
        self,
        git_executable: str = "git",
        depth: Optional[int] = None,
        branch: Optional[str] = None
    ):
        """
        Initialize git fetcher.

        Args:
            git_executable: git binary to run (default: git from PATH)
            depth: Shallow clone depth (default: full history)
            branch: Branch or tag to check out (default: remote HEAD)
        """
        self.git_executable = git_executable
        self.depth = depth
        self.branch = branch

    def build_clone_command(self, url: str, destination: Path) -> List[str]:
        """Build the git clone argument list."""
        command = [self.git_executable, 'clone']
        if self.depth is not None:
            command.extend(['--depth', str(self.depth)])
        if self.branch:
            command.extend(['--branch', self.branch])
        command.extend([url, str(destination)])
        return command

    def staging_path(self, destination: Path) -> Path:
        """Unique sibling directory the clone is written into first."""
        return destination.parent / f".{destination.name}.partial-{uuid.uuid4().hex[:8]}"

    def clone(self, url: str, destination: Path) -> None:
        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        staging = self.staging_path(destination)

        command = self.build_clone_command(url, staging)
        logger.debug("Running %s", ' '.join(command))

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True
            )
        except FileNotFoundError:
            raise FetchError(
                f"git executable not found: {self.git_executable}",
                returncode=COMMAND_NOT_FOUND
            )

        if result.returncode != 0:
            self._discard(staging)
            raise FetchError(
                f"Failed to clone {url}: {result.stderr.strip()}",
                returncode=result.returncode
            )

        try:
            staging.rename(destination)
        except OSError as e:
            self._discard(staging)
            raise FetchError(f"Failed to move clone into {destination}: {e}")

        logger.info("Cloned %s into %s", url, destination)

    def _discard(self, staging: Path):
        """Remove a staging directory left by a failed clone (best effort)."""
        if staging.exists():
            logger.debug("Removing partial clone at %s", staging)
            shutil.rmtree(staging, ignore_errors=True)
