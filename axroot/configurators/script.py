"""
Script configurator - delegates to an external shell script.

The script is invoked as `<script> <root_path>` and owns whatever
configuration it performs.
"""
import logging
import subprocess
from pathlib import Path
from typing import Optional

from axroot.errors import DelegationError
from axroot.configurators.base import PathConfigurator

logger = logging.getLogger(__name__)


class ScriptConfigurator(PathConfigurator):
    """Runs an external configuration script with the root path as its only argument."""

    def __init__(self, script_path: Path, cwd: Optional[Path] = None):
        """
        Initialize script configurator.

        Args:
            script_path: Script to execute (e.g. scripts/set_ax_root.sh)
            cwd: Working directory for the script (default: current directory)
        """
        self.script_path = Path(script_path)
        self.cwd = cwd

    def resolve_script(self) -> Path:
        """Absolute script path; relative paths are taken from `cwd` when set."""
        script = self.script_path
        if not script.is_absolute() and self.cwd is not None:
            script = Path(self.cwd) / script
        return script.resolve()

    def configure(self, root_path: Path) -> None:
        script = self.resolve_script()
        if not script.is_file():
            raise DelegationError(f"Configuration script not found: {script}")

        command = [str(script), str(root_path)]
        logger.debug("Running %s", ' '.join(command))

        # Script output is not captured
        try:
            result = subprocess.run(command, cwd=self.cwd)
        except OSError as e:
            raise DelegationError(f"Failed to run {script}: {e}")

        if result.returncode != 0:
            raise DelegationError(
                f"{script} exited with status {result.returncode}",
                returncode=result.returncode
            )

        logger.info("Configured dependency root %s via %s", root_path, script)
