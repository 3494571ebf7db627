"""
Error types raised by the bootstrapper.
"""
from typing import Optional

# Shell convention: exit status of a process killed by signal N is 128 + N
SIGNAL_EXIT_BASE = 128


class BootstrapError(Exception):
    """Base class for bootstrap failures."""

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode

    @property
    def exit_code(self) -> int:
        """
        Process exit code to surface for this failure (never 0).

        A negative return code means the child was killed by a signal and
        maps to 128 + signal number, as shells report it.
        """
        if self.returncode is None or self.returncode == 0:
            return 1
        if self.returncode < 0:
            return SIGNAL_EXIT_BASE - self.returncode
        return self.returncode


class FetchError(BootstrapError):
    """Raised when cloning the remote source fails."""
    pass


class DelegationError(BootstrapError):
    """Raised when the path configuration step fails."""
    pass
