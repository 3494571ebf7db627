"""
axroot - fetch the ArceOS source tree and point the build at it.

The bootstrapper clones the dependency on first run, then hands the
resolved root path to a configuration step (``set_ax_root.sh``).
"""
from axroot.bootstrapper import BootstrapResult, DependencyBootstrapper, ensure_dependency
from axroot.errors import BootstrapError, DelegationError, FetchError

__all__ = [
    "BootstrapResult",
    "DependencyBootstrapper",
    "ensure_dependency",
    "BootstrapError",
    "FetchError",
    "DelegationError",
]
