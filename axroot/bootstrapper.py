"""
Dependency bootstrapper.

Guarantees the dependency root exists (cloning it on first run) and then
hands it to the path configuration step:

    check existence -> clone if absent -> configure

Only existence is checked. An existing directory is accepted as-is, even if
it is empty or on another revision.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from axroot.config import BootstrapConfig, DEFAULT_CONFIGURE_SCRIPT
from axroot.configurators.base import NullConfigurator, PathConfigurator
from axroot.configurators.script import ScriptConfigurator
from axroot.fetchers.base import SourceFetcher
from axroot.fetchers.git import GitCloneFetcher

logger = logging.getLogger(__name__)

FETCH_NOTICE = "Cloning repositories ..."


@dataclass
class BootstrapResult:
    """Outcome of a successful bootstrap."""
    root_path: Path
    fetched: bool


class DependencyBootstrapper:
    """
    Ensures a dependency source tree exists locally.

    Both collaborators are injected so tests can substitute fakes.
    """

    def __init__(self, fetcher: SourceFetcher, configurator: PathConfigurator):
        self.fetcher = fetcher
        self.configurator = configurator

    @classmethod
    def from_config(cls, config: BootstrapConfig) -> 'DependencyBootstrapper':
        """Build a bootstrapper with the git fetcher and script configurator."""
        fetcher = GitCloneFetcher(
            git_executable=config.git_executable,
            depth=config.clone_depth,
            branch=config.branch
        )
        if config.configure_enabled:
            configurator = ScriptConfigurator(config.configure_script)
        else:
            configurator = NullConfigurator()
        return cls(fetcher, configurator)

    def ensure_dependency(self, root_path: Union[str, Path], remote_url: str) -> BootstrapResult:
        """
        Make sure `root_path` exists, then run the configuration step.

        Args:
            root_path: Dependency root directory
            remote_url: URL to clone from when the root is missing

        Returns:
            BootstrapResult telling whether a clone happened

        Raises:
            FetchError: If cloning fails (configuration is not attempted)
            DelegationError: If the configuration step fails
            ValueError: If root_path is empty
        """
        if not str(root_path).strip():
            raise ValueError("root_path must not be empty")
        root_path = Path(root_path)
        fetched = False

        if root_path.is_dir():
            logger.debug("Dependency root %s already present, skipping clone", root_path)
        else:
            print(FETCH_NOTICE)
            self.fetcher.clone(remote_url, root_path)
            fetched = True

        self.configurator.configure(root_path)

        return BootstrapResult(root_path=root_path, fetched=fetched)


def ensure_dependency(
    root_path: Union[str, Path],
    remote_url: str,
    fetcher: Optional[SourceFetcher] = None,
    configurator: Optional[PathConfigurator] = None
) -> BootstrapResult:
    """
    Convenience wrapper around DependencyBootstrapper.ensure_dependency.

    Defaults to a plain git clone and the set_ax_root.sh script.
    """
    if fetcher is None:
        fetcher = GitCloneFetcher()
    if configurator is None:
        configurator = ScriptConfigurator(Path(DEFAULT_CONFIGURE_SCRIPT))
    bootstrapper = DependencyBootstrapper(fetcher, configurator)
    return bootstrapper.ensure_dependency(root_path, remote_url)
