"""
Pytest configuration for unit tests.

Provides recording fakes for the fetcher and configurator.
"""
import pytest
from pathlib import Path

from axroot.configurators.base import PathConfigurator
from axroot.errors import DelegationError, FetchError
from axroot.fetchers.base import SourceFetcher


class FakeFetcher(SourceFetcher):
    """Records clone calls and creates the destination unless told to fail."""

    def __init__(self, fail: bool = False, returncode: int = 128):
        self.calls = []
        self.fail = fail
        self.returncode = returncode

    def clone(self, url, destination):
        self.calls.append((url, Path(destination)))
        if self.fail:
            raise FetchError(f"Failed to clone {url}: repository not found", returncode=self.returncode)
        Path(destination).mkdir(parents=True)
        (Path(destination) / "README.md").write_text("ArceOS\n")


class FakeConfigurator(PathConfigurator):
    """Records configure calls."""

    def __init__(self, fail: bool = False, returncode: int = 1):
        self.calls = []
        self.fail = fail
        self.returncode = returncode

    def configure(self, root_path):
        self.calls.append(Path(root_path))
        if self.fail:
            raise DelegationError("set_ax_root.sh exited with status 1", returncode=self.returncode)


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def fake_configurator():
    return FakeConfigurator()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove axroot environment overrides."""
    for var in ("AX_ROOT", "AX_REMOTE_URL", "AXROOT_CONFIG"):
        monkeypatch.delenv(var, raising=False)
