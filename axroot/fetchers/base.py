"""
Base fetcher interface for obtaining the dependency sources.
"""
from abc import ABC, abstractmethod
from pathlib import Path


class SourceFetcher(ABC):
    """
    Abstract base class for remote source providers.

    A fetcher must either leave `destination` as a directory holding the
    sources or raise FetchError.
    """

    @abstractmethod
    def clone(self, url: str, destination: Path) -> None:
        """
        Clone `url` into `destination`.

        Args:
            url: Remote source URL
            destination: Directory to create

        Raises:
            FetchError: If the clone fails
        """
        pass
