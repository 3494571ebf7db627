"""
Base configurator interface for the path configuration step.
"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)


class PathConfigurator(ABC):
    """
    Abstract base class for the path configuration step.

    Receives the resolved dependency root and makes it visible to the
    build (cargo config, environment files, etc.).
    """

    @abstractmethod
    def configure(self, root_path: Path) -> None:
        """
        Configure the build to use `root_path`.

        Args:
            root_path: Dependency root directory

        Raises:
            DelegationError: If configuration fails
        """
        pass


class NullConfigurator(PathConfigurator):
    """Configurator that does nothing."""

    def configure(self, root_path: Path) -> None:
        logger.info("Path configuration disabled, skipping for %s", root_path)
