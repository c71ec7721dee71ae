"""Abstract base class for requirement manifest operations."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class ManifestStore(ABC):
    """Abstract interface for loading and bootstrapping the requirement manifest.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def update(self) -> dict[str, Any]:
        """Reload the manifest, apply defaults, and persist any changes.

        Returns:
            Manifest data including the "require" mapping

        Raises:
            ManifestParseError: If the manifest is structurally corrupt
        """
        ...

    @abstractmethod
    def init(self, path: Path | str, options: dict[str, Any]) -> Any:
        """Create a fresh manifest at path.

        Args:
            path: Target manifest file
            options: Values merged over the default manifest content

        Returns:
            The manifest data that was written
        """
        ...
