"""Abstract base class for platform compatibility lookups."""

from abc import ABC, abstractmethod


class PlatformCompatibility(ABC):
    """Supplies the platform compatibility constraint attached to installed packages."""

    @abstractmethod
    def constraint_for(self, package_name: str) -> str:
        """Return the compatibility constraint for an installed package.

        The value is opaque to the package manager and is reported as is.
        """
        ...
