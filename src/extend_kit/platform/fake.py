"""Fake platform compatibility for testing."""

from extend_kit.platform.abc import PlatformCompatibility


class FakePlatformCompatibility(PlatformCompatibility):
    """Returns a fixed constraint and tracks which packages were queried.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        constraint: str = "4.0.0 alpha 1",
        overrides: dict[str, str] | None = None,
    ) -> None:
        """Create FakePlatformCompatibility.

        Args:
            constraint: Value returned for packages without an override
            overrides: Mapping of package name -> constraint
        """
        self._constraint = constraint
        self._overrides = overrides or {}
        self._queried: list[str] = []

    @property
    def queried(self) -> list[str]:
        """Package names passed to constraint_for(). For test assertions only."""
        return self._queried

    def constraint_for(self, package_name: str) -> str:
        self._queried.append(package_name)
        return self._overrides.get(package_name, self._constraint)
