"""Platform compatibility derived from the running platform version."""

from extend_kit.platform.abc import PlatformCompatibility


class VersionPlatformCompatibility(PlatformCompatibility):
    """Reports the version of the platform being run for every package."""

    def __init__(self, platform_version: str) -> None:
        self._platform_version = platform_version

    def constraint_for(self, package_name: str) -> str:
        return self._platform_version
