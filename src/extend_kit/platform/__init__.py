from extend_kit.platform.abc import PlatformCompatibility
from extend_kit.platform.real import VersionPlatformCompatibility

__all__ = [
    "PlatformCompatibility",
    "VersionPlatformCompatibility",
]
