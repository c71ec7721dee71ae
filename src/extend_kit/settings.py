"""Host settings for extension management.

Settings are loaded once at CLI entry point from extend.toml in the project
directory and stored in ExtendContext. The package manager reads them but
never writes them.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

import tomli_w

from extend_kit.version import __version__

SETTINGS_FILENAME = "extend.toml"
DEFAULT_SITE = "https://extensions.example.org/"
DEFAULT_MANIFEST = "extensions/composer.json"
DEFAULT_TOOLCHAIN = ["composer"]


@dataclass
class ExtendSettings:
    """Host-supplied settings for the package manager.

    Attributes:
        writeable: Gate for manifest bootstrap and the connectivity probe
        site: Extension registry URL
        manifest_path: Location of the requirement manifest
        platform_version: Version string of the host platform
        toolchain: Command prefix used to invoke the dependency toolchain
        working_dir: Directory the toolchain runs in
    """

    writeable: bool
    site: str
    manifest_path: Path
    platform_version: str = __version__
    toolchain: list[str] = field(default_factory=lambda: list(DEFAULT_TOOLCHAIN))
    working_dir: Path | None = None

    @property
    def toolchain_dir(self) -> Path:
        """Directory the toolchain runs in (defaults to the manifest directory)."""
        if self.working_dir is not None:
            return self.working_dir
        return self.manifest_path.parent


class SettingsOps(ABC):
    """Abstract interface for settings file operations."""

    @abstractmethod
    def exists(self) -> bool:
        """Check if the settings file exists."""
        ...

    @abstractmethod
    def load(self) -> ExtendSettings:
        """Load settings, falling back to defaults for missing keys.

        Raises:
            ValueError: If the settings file is malformed
        """
        ...

    @abstractmethod
    def save(self, settings: ExtendSettings) -> None:
        """Persist settings."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the settings file."""
        ...


class FilesystemSettingsOps(SettingsOps):
    """Production implementation that reads/writes <project>/extend.toml."""

    def __init__(self, project_dir: Path) -> None:
        self._project_dir = project_dir

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> ExtendSettings:
        config_path = self.path()
        data: dict[str, object] = {}
        if config_path.exists():
            try:
                data = tomllib.loads(config_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid settings file {config_path}: {e}") from e

        manifest_path = self._project_dir / str(data.get("manifest", DEFAULT_MANIFEST))

        toolchain = data.get("toolchain", DEFAULT_TOOLCHAIN)
        if isinstance(toolchain, str):
            toolchain = toolchain.split()
        if not isinstance(toolchain, list) or not toolchain:
            raise ValueError(f"'toolchain' must be a non-empty list in {config_path}")

        writeable = data.get("writeable")
        if writeable is None:
            writeable = _is_writeable(manifest_path.parent)

        working_dir = data.get("working_dir")

        return ExtendSettings(
            writeable=bool(writeable),
            site=str(data.get("site", DEFAULT_SITE)),
            manifest_path=manifest_path,
            platform_version=str(data.get("platform_version", __version__)),
            toolchain=[str(part) for part in toolchain],
            working_dir=self._project_dir / str(working_dir) if working_dir else None,
        )

    def save(self, settings: ExtendSettings) -> None:
        config_path = self.path()
        data: dict[str, object] = {
            "site": settings.site,
            "writeable": settings.writeable,
            "manifest": _relative_to(settings.manifest_path, self._project_dir),
            "platform_version": settings.platform_version,
            "toolchain": settings.toolchain,
        }
        if settings.working_dir is not None:
            data["working_dir"] = _relative_to(settings.working_dir, self._project_dir)

        if config_path.exists() and not os.access(config_path, os.W_OK):
            raise PermissionError(f"Cannot write to file: {config_path}")

        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(tomli_w.dumps(data), encoding="utf-8")

    def path(self) -> Path:
        return self._project_dir / SETTINGS_FILENAME


def _is_writeable(directory: Path) -> bool:
    # Nearest existing ancestor decides, since the manifest directory may not exist yet
    candidate = directory
    while not candidate.exists():
        if candidate.parent == candidate:
            return False
        candidate = candidate.parent
    return os.access(candidate, os.W_OK)


def _relative_to(path: Path, base: Path) -> str:
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return str(path)
