"""Package manager: reconciliation and action dispatch over the toolchain.

The PackageManager sits in front of three independently failing
collaborators (the manifest store, the registry prober, and the action
executors). Setup problems never escape the constructor: manifest
corruption goes to the diagnostic sink, connectivity failures go to the
message queue. Failures of dispatched actions propagate to the caller.
"""

import logging
import platform
from collections.abc import Sequence
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

from extend_kit.actions.abc import INSTALLED_TARGET, ActionKind
from extend_kit.context import ExtendContext
from extend_kit.diagnostics.abc import Severity
from extend_kit.errors import ManifestParseError
from extend_kit.prober.types import (
    ClientError,
    OtherError,
    ProbeOk,
    ProbeResult,
    ServerError,
    TransportError,
)
from extend_kit.types import (
    InstalledPackageRecord,
    PackageStatusEntry,
    RequirementEntry,
    parse_requirements,
)

logger = logging.getLogger(__name__)


class PackageManager:
    """Unified view of declared and installed extensions.

    Construction runs the setup phase once, and only when the write gate
    (settings.writeable) is open:

    1. Update the manifest; a corrupt or unreadable manifest becomes a
       "danger" diagnostic.
    2. Decide the transport scheme (see use_ssl()).
    3. Probe the extension registry; a failure becomes one queued message.

    The instance is always usable afterwards. It is not safe to share
    between threads.
    """

    def __init__(self, ctx: ExtendContext) -> None:
        self._ctx = ctx
        self._messages: list[str] = []
        self._use_ssl: bool | None = None
        self._requirements: list[RequirementEntry] = []

        if ctx.settings.writeable:
            self._setup()

    def _setup(self) -> None:
        try:
            manifest_data = self._ctx.manifest.update()
        except (ManifestParseError, OSError) as e:
            logger.warning("Manifest could not be updated: %s", e)
            self._ctx.sink.emit(Severity.DANGER, str(e))
        except Exception as e:
            logger.exception("Unexpected error while updating manifest")
            self._ctx.sink.emit(Severity.DANGER, str(e))
        else:
            self._requirements = parse_requirements(manifest_data)

        logger.debug("Extension server uses secure transport: %s", self.use_ssl())
        self._ping()

    def _ping(self) -> None:
        site = self._ctx.settings.site
        params = {
            "platform_ver": self._ctx.settings.platform_version,
            "python_ver": platform.python_version(),
        }
        try:
            result = self._ctx.prober.probe(site, params=params)
        except Exception as e:
            # A prober that raises is treated like an unclassified failure
            result = OtherError(str(e))

        message = connection_failure_message(result)
        if message is not None:
            logger.warning(message)
            self._messages.append(message)

    def get_messages(self) -> list[str]:
        """Messages queued during setup, oldest first."""
        return list(self._messages)

    @property
    def requirements(self) -> list[RequirementEntry]:
        """Requirement snapshot captured from the manifest at setup."""
        return list(self._requirements)

    def use_ssl(self) -> bool:
        """Whether the extension server is reached over https.

        Computed from the registry URL on first call and cached for the
        lifetime of the instance. Malformed URLs count as non-secure.
        """
        if self._use_ssl is not None:
            return self._use_ssl

        try:
            scheme = urlsplit(self._ctx.settings.site or "").scheme
        except ValueError:
            scheme = ""
        self._use_ssl = scheme.lower() == "https"
        return self._use_ssl

    def get_all_packages(self) -> dict[str, PackageStatusEntry]:
        """Merge installed packages and manifest requirements into one table.

        Installed packages come first in the order the show action returns
        them, followed by requirements that are not installed, in manifest
        order. A package that is both installed and required is reported
        once, as installed.
        """
        installed: list[InstalledPackageRecord] = self.show_package(INSTALLED_TARGET) or []

        packages: dict[str, PackageStatusEntry] = {}
        for record in installed:
            name = record.package.name
            constraint = self._ctx.platform.constraint_for(name)
            packages[name] = PackageStatusEntry.installed(record, constraint)

        for requirement in self._requirements:
            if requirement.name in packages:
                continue
            packages[requirement.name] = PackageStatusEntry.pending(requirement)

        return packages

    def check_package(self) -> Any:
        """Check installed packages for available updates."""
        return self._dispatch(ActionKind.CHECK)

    def depends_package(self, package_name: str | None, constraint: str | None) -> Any:
        """Find packages depending on package_name."""
        return self._dispatch(ActionKind.DEPENDS, package_name, constraint)

    def dump_autoload(self) -> Any:
        """Regenerate the autoload map."""
        return self._dispatch(ActionKind.AUTOLOAD)

    def install_packages(self) -> Any:
        """Install everything declared in the manifest."""
        return self._dispatch(ActionKind.INSTALL)

    def prohibits_package(self, package_name: str | None, constraint: str | None) -> Any:
        """Find packages preventing package_name at constraint from being installed."""
        return self._dispatch(ActionKind.PROHIBITS, package_name, constraint)

    def remove_package(self, packages: Sequence[str]) -> Any:
        return self._dispatch(ActionKind.REMOVE, packages)

    def require_package(self, packages: Sequence[str]) -> Any:
        return self._dispatch(ActionKind.REQUIRE, packages)

    def search_package(self, packages: Sequence[str]) -> Any:
        return self._dispatch(ActionKind.SEARCH, packages)

    def show_package(
        self,
        target: str | None,
        package: str = "",
        version: str = "",
        root: bool = False,
    ) -> Any:
        return self._dispatch(ActionKind.SHOW, target, package, version, root)

    def update_package(self, packages: Sequence[str]) -> Any:
        return self._dispatch(ActionKind.UPDATE, packages)

    def init_json(self, path: Path | str, options: dict[str, Any]) -> Any:
        """Bootstrap a new manifest through the manifest store."""
        return self._ctx.manifest.init(path, options)

    def get_output(self) -> str:
        """Output captured from executed actions."""
        return self._ctx.output.get_output()

    def _dispatch(self, action: ActionKind, *args: Any) -> Any:
        logger.debug("Dispatching %s action", action.value)
        return self._ctx.actions[action].execute(*args)


def connection_failure_message(result: ProbeResult) -> str | None:
    """Message queued for a probe result, or None when the probe succeeded."""
    match result:
        case ProbeOk():
            return None
        case ClientError(message=message):
            return f"Client error: {message}"
        case ServerError(message=message):
            return f"Extension server returned an error: {message}"
        case TransportError(message=message):
            return f"Testing connection to extension server failed: {message}"
        case OtherError(message=message):
            return f"Generic failure while testing connection to extension server: {message}"
