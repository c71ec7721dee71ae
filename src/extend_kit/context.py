"""Application context with dependency injection.

The ExtendContext dataclass holds all collaborators of the package manager
(manifest store, action executors, connectivity prober, diagnostics) and is
created once at CLI entry point, then threaded through the application.
"""

from dataclasses import dataclass
from pathlib import Path

from extend_kit.actions.abc import ActionRegistry
from extend_kit.actions.output import ActionOutput
from extend_kit.diagnostics.abc import DiagnosticSink
from extend_kit.manifest.abc import ManifestStore
from extend_kit.platform.abc import PlatformCompatibility
from extend_kit.prober.abc import ConnectivityProber
from extend_kit.settings import DEFAULT_SITE, ExtendSettings, FilesystemSettingsOps


@dataclass(frozen=True)
class ExtendContext:
    """Immutable context holding all dependencies for extension management.

    Attributes:
        settings: Host settings (write gate, registry URL, manifest location)
        manifest: Requirement manifest store
        actions: Executor for each action kind
        prober: Registry connectivity prober
        sink: Diagnostic sink for non-fatal problems
        output: Capture of executor output
        platform: Source of platform compatibility constraints
        debug: Debug flag for error handling (full stack traces)
        project_dir: Directory holding extend.toml
    """

    settings: ExtendSettings
    manifest: ManifestStore
    actions: ActionRegistry
    prober: ConnectivityProber
    sink: DiagnosticSink
    output: ActionOutput
    platform: PlatformCompatibility
    debug: bool
    project_dir: Path

    @staticmethod
    def for_test(
        settings: ExtendSettings | None = None,
        manifest: ManifestStore | None = None,
        actions: ActionRegistry | None = None,
        prober: ConnectivityProber | None = None,
        sink: DiagnosticSink | None = None,
        output: ActionOutput | None = None,
        platform: PlatformCompatibility | None = None,
        debug: bool = False,
        project_dir: Path | None = None,
    ) -> "ExtendContext":
        """Create test context with optional pre-configured implementations.

        Uses fakes by default to avoid filesystem, network, and subprocess access.
        The default settings have the write gate closed.

        Example:
            >>> from extend_kit.manifest.fake import FakeManifestStore
            >>> ctx = ExtendContext.for_test(
            ...     settings=fake_settings(writeable=True),
            ...     manifest=FakeManifestStore(data={"require": {"a/b": "^1.0"}}),
            ... )
        """
        from extend_kit.actions.fake import FakeActionOutput, fake_action_registry
        from extend_kit.diagnostics.fake import FakeDiagnosticSink
        from extend_kit.manifest.fake import FakeManifestStore
        from extend_kit.platform.fake import FakePlatformCompatibility
        from extend_kit.prober.fake import FakeConnectivityProber

        return ExtendContext(
            settings=settings if settings is not None else fake_settings(),
            manifest=manifest if manifest is not None else FakeManifestStore(),
            actions=actions if actions is not None else fake_action_registry(),
            prober=prober if prober is not None else FakeConnectivityProber(),
            sink=sink if sink is not None else FakeDiagnosticSink(),
            output=output if output is not None else FakeActionOutput(),
            platform=platform if platform is not None else FakePlatformCompatibility(),
            debug=debug,
            project_dir=project_dir if project_dir is not None else Path("/fake/project"),
        )


def fake_settings(*, writeable: bool = False, site: str = DEFAULT_SITE) -> ExtendSettings:
    """Settings pointing at a fake project location."""
    return ExtendSettings(
        writeable=writeable,
        site=site,
        manifest_path=Path("/fake/project/extensions/composer.json"),
        platform_version="4.0.0 alpha 1",
    )


def create_context(project_dir: Path, *, debug: bool) -> ExtendContext:
    """Create production context with real implementations.

    Called once at CLI entry point to create the context for the entire
    command execution.

    Args:
        project_dir: Directory containing extend.toml
        debug: If True, enable debug mode (full stack traces in error handling)

    Raises:
        ValueError: If extend.toml is malformed
    """
    from extend_kit.actions.output import BufferedActionOutput
    from extend_kit.actions.real import build_action_registry
    from extend_kit.diagnostics.real import ConsoleDiagnosticSink
    from extend_kit.manifest.real import JsonManifestStore
    from extend_kit.platform.real import VersionPlatformCompatibility
    from extend_kit.prober.real import HttpxConnectivityProber

    settings = FilesystemSettingsOps(project_dir).load()
    output = BufferedActionOutput()

    return ExtendContext(
        settings=settings,
        manifest=JsonManifestStore(settings.manifest_path),
        actions=build_action_registry(
            toolchain=settings.toolchain,
            working_dir=settings.toolchain_dir,
            output=output,
        ),
        prober=HttpxConnectivityProber(),
        sink=ConsoleDiagnosticSink(),
        output=output,
        platform=VersionPlatformCompatibility(settings.platform_version),
        debug=debug,
        project_dir=project_dir,
    )
