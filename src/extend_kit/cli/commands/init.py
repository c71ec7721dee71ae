"""Init command for bootstrapping extend.toml and the manifest."""

from dataclasses import replace

import click

from extend_kit.cli.error_boundary import cli_error_boundary
from extend_kit.context import ExtendContext
from extend_kit.package_manager import PackageManager
from extend_kit.settings import FilesystemSettingsOps


@click.command(name="init")
@click.option("--site", default=None, help="Extension registry URL.")
@click.option("--force", is_flag=True, help="Overwrite existing settings and manifest.")
@click.pass_obj
@cli_error_boundary
def init_cmd(ctx: ExtendContext, site: str | None, force: bool) -> None:
    """Create extend.toml and an empty extension manifest."""
    settings_ops = FilesystemSettingsOps(ctx.project_dir)
    settings = replace(ctx.settings, site=site) if site else ctx.settings
    manifest_path = settings.manifest_path

    if not force:
        if settings_ops.exists():
            raise FileExistsError(f"Settings already exist at {settings_ops.path()}")
        if manifest_path.exists():
            raise FileExistsError(f"Manifest already exists at {manifest_path}")

    settings_ops.save(settings)

    # The manifest is written by init_json, so setup must not update it first
    manager = PackageManager(replace(ctx, settings=replace(settings, writeable=False)))
    manager.init_json(manifest_path, {"config": {"secure-http": manager.use_ssl()}})

    click.echo(f"Created {settings_ops.path()}")
    click.echo(f"Created {manifest_path}")
