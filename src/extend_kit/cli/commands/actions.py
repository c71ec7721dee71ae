"""Commands that dispatch a toolchain action and print its output."""

import click

from extend_kit.cli.error_boundary import cli_error_boundary
from extend_kit.context import ExtendContext
from extend_kit.package_manager import PackageManager


def _echo_output(manager: PackageManager) -> None:
    output = manager.get_output()
    if output:
        click.echo(output, nl=not output.endswith("\n"))


@click.command()
@click.pass_obj
@cli_error_boundary
def check(ctx: ExtendContext) -> None:
    """Check installed extensions for available updates."""
    manager = PackageManager(ctx)
    manager.check_package()
    _echo_output(manager)


@click.command()
@click.argument("package_name")
@click.argument("constraint", required=False)
@click.pass_obj
@cli_error_boundary
def depends(ctx: ExtendContext, package_name: str, constraint: str | None) -> None:
    """Show which packages depend on PACKAGE_NAME."""
    manager = PackageManager(ctx)
    manager.depends_package(package_name, constraint)
    _echo_output(manager)


@click.command(name="dump-autoload")
@click.pass_obj
@cli_error_boundary
def dump_autoload(ctx: ExtendContext) -> None:
    """Regenerate the autoload map."""
    manager = PackageManager(ctx)
    manager.dump_autoload()
    _echo_output(manager)


@click.command()
@click.pass_obj
@cli_error_boundary
def install(ctx: ExtendContext) -> None:
    """Install all extensions declared in the manifest."""
    manager = PackageManager(ctx)
    manager.install_packages()
    _echo_output(manager)


@click.command()
@click.argument("package_name")
@click.argument("constraint")
@click.pass_obj
@cli_error_boundary
def prohibits(ctx: ExtendContext, package_name: str, constraint: str) -> None:
    """Show which packages prevent PACKAGE_NAME at CONSTRAINT from being installed."""
    manager = PackageManager(ctx)
    manager.prohibits_package(package_name, constraint)
    _echo_output(manager)


@click.command()
@click.argument("packages", nargs=-1, required=True)
@click.pass_obj
@cli_error_boundary
def remove(ctx: ExtendContext, packages: tuple[str, ...]) -> None:
    """Remove extensions."""
    manager = PackageManager(ctx)
    manager.remove_package(list(packages))
    _echo_output(manager)


@click.command()
@click.argument("packages", nargs=-1, required=True)
@click.pass_obj
@cli_error_boundary
def require(ctx: ExtendContext, packages: tuple[str, ...]) -> None:
    """Add extensions to the manifest and install them.

    Examples:

        extend require vendor/extension:^1.0
    """
    manager = PackageManager(ctx)
    manager.require_package(list(packages))
    _echo_output(manager)


@click.command()
@click.argument("terms", nargs=-1, required=True)
@click.pass_obj
@cli_error_boundary
def search(ctx: ExtendContext, terms: tuple[str, ...]) -> None:
    """Search the extension registry."""
    manager = PackageManager(ctx)
    manager.search_package(list(terms))
    _echo_output(manager)


@click.command()
@click.argument("target", required=False)
@click.argument("package", required=False, default="")
@click.argument("version", required=False, default="")
@click.option("--root", is_flag=True, help="Show the root package.")
@click.pass_obj
@cli_error_boundary
def show(ctx: ExtendContext, target: str | None, package: str, version: str, root: bool) -> None:
    """Show package details.

    TARGET selects the package set (installed, available, platform, ...).
    """
    manager = PackageManager(ctx)
    result = manager.show_package(target, package, version, root)
    if isinstance(result, list):
        for record in result:
            click.echo(f"{record.package.name} {record.package.pretty_version}")
    _echo_output(manager)


@click.command()
@click.argument("packages", nargs=-1)
@click.pass_obj
@cli_error_boundary
def update(ctx: ExtendContext, packages: tuple[str, ...]) -> None:
    """Update extensions (all of them when none are given)."""
    manager = PackageManager(ctx)
    manager.update_package(list(packages))
    _echo_output(manager)


ACTION_COMMANDS = [
    check,
    depends,
    dump_autoload,
    install,
    prohibits,
    remove,
    require,
    search,
    show,
    update,
]
