"""Status command showing installed and pending extensions."""

import json

import click
from rich.console import Console
from rich.table import Table

from extend_kit.cli.error_boundary import cli_error_boundary
from extend_kit.context import ExtendContext
from extend_kit.package_manager import PackageManager
from extend_kit.types import PackageStatus, PackageStatusEntry


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print the status table as JSON.")
@click.pass_obj
@cli_error_boundary
def status(ctx: ExtendContext, as_json: bool) -> None:
    """Show installed extensions and requirements not yet installed."""
    manager = PackageManager(ctx)

    for message in manager.get_messages():
        click.echo(click.style(f"Warning: {message}", fg="yellow"), err=True)

    packages = manager.get_all_packages()

    if as_json:
        payload = {name: entry.model_dump() for name, entry in packages.items()}
        click.echo(json.dumps(payload, indent=2))
        return

    if not packages:
        click.echo("No extensions installed or required")
        return

    Console(width=200).print(_render_table(packages))


def _render_table(packages: dict[str, PackageStatusEntry]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("name", no_wrap=True)
    table.add_column("version", no_wrap=True)
    table.add_column("status", no_wrap=True)
    table.add_column("type", no_wrap=True)
    table.add_column("constraint", no_wrap=True)

    for name, entry in packages.items():
        status_cell = (
            "[green]installed[/green]"
            if entry.status is PackageStatus.INSTALLED
            else "[yellow]pending[/yellow]"
        )
        table.add_row(name, entry.version, status_cell, entry.type, entry.constraint or "-")
    return table
