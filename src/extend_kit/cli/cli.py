import logging
from pathlib import Path

import click

from extend_kit import __version__
from extend_kit.cli.commands import actions, init, status
from extend_kit.cli.error_boundary import cli_error_boundary
from extend_kit.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Show debug logging.")
@click.option(
    "--project-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    help="Directory containing extend.toml.",
)
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context, debug: bool, project_dir: Path) -> None:
    """Manage extensions through the dependency toolchain."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(project_dir.resolve(), debug=debug)


cli.add_command(status.status)
cli.add_command(init.init_cmd)
for command in actions.ACTION_COMMANDS:
    cli.add_command(command)


def main() -> None:
    """CLI entry point used by the `extend` console script."""
    cli()


if __name__ == "__main__":
    main()
