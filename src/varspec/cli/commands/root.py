"""Root CLI command registration."""

from __future__ import annotations

from pathlib import Path

import click

from varspec.cli.context import CONFIG_PATH_KEY
from varspec.log import setup_logging
from varspec.version import get_varspec_version

from .config import config_group
from .init import init
from .wrap import wrap_cmd


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging on stderr")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use instead of the default location",
)
@click.pass_context
def cli(ctx: click.Context, version: bool, verbose: bool, config_path: Path | None) -> None:
    """Create and lay out example secure variable specifications."""
    if version:
        click.echo(f"varspec {get_varspec_version()}")
        ctx.exit(0)

    setup_logging(verbose)
    if config_path is not None:
        ctx.meta[CONFIG_PATH_KEY] = config_path

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(init)
cli.add_command(wrap_cmd)
cli.add_command(config_group)
