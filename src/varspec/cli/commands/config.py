"""Inspect and initialize the varspec configuration file."""

from __future__ import annotations

import click

from varspec.cli.context import get_config, get_config_file
from varspec.config import VarspecConfig
from varspec.layout import hanging_indent

# Settings holding permission bits, shown in octal
_OCTAL_SETTINGS = frozenset({"init.file_mode"})


@click.group(name="config")
def config_group() -> None:
    """Inspect and initialize configuration."""


@config_group.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Show every setting with its current value."""
    config = get_config(ctx)
    width = config.layout.width
    indent = config.layout.hanging_indent

    click.secho(f"Config file: {get_config_file(ctx)}", bold=True)
    for key, value, description in config.iter_settings():
        shown = oct(value) if key in _OCTAL_SETTINGS else repr(value)
        click.echo(hanging_indent(f"{key} = {shown}  {description}", width, indent))


@config_group.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
@click.pass_context
def init_config(ctx: click.Context, force: bool) -> None:
    """Write a config file populated with the default settings."""
    path = get_config_file(ctx)
    if path.exists() and not force:
        click.secho(f'Config file "{path}" already exists (use --force)', fg="red", err=True)
        raise SystemExit(1)

    try:
        VarspecConfig().save(path)
    except OSError as error:
        click.secho(f'Failed to write "{path}": {error}', fg="red", err=True)
        raise SystemExit(1) from error

    click.secho(f"Config written to {path}", fg="green")
