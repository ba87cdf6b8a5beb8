"""Create an example secure variable specification file."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from varspec.atomic import write_new_file
from varspec.cli.context import get_config
from varspec.constants import DEFAULT_HCL_SPEC_NAME, DEFAULT_JSON_SPEC_NAME
from varspec.templates import render_spec, warn_keys_message

log = logging.getLogger(__name__)


@click.command(name="init")
@click.argument("filename", required=False, default=None)
@click.option("--json", "json_output", is_flag=True, help="Create an example JSON specification.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output.")
@click.pass_context
def init(ctx: click.Context, filename: str | None, json_output: bool, quiet: bool) -> None:
    """Create an example secure variable specification file.

    The file can be used as a starting point to customize further. If no
    FILENAME is given, the default of "spec.nsv.hcl" or "spec.nsv.json" will
    be used.
    """
    config = get_config(ctx)
    quiet = quiet or config.init.quiet

    fmt = "json" if json_output else config.init.default_format
    default_name = DEFAULT_JSON_SPEC_NAME if fmt == "json" else DEFAULT_HCL_SPEC_NAME
    path = Path(filename or default_name)
    content = render_spec(fmt, config.layout.width)

    try:
        write_new_file(path, content, mode=config.init.file_mode)
    except FileExistsError:
        click.secho(f'File "{path}" already exists', fg="red", err=True)
        ctx.exit(1)
    except OSError as error:
        click.secho(f'Failed to write "{path}": {error}', fg="red", err=True)
        ctx.exit(1)

    log.debug("Wrote %s specification to %s", fmt, path)
    if not quiet:
        click.secho(warn_keys_message(config.layout.width), fg="yellow", err=True)
        click.echo(f"Example secure variable specification written to {path}")
