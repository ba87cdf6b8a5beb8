"""Word wrap text from the command line."""

from __future__ import annotations

import re
from pathlib import Path

import click

from varspec.cli.context import get_config
from varspec.layout import LayoutError, hanging_indent, tidy, wrap, wrap_and_prefix

PARAGRAPH_BREAK = re.compile(r"\n[ \t]*\n")


@click.command(name="wrap")
@click.argument("text", required=False, default=None)
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=True, readable=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read text from a file instead of the TEXT argument.",
)
@click.option(
    "-w",
    "--width",
    type=click.IntRange(min=1),
    default=None,
    help="Wrap width (defaults to config).",
)
@click.option("-p", "--prefix", default="", help="Literal prefix for every wrapped line.")
@click.option(
    "-i",
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="Indent continuation lines by this many columns (hanging indent).",
)
@click.option("--hang", is_flag=True, help="Use the configured hanging indent.")
@click.pass_context
def wrap_cmd(
    ctx: click.Context,
    text: str | None,
    file_path: Path | None,
    width: int | None,
    prefix: str,
    indent: int | None,
    hang: bool,
) -> None:
    """Word wrap TEXT, a file, or standard input.

    Blank lines separate paragraphs; whitespace inside a paragraph is
    collapsed before it is wrapped.

    \b
    Examples:
        varspec wrap "some long paragraph" -w 40
        varspec wrap -f notes.txt -p "# "
        cat help.txt | varspec wrap -w 60 -i 4
    """
    if text is not None and file_path is not None:
        raise click.UsageError("Provide either a TEXT argument or --file, not both")

    config = get_config(ctx)
    if width is None:
        width = config.layout.width
    if hang and indent is None:
        indent = config.layout.hanging_indent
    if prefix and indent is not None:
        raise click.UsageError("--prefix and --indent cannot be combined")

    if file_path is not None:
        text = file_path.read_text(encoding="utf-8")
    elif text is None:
        text = click.get_text_stream("stdin").read()

    paragraphs = [tidy(p) for p in PARAGRAPH_BREAK.split(text)]
    try:
        rendered = [
            _layout(p, width=width, prefix=prefix, indent=indent) for p in paragraphs if p
        ]
    except LayoutError as error:
        raise click.UsageError(str(error)) from error

    click.echo("\n\n".join(rendered))


def _layout(paragraph: str, *, width: int, prefix: str, indent: int | None) -> str:
    if indent is not None:
        return hanging_indent(paragraph, width, indent)
    if prefix:
        return wrap_and_prefix(paragraph, width, prefix)
    return wrap(paragraph, width)

