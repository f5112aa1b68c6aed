"""fastcsv2json CLI entry point."""

import logging
import sys
from typing import NoReturn

import click
from pydantic import ValidationError

from .. import __version__
from ..core.pipeline import run
from ..models import MAX_TOKEN_COUNT, ConversionConfig, Error
from ..symbols import (
    resolve_delimiter,
    resolve_erase_characters,
    resolve_replace_characters,
)

PROG_NAME = "fastcsv2json"

VERSION_TEXT = f"""{PROG_NAME} {__version__}
Copyright (C) 2024 Lucas Tsatiris.

This is free software. You may redistribute copies of it under the terms of
the GNU Lesser General Public License <https://www.gnu.org/licenses/lgpl.html>.
There is NO WARRANTY, to the extent permitted by law."""


def _show_help(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    click.echo(ctx.get_help(), err=True)
    ctx.exit(1)


def _show_version(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    click.echo(VERSION_TEXT, err=True)
    ctx.exit(1)


def _fail(error) -> NoReturn:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


@click.command(name=PROG_NAME, add_help_option=False)
@click.option(
    "-d",
    "--delimiter",
    default="comma",
    show_default=True,
    help="Delimiter as pipe, comma, semicolumn, column, space or tab.",
)
@click.option(
    "-i",
    "--infile",
    type=click.Path(dir_okay=False),
    help="Input file path, default STDIN.",
)
@click.option(
    "-o",
    "--outfile",
    type=click.Path(dir_okay=False),
    help="Output file path, default STDOUT.",
)
@click.option(
    "-r",
    "--replace-with-space",
    "replace",
    multiple=True,
    help="Replace pipe, comma, semicolumn, column, tab, backslash, lf, cr, "
    "squote, dquote or slash characters of input with a space. "
    "Can be used multiple times.",
)
@click.option(
    "-e",
    "--erase-char",
    "erase",
    multiple=True,
    help="Remove pipe, comma, semicolumn, column, tab, backslash, lf, cr, "
    "squote, dquote, slash or space characters from input. "
    "Can be used multiple times.",
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Text encoding of input and output files.",
)
@click.option(
    "--max-tokens",
    type=click.IntRange(min=1),
    default=MAX_TOKEN_COUNT,
    show_default=True,
    help="Rows with more fields than this are dropped.",
)
@click.option("--verbose", is_flag=True, help="Log a run summary to STDERR.")
@click.option(
    "-h",
    "--help",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_help,
    help="This help screen.",
)
@click.option(
    "-v",
    "--version",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_version,
    help="Version information and license.",
)
def cli(delimiter, infile, outfile, replace, erase, encoding, max_tokens, verbose):
    """Convert csv to json array.

    The first line is the header; every later line with the same number of
    fields becomes one object. Other lines are skipped.

    Example:
        fastcsv2json -d pipe < myfile.csv > myfile.json
    """
    _configure_logging(verbose)

    resolved_delimiter = resolve_delimiter(delimiter)
    if isinstance(resolved_delimiter, Error):
        _fail(resolved_delimiter)

    replace_chars = resolve_replace_characters(replace)
    if isinstance(replace_chars, Error):
        _fail(replace_chars)

    erase_chars = resolve_erase_characters(erase)
    if isinstance(erase_chars, Error):
        _fail(erase_chars)

    try:
        config = ConversionConfig(
            delimiter=resolved_delimiter,
            input_path=infile,
            output_path=outfile,
            replace_chars=tuple(replace_chars),
            erase_chars=tuple(erase_chars),
            encoding=encoding,
            max_tokens=max_tokens,
        )
    except ValidationError as e:
        _fail(e.errors()[0]["msg"])

    try:
        run(config)
    except BrokenPipeError:
        # Reader went away (e.g. piping to `head`); close stdout so the
        # interpreter does not try to flush it again on exit
        try:
            sys.stdout.close()
        except BrokenPipeError:
            pass
        sys.exit(0)
    except (OSError, UnicodeDecodeError) as e:
        _fail(e)


def main():
    """Entry point for CLI."""
    cli(auto_envvar_prefix="FASTCSV2JSON")


if __name__ == "__main__":
    main()
