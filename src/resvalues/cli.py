"""CLI entry point for resource value conversion."""

import logging
from pathlib import Path
from typing import Optional

import click

from .config import POLICIES, ConversionConfig, UnescapePolicy, get_policy
from .escaping import EscapeIndexError, is_escaped
from .resources import ResourceValue, read_value, write_value

logger = logging.getLogger(__name__)


def _load_input(
    value: Optional[str],
    file: Optional[Path],
    strip_final_newline: bool = False
) -> str:
    """Return the value given on the command line or read from --file."""
    if (value is None) == (file is None):
        raise click.UsageError("Give exactly one of VALUE or --file.")
    if file is None:
        return value

    try:
        return read_value(file, strip_final_newline=strip_final_newline)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--file'") from e


def _emit(result: str, output: Optional[Path], config: ConversionConfig) -> None:
    if output is None:
        click.echo(result)
        return
    write_value(result, output, encoding=config.encoding)
    click.secho(f"Wrote {output}", fg='green', err=True)


def file_options(func):
    """Options shared by commands that can read their input from a file."""
    func = click.option(
        '--strip-final-newline', is_flag=True,
        help='Drop one line break at the end of --file (the whole file is the value otherwise)'
    )(func)
    func = click.option(
        '--file', '-f', type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help='Read the input from a file instead of the argument'
    )(func)
    return func


@click.group()
@click.version_option(version="0.1.0")
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.option('--encoding', type=click.Choice(['utf-8', 'utf-16']), default='utf-8',
              help='Encoding for files written with --output')
@click.option('--escape-xml/--no-escape-xml', default=True,
              help='Encode < and & as XML entities when escaping')
@click.pass_context
def cli(ctx: click.Context, verbose: bool, encoding: str, escape_xml: bool):
    """Escape and unescape string values for Android value resource files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = ConversionConfig(escape_xml=escape_xml, encoding=encoding)


@cli.command()
@click.argument('value', required=False)
@file_options
@click.option('--escape-xml/--no-escape-xml', default=None,
              help='Override entity encoding for this value')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Write the result to a file')
@click.pass_obj
def escape(
    config: ConversionConfig,
    value: Optional[str],
    file: Optional[Path],
    strip_final_newline: bool,
    escape_xml: Optional[bool],
    output: Optional[Path]
):
    """Escape a raw VALUE into resource text."""
    if escape_xml is None:
        escape_xml = config.escape_xml
    raw = _load_input(value, file, strip_final_newline)

    resource = ResourceValue.from_raw(raw, escape_xml=escape_xml)
    logger.debug("Escaped %r -> %r (quoted=%s)", raw, resource.text, resource.quoted)

    _emit(resource.text, output, config)


@cli.command()
@click.argument('text', required=False)
@file_options
@click.option('--policy', '-p', type=click.Choice(sorted(POLICIES)), default='text',
              help='Where the text comes from (sets entity and trim handling)')
@click.option('--resolve-entities/--no-resolve-entities', default=None,
              help='Override entity decoding of the policy')
@click.option('--trim/--no-trim', default=None,
              help='Override whitespace trimming of the policy')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Write the result to a file')
@click.pass_obj
def unescape(
    config: ConversionConfig,
    text: Optional[str],
    file: Optional[Path],
    strip_final_newline: bool,
    policy: str,
    resolve_entities: Optional[bool],
    trim: Optional[bool],
    output: Optional[Path]
):
    """Unescape resource TEXT back into the raw value."""
    base = get_policy(policy)
    effective = UnescapePolicy(
        resolve_entities=base.resolve_entities if resolve_entities is None else resolve_entities,
        trim=base.trim if trim is None else trim,
    )
    source = _load_input(text, file, strip_final_newline)

    resource = ResourceValue.from_text(source, effective)
    logger.debug("Unescaped %r -> %r with %s", source, resource.raw, effective)

    _emit(resource.raw, output, config)


# Negative indexes must reach is_escaped() instead of being read as options
@cli.command('is-escaped', context_settings={"ignore_unknown_options": True})
@click.argument('text')
@click.argument('index', type=int)
def is_escaped_command(text: str, index: int):
    """Report whether the character at INDEX of TEXT is backslash-escaped."""
    try:
        escaped = is_escaped(text, index)
    except EscapeIndexError as e:
        click.secho(f"Error: {e}", fg='red', err=True)
        raise SystemExit(2)

    click.echo("true" if escaped else "false")


@cli.command()
@click.argument('value')
@click.pass_obj
def check(config: ConversionConfig, value: str):
    """Check that a raw VALUE survives escaping and unescaping."""
    resource = ResourceValue.from_raw(value, escape_xml=config.escape_xml)

    click.echo(f"Resource text: {resource.text}")
    if resource.quoted:
        click.echo("  (quoted to keep edge whitespace)")

    if resource.round_trips(resolve_entities=config.escape_xml):
        click.secho("Round-trip OK", fg='green')
    else:
        click.secho("Round-trip FAILED", fg='red')
        raise SystemExit(1)


if __name__ == '__main__':
    cli()
