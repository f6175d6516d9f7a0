"""Command-line interface for the JSON Struct Mapper."""

import logging
import click
from pathlib import Path
from typing import Optional
from . import __version__
from .converter import Converter
from .profiler import ConversionProfiler
from .types import MapperConfig, MapperError
from .value_kind_detector import ValueKindDetector


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )


def output_options(func):
    """Attach the options shared by commands that print JSON."""
    func = click.option('--ensure-ascii', is_flag=True, help='Escape non-ASCII characters')(func)
    func = click.option('--indent', type=click.IntRange(min=0), default=2, show_default=True,
                        help='Indentation used with --pretty')(func)
    func = click.option('--pretty', '-p', is_flag=True, help='Indent the JSON output')(func)
    return func


@click.group()
@click.version_option(version=__version__)
def main():
    """JSON Struct Mapper - Convert JSON documents into records and back."""
    pass


@main.command()
@click.argument('input_file', type=click.Path(path_type=Path))
@click.option('--key', '-k', default=None, help='Root key to extract before converting')
@output_options
@click.option('--keep-nulls', is_flag=True, help='Keep null values instead of compacting them away')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--profile', is_flag=True, help='Print timing and memory metrics to stderr')
def convert(input_file: Path, key: Optional[str], pretty: bool, indent: int, ensure_ascii: bool,
            keep_nulls: bool, verbose: bool, profile: bool):
    """Load a JSON file into records and print it back as JSON."""
    _configure_logging(verbose)
    config = MapperConfig(indent=indent, ensure_ascii=ensure_ascii)
    profiler = ConversionProfiler()
    input_size = input_file.stat().st_size if input_file.is_file() else 0

    try:
        with profiler.profile_operation("convert", input_size) as session:
            converter = Converter.from_file(input_file, key, config=config)
            # The record tree and the flattened copy are both alive here.
            data = converter.to_hash(compact=not keep_nulls)
            session.sample_memory()
            output = converter.serialize(data, pretty)
            session.output_size = len(output.encode('utf-8'))
    except MapperError as e:
        raise click.ClickException(str(e)) from e

    click.echo(output)
    if profile:
        click.echo(profiler.export_metrics(), err=True)


@main.command()
@click.argument('input_file', type=click.Path(path_type=Path))
@click.option('--key', '-k', default=None, help='Root key to extract before converting')
@output_options
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def template(input_file: Path, key: Optional[str], pretty: bool, indent: int,
             ensure_ascii: bool, verbose: bool):
    """Print a blank template with the shape of a JSON file."""
    _configure_logging(verbose)
    config = MapperConfig(indent=indent, ensure_ascii=ensure_ascii)

    try:
        converter = Converter.from_file_as_template(input_file, key, config=config)
    except MapperError as e:
        raise click.ClickException(str(e)) from e

    click.echo(converter.serialize(converter.to_hash(compact=False), pretty))


@main.command()
@click.argument('input_file', type=click.Path(path_type=Path))
@click.option('--key', '-k', default=None, help='Root key to extract before converting')
def fields(input_file: Path, key: Optional[str]):
    """List the field paths of the records built from a JSON file."""
    _configure_logging(False)

    try:
        converter = Converter.from_file(input_file, key)
    except MapperError as e:
        raise click.ClickException(str(e)) from e

    for path, kind in ValueKindDetector().describe_fields(converter.object):
        click.echo(f"{path}: {kind.value}")


if __name__ == '__main__':
    main()
