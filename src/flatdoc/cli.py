"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import yaml
from lxml import etree

from flatdoc.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    Settings,
    default_settings,
    load_settings,
    parse_key_path,
    write_placeholder_configuration,
)
from flatdoc.document import Document
from flatdoc.errors import FlatError
from flatdoc.results_writing import render_flat_map_json, write_flat_map_workbook
from flatdoc.value_coercion import format_scalar

INPUT_FORMATS = ("json", "yaml", "xml")
VALUE_TYPES = ("str", "strs", "int", "uint", "float", "bool")

_SUFFIX_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml", ".xml": "xml"}


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="flatdoc")
@click.option("--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """Flatten JSON, YAML and XML documents into single-level key/value maps."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="flatten")
@click.argument("input_path", type=click.Path(path_type=str))
@click.option(
    "--format",
    "input_format",
    type=click.Choice(INPUT_FORMATS),
    help="Input format; detected from the file extension when omitted",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON flatdoc configuration file",
)
@click.option(
    "--ignore",
    "ignored",
    multiple=True,
    help="Dotted key path of a branch to leave out; repeatable",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write to this file instead of stdout; .xlsx writes a workbook",
)
def flatten_command(
    input_path: str,
    input_format: str | None,
    config_path: str | None,
    ignored: tuple[str, ...],
    output_path: str | None,
) -> None:
    """Print the flattened key/value map of a document as JSON."""
    try:
        settings = _load_settings(config_path)
        document = _load_document(input_path, input_format, settings)
        ignored_paths = settings.flatten.ignored_paths + tuple(
            parse_key_path(path) for path in ignored
        )
        flat_map = document.flatten(*ignored_paths)
        if output_path and Path(output_path).suffix.lower() == ".xlsx":
            click.echo(
                str(write_flat_map_workbook(flat_map, output_path, settings.xml.array_separator))
            )
            return
        _emit(render_flat_map_json(flat_map), output_path)
    except (ConfigurationError, OSError, ValueError, FlatError) as exc:
        raise CliError(str(exc)) from exc


@cli.command(name="convert")
@click.argument("input_path", type=click.Path(path_type=str))
@click.option(
    "--to",
    "output_format",
    required=True,
    type=click.Choice(INPUT_FORMATS),
    help="Output format",
)
@click.option(
    "--format",
    "input_format",
    type=click.Choice(INPUT_FORMATS),
    help="Input format; detected from the file extension when omitted",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON flatdoc configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write to this file instead of stdout",
)
def convert_command(
    input_path: str,
    output_format: str,
    input_format: str | None,
    config_path: str | None,
    output_path: str | None,
) -> None:
    """Re-encode a document as JSON, YAML or XML."""
    try:
        settings = _load_settings(config_path)
        document = _load_document(input_path, input_format, settings)
        if output_format == "json":
            text = document.marshal_json()
        elif output_format == "yaml":
            text = document.marshal_yaml()
        else:
            text = document.marshal_xml().decode("utf-8")
        _emit(text, output_path)
    except (ConfigurationError, OSError, ValueError, FlatError) as exc:
        raise CliError(str(exc)) from exc


@cli.command(name="get")
@click.argument("input_path", type=click.Path(path_type=str))
@click.argument("keys", nargs=-1, required=True)
@click.option(
    "--type",
    "value_type",
    default="str",
    show_default=True,
    type=click.Choice(VALUE_TYPES),
    help="Type the value is converted to",
)
@click.option(
    "--format",
    "input_format",
    type=click.Choice(INPUT_FORMATS),
    help="Input format; detected from the file extension when omitted",
)
def get_command(
    input_path: str, keys: tuple[str, ...], value_type: str, input_format: str | None
) -> None:
    """Print the value found under KEYS, converted to the requested type."""
    try:
        document = _load_document(input_path, input_format, default_settings())
        getters = {
            "str": document.get_str,
            "strs": document.get_strs,
            "int": document.get_int,
            "uint": document.get_uint,
            "float": document.get_float,
            "bool": document.get_bool,
        }
        value = getters[value_type](*keys)
    except (OSError, ValueError, FlatError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(format_scalar(value, "\n"))


def _load_settings(config_path: str | None) -> Settings:
    if config_path is None:
        return default_settings()
    return load_settings(config_path)


def _load_document(input_path: str, input_format: str | None, settings: Settings) -> Document:
    path = Path(input_path)
    resolved_format = input_format or _SUFFIX_FORMATS.get(path.suffix.lower())
    if resolved_format is None:
        raise CliError(f"Cannot detect the format of {path}; pass --format.")
    if not path.exists():
        raise CliError(f"Input file not found: {path}")
    data = path.read_bytes()
    try:
        if resolved_format == "json":
            return Document.from_json(data, settings.xml)
        if resolved_format == "yaml":
            return Document.from_yaml(data, settings.xml)
        return Document.from_xml(data, settings.xml)
    except (yaml.YAMLError, etree.XMLSyntaxError) as exc:
        raise CliError(f"Failed to parse {path}: {exc}") from exc


def _emit(text: str, output_path: str | None) -> None:
    if output_path is None:
        click.echo(text)
        return
    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
    click.echo(str(destination.resolve()))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
