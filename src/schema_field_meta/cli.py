"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from schema_field_meta.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from schema_field_meta.field_resolution import schema_scope
from schema_field_meta.report_writing import write_metadata_report
from schema_field_meta.schema_management import SchemaError, list_field_paths, load_schema_node

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

_config_option = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-field-meta")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for diagnostic output on stderr",
)
def cli(log_level: str) -> None:
    """Schema-driven field metadata utility."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


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
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list-fields")
@_config_option
def list_fields(config_path: str) -> None:
    """Print every field path listed from the configured schema."""
    try:
        configuration = load_configuration(config_path)
        paths = list_field_paths(load_schema_node(configuration.schema))
    except (ConfigurationError, SchemaError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    for path in paths:
        click.echo(path)


@cli.command(name="describe")
@_config_option
@click.argument("paths", nargs=-1, required=True)
def describe(config_path: str, paths: tuple[str, ...]) -> None:
    """Print resolved metadata for each field path as one JSON object per line."""
    try:
        configuration = load_configuration(config_path)
        root = load_schema_node(configuration.schema)
    except (ConfigurationError, SchemaError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    with schema_scope(root) as context:
        for path in paths:
            payload = {"path": path, **context.field_metadata(path).as_dict()}
            click.echo(json.dumps(payload, ensure_ascii=False))


@cli.command(name="export-report")
@_config_option
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the metadata report workbook to write",
)
def export_report(config_path: str, output_path: str) -> None:
    """Write resolved metadata for the configured fields into a workbook."""
    try:
        configuration = load_configuration(config_path)
        root = load_schema_node(configuration.schema)
        with schema_scope(root) as context:
            written = write_metadata_report(
                configuration.schema,
                context,
                configuration.report.fields,
                output_path,
                sheet_name=configuration.report.sheet_name,
            )
    except (ConfigurationError, SchemaError, OSError, ValueError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


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
