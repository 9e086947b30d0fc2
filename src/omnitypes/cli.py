# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT
"""Command line interface for TypeScript declaration generation.

Usage:
    omnitypes generate [SCHEMAS_DIR] [OUTPUT_DIR] [--export-format FORMAT] [--no-docs]
    omnitypes show SCHEMA_FILE [--export-format FORMAT] [--no-docs]

Arguments left out on the command line are taken from ``OMNITYPES_*``
environment variables (see :mod:`omnitypes.config.settings`).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from omnitypes import __version__
from omnitypes.config.settings import Settings, get_settings
from omnitypes.converter import convert_directory, load_schema
from omnitypes.exceptions import TypeGenerationError
from omnitypes.generation.generator import generate_declarations, render_module
from omnitypes.models import EnumExportFormat, ModelConversionReport

console = Console()
error_console = Console(stderr=True)

_EXPORT_FORMAT_CHOICES = click.Choice(
    [export_format.value for export_format in EnumExportFormat], case_sensitive=False
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _resolve_export_format(value: str | None, settings: Settings) -> EnumExportFormat:
    if value is None:
        return settings.export_format
    return EnumExportFormat(value.upper())


def _print_report(report: ModelConversionReport, schemas_dir: Path) -> None:
    table = Table(title="Generated declarations")
    table.add_column("Schema", style="cyan")
    table.add_column("Output")
    table.add_column("Declarations", justify="right")
    table.add_column("Status")

    for outcome in report.outcomes:
        schema = str(outcome.schema_path.relative_to(schemas_dir))
        if outcome.success:
            output = str(outcome.output_path) if outcome.output_path else "-"
            status = "[green]ok[/green]" if outcome.output_path else "[yellow]empty[/yellow]"
        else:
            output = "-"
            status = f"[red]failed[/red] {outcome.error}"
        table.add_row(schema, output, str(outcome.declaration_count), status)

    console.print(table)


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit.")
@click.option("--log-level", default=None, help="Logging level (overrides OMNITYPES_LOG_LEVEL).")
@click.pass_context
def cli(ctx: click.Context, version: bool, log_level: str | None) -> None:
    """Generate TypeScript declarations from JSON Schema documents.

    Examples:

        # Convert every schema under ./schemas into ./types
        omnitypes generate ./schemas ./types

        # Print the declarations for one schema
        omnitypes show ./schemas/user.schema.json
    """
    if version:
        click.echo(f"omnitypes {__version__}")
        ctx.exit(0)

    settings = get_settings()
    _configure_logging(log_level.upper() if log_level else settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("schemas_dir", required=False, type=click.Path(file_okay=False, path_type=Path))
@click.argument("output_dir", required=False, type=click.Path(file_okay=False, path_type=Path))
@click.option("--export-format", type=_EXPORT_FORMAT_CHOICES, default=None, help="Export mode.")
@click.option("--no-docs", is_flag=True, help="Do not emit JSDoc blocks.")
@click.pass_obj
def generate(
    settings: Settings,
    schemas_dir: Path | None,
    output_dir: Path | None,
    export_format: str | None,
    no_docs: bool,
) -> None:
    """Convert every schema under SCHEMAS_DIR into .d.ts files in OUTPUT_DIR."""
    schemas_dir = schemas_dir or settings.schemas_dir
    output_dir = output_dir or settings.output_dir
    if schemas_dir is None:
        raise click.UsageError("SCHEMAS_DIR not given and OMNITYPES_SCHEMAS_DIR not set.")
    if output_dir is None:
        raise click.UsageError("OUTPUT_DIR not given and OMNITYPES_OUTPUT_DIR not set.")
    if not schemas_dir.is_dir():
        raise click.UsageError(f"Schemas directory does not exist: {schemas_dir}")

    report = convert_directory(
        schemas_dir,
        output_dir,
        export_format=_resolve_export_format(export_format, settings),
        include_docs=settings.include_docs and not no_docs,
        patterns=settings.schema_patterns,
    )
    _print_report(report, schemas_dir)

    if report.failed:
        error_console.print(f"[red]{len(report.failed)} schema file(s) failed[/red]")
        sys.exit(1)


@cli.command()
@click.argument("schema_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--export-format", type=_EXPORT_FORMAT_CHOICES, default=None, help="Export mode.")
@click.option("--no-docs", is_flag=True, help="Do not emit JSDoc blocks.")
@click.pass_obj
def show(settings: Settings, schema_file: Path, export_format: str | None, no_docs: bool) -> None:
    """Print the declarations generated for SCHEMA_FILE."""
    try:
        result = generate_declarations(
            load_schema(schema_file),
            export_format=_resolve_export_format(export_format, settings),
            include_docs=settings.include_docs and not no_docs,
        )
    except TypeGenerationError as e:
        raise click.ClickException(str(e)) from e

    click.echo(render_module(result), nl=False)


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
