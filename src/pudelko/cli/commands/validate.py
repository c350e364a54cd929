"""The ``validate`` command and catalog error reporting shared with ``sort``."""

from pathlib import Path
from typing import Annotated

import typer

from pudelko.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def _config_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "json_parse":
        return ["Invalid JSON syntax"] + [
            f"  Line {d['line']}, Column {d['column']}: {d['message']}" for d in error.details
        ]
    if error.error_type == "file_not_found":
        return [f"File not found: {error.path}"]
    if error.details:
        return [f"{d.get('path') or '<root>'}: {d['message']}" for d in error.details]
    return [error.message]


def echo_config_error(error: ConfigError) -> None:
    """Print a catalog loading error to stderr."""
    typer.echo("Errors:", err=True)
    for line in _config_error_lines(error):
        typer.echo(f"  {line}", err=True)


def _summary(result: ValidationResult) -> str:
    if not result.is_valid:
        return (
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)"
        )
    if result.has_warnings:
        return f"Validation passed with {len(result.warnings)} warning(s)"
    return "Validation passed. Catalog is valid."


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON catalog file to validate"),
    ],
) -> None:
    """Validate a box catalog file.

    Exit codes: 0 when the catalog is valid, 1 when it has errors,
    2 when it is valid but has duplicate boxes.

    Example:
        pudelko validate boxes.json
    """
    typer.echo(f"Validating {config_file}...")
    try:
        result = validate_config(load_config(config_file))
    except ConfigError as e:
        echo_config_error(e)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    if result.errors:
        typer.echo("Errors:", err=True)
    for error in result.errors:
        typer.echo(f"  {error.path}: {error.message}", err=True)
        if error.value is not None:
            typer.echo(f"    value: {error.value!r}", err=True)
    if result.has_warnings:
        typer.echo("Warnings:")
    for warning in result.warnings:
        typer.echo(f"  {warning.path}: {warning.message}")
        if warning.suggestion:
            typer.echo(f"    suggestion: {warning.suggestion}")

    typer.echo(_summary(result), err=not result.is_valid)
    raise typer.Exit(code=result.exit_code)
