"""Sort command for listing a box catalog in order.

Boxes are ordered by volume, then surface area, then the sum of their
dimensions, unless the catalog's output section disables sorting.
"""

from pathlib import Path
from typing import Annotated

import typer

from pudelko.application.config import ConfigError, config_to_boxes, load_config
from pudelko.cli.commands.validate import echo_config_error
from pudelko.domain import UnsupportedFormatError
from pudelko.infrastructure import BoxTableFormatter, JsonExporter


def sort_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON catalog file"),
    ],
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output unit: m, cm or mm (default from catalog)"),
    ] = None,
    reverse: Annotated[
        bool,
        typer.Option(
            "--reverse", "-r", help="Largest boxes first, even if the catalog disables sorting"
        ),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the catalog as JSON"),
    ] = False,
) -> None:
    """List the boxes of a catalog, smallest first.

    Example:
        pudelko sort boxes.json --format cm
    """
    try:
        config = load_config(config_file)
        if reverse:
            output = config.output.model_copy(update={"sort": True, "reverse": True})
            config = config.model_copy(update={"output": output})
        boxes = config_to_boxes(config)
    except ConfigError as e:
        echo_config_error(e)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(JsonExporter().export(boxes))
        return

    formatter = BoxTableFormatter(output_format or config.output.unit)
    try:
        typer.echo(formatter.format(boxes))
    except UnsupportedFormatError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
