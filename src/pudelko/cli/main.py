"""Typer CLI for creating, parsing and comparing boxes."""

import logging
from typing import Annotated, Callable, TypeVar

import typer

from pudelko.application.dtos import LabeledBox
from pudelko.cli.commands import sort_command, validate_command
from pudelko.domain import Box, BoxError, sort_boxes
from pudelko.domain.value_objects import UnitOfMeasure
from pudelko.infrastructure import BoxTableFormatter, JsonExporter

logger = logging.getLogger(__name__)

T = TypeVar("T")

FormatOption = Annotated[
    str,
    typer.Option("--format", "-f", help="Output unit: m, cm or mm"),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Print the box as JSON"),
]

# Boxes shown by the demo command
DEMO_BOXES: tuple[tuple[float, float, float], ...] = (
    (1, 2, 3),
    (5, 5, 5),
    (5.43, 4.32, 1.43),
)


def run_or_exit(action: Callable[[], T]) -> T:
    """Run a domain action, turning box errors into exit code 1."""
    try:
        return action()
    except BoxError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _echo_box(box: Box, output_format: str, as_json: bool) -> None:
    if as_json:
        typer.echo(JsonExporter().export_box(box))
    else:
        typer.echo(run_or_exit(lambda: box.format(output_format)))


app = typer.Typer(
    name="pudelko",
    help="Create, parse, add and compress rectangular boxes.",
)

app.command(name="sort")(sort_command)
app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Create, parse, add and compress rectangular boxes."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@app.command()
def show(
    a: Annotated[float | None, typer.Argument(help="First dimension (default 0.1 m)")] = None,
    b: Annotated[float | None, typer.Argument(help="Second dimension (default 0.1 m)")] = None,
    c: Annotated[float | None, typer.Argument(help="Third dimension (default 0.1 m)")] = None,
    unit: Annotated[
        str,
        typer.Option("--unit", "-u", help="Unit of the dimensions: m, cm or mm"),
    ] = "m",
    output_format: FormatOption = "m",
    as_json: JsonOption = False,
) -> None:
    """Create a box from its dimensions and print it.

    Example:
        pudelko show 2.5 9.321 --format mm
    """
    box = run_or_exit(lambda: Box(a, b, c, unit=UnitOfMeasure.from_code(unit)))
    _echo_box(box, output_format, as_json)


@app.command()
def parse(
    text: Annotated[str, typer.Argument(help='Box text, e.g. "2.5 m × 9.321 m × 0.1 m"')],
    output_format: FormatOption = "m",
    as_json: JsonOption = False,
) -> None:
    """Parse a box from text and print it in the requested unit."""
    box = run_or_exit(lambda: Box.parse(text))
    _echo_box(box, output_format, as_json)


@app.command()
def add(
    first: Annotated[str, typer.Argument(help="First box as text")],
    second: Annotated[str, typer.Argument(help="Second box as text")],
    output_format: FormatOption = "m",
) -> None:
    """Add two boxes dimension by dimension."""
    total = run_or_exit(lambda: Box.parse(first) + Box.parse(second))
    _echo_box(total, output_format, as_json=False)


@app.command(name="compress")
def compress_box(
    text: Annotated[str, typer.Argument(help="Box as text")],
    output_format: FormatOption = "m",
) -> None:
    """Print the cube with the same volume as a box."""
    box = run_or_exit(lambda: Box.parse(text))
    formatter = BoxTableFormatter(output_format)
    typer.echo(run_or_exit(lambda: formatter.format_compression(box)))


@app.command()
def demo(output_format: FormatOption = "m") -> None:
    """Show sample boxes, sort them and compress the smallest one."""
    boxes = [Box(*dims) for dims in DEMO_BOXES]
    formatter = BoxTableFormatter(output_format)

    typer.echo("Original list of boxes:")
    for box in boxes:
        typer.echo(run_or_exit(lambda: box.format(output_format)))

    ordered = sort_boxes(boxes)
    typer.echo()
    typer.echo("Sorted list of boxes:")
    typer.echo(
        formatter.format(
            [LabeledBox(label=f"box {i + 1}", box=box) for i, box in enumerate(ordered)]
        )
    )

    typer.echo()
    typer.echo("Compression:")
    typer.echo(run_or_exit(lambda: formatter.format_compression(ordered[0])))


if __name__ == "__main__":
    app()
