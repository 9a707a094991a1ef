"""Command-line interface.

Reads a JSON shape file, aggregates areas or volumes and prints the total in
the requested encoding.

Usage:
    $ shapecalc area shapes.json --format markup
    $ shapecalc volume solids.json --indent 2
    $ shapecalc kinds
"""
from __future__ import annotations

import json
import logging
from typing import Optional

import typer

from shapecalc.config import DEFAULT_SHAPES_PATH, DEFAULT_SOLIDS_PATH, DEFAULT_OUTPUT_FORMAT
from shapecalc.errors import ShapeError
from shapecalc.logging_config import setup_logging
from shapecalc.model.calculators import AreaCalculator, VolumeCalculator
from shapecalc.model.io import ShapeFileIO, APP_VERSION
from shapecalc.model.outputs import OutputFormat, ResultFormatter
from shapecalc.model.shapes import list_kinds

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="shapecalc",
    help="Sum the areas or volumes of shapes described in a JSON file.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"shapecalc version {APP_VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on stderr",
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--log-file",
        help="Also write the log to this file",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """
    shapecalc - area and volume totals for collections of shapes.
    """
    setup_logging(level=logging.DEBUG if verbose else logging.WARNING, log_file=log_file)


def _run(calculator_cls: type, path: str, fmt: OutputFormat, indent: Optional[int]) -> None:
    try:
        shapes = ShapeFileIO.load_shapes(path)
        formatter = ResultFormatter(calculator_cls(shapes))
        typer.echo(formatter.render(fmt, indent=indent))
    except (ShapeError, OSError, json.JSONDecodeError) as e:
        logger.debug("Command failed", exc_info=True)
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)


@app.command()
def area(
    path: str = typer.Argument(DEFAULT_SHAPES_PATH, help="JSON file with shape descriptions"),
    fmt: OutputFormat = typer.Option(OutputFormat(DEFAULT_OUTPUT_FORMAT), "--format", "-f", help="Output encoding"),
    indent: Optional[int] = typer.Option(None, "--indent", help="JSON indentation"),
) -> None:
    """Print the sum of the areas of all shapes in PATH."""
    _run(AreaCalculator, path, fmt, indent)


@app.command()
def volume(
    path: str = typer.Argument(DEFAULT_SOLIDS_PATH, help="JSON file with solid descriptions"),
    fmt: OutputFormat = typer.Option(OutputFormat(DEFAULT_OUTPUT_FORMAT), "--format", "-f", help="Output encoding"),
    indent: Optional[int] = typer.Option(None, "--indent", help="JSON indentation"),
) -> None:
    """Print the sum of the volumes of all solids in PATH."""
    _run(VolumeCalculator, path, fmt, indent)


@app.command()
def kinds() -> None:
    """List the shape kinds accepted in shape files."""
    for kind in list_kinds():
        typer.echo(kind)
