"""Typer CLI for wall-face utility routing."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from conduits.application import RouteWallFaceCommand
from conduits.application.config import (
    ConfigError,
    config_to_floor_plan,
    config_to_routing_settings,
    load_config,
)
from conduits.cli.commands import display_load_error, validate_command
from conduits.infrastructure import (
    ExporterRegistry,
    RouteReportFormatter,
    WallListFormatter,
)


class FaceSide(str, Enum):
    """Which face of a wall to route."""

    FRONT = "front"
    BACK = "back"


class OutputFormat(str, Enum):
    """Output formats for the route command."""

    TEXT = "text"
    JSON = "json"
    CSV = "csv"


app = typer.Typer(
    name="conduits",
    help="Route utility connections across wall faces around doors and windows.",
)

app.command(name="validate")(validate_command)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def route(
    config_file: Annotated[
        Path, typer.Argument(help="Path to the JSON floor-plan configuration")
    ],
    wall: Annotated[str, typer.Option("--wall", "-w", help="Name of the wall to route")],
    face: Annotated[
        FaceSide, typer.Option("--face", "-f", help="Wall face to route")
    ] = FaceSide.FRONT,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", help="Output format")
    ] = OutputFormat.TEXT,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to this file instead of stdout"),
    ] = None,
    no_waypoints: Annotated[
        bool, typer.Option("--no-waypoints", help="Omit waypoints from the text report")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Compute the utility connections drawn on one wall face."""
    _configure_logging(verbose)

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    plan = config_to_floor_plan(config)
    settings = config_to_routing_settings(config.routing)
    result = RouteWallFaceCommand().execute(
        plan, wall, is_front=face == FaceSide.FRONT, settings=settings
    )

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if output_format == OutputFormat.TEXT:
        text = RouteReportFormatter(show_waypoints=not no_waypoints).format(result)
    else:
        exporter = ExporterRegistry.get(output_format.value)()
        text = exporter.export_string(result)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        typer.echo(f"Wrote {output_format.value} output to {output}")
    else:
        typer.echo(text)


@app.command()
def walls(
    config_file: Annotated[
        Path, typer.Argument(help="Path to the JSON floor-plan configuration")
    ],
) -> None:
    """List the walls of a floor plan with their point counts."""
    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    plan = config_to_floor_plan(config)
    typer.echo(WallListFormatter().format(list(plan.walls)))


if __name__ == "__main__":
    app()
