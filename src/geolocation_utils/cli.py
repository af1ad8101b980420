"""CLI entrypoint for geolocation-utils."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.table import Table

from geolocation_utils.boundaries import BoundingBox
from geolocation_utils.config import DEFAULT_UNIT, LOG_LEVEL
from geolocation_utils.coordinate import Coordinate, validate_coordinate
from geolocation_utils.units import DistanceUnit

console = Console()


class CoordinateType(click.ParamType):
    """Parses ``LAT,LON`` into a Coordinate (no range check)."""

    name = "LAT,LON"

    def convert(self, value, param, ctx):
        if isinstance(value, Coordinate):
            return value
        parts = str(value).split(",")
        if len(parts) != 2:
            self.fail(f"expected LAT,LON, got '{value}'", param, ctx)
        try:
            return Coordinate(float(parts[0]), float(parts[1]))
        except ValueError:
            self.fail(f"'{value}' is not a pair of numbers", param, ctx)


class UnitType(click.ParamType):
    name = "unit"

    def convert(self, value, param, ctx):
        if isinstance(value, DistanceUnit):
            return value
        try:
            return DistanceUnit.parse(value)
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


COORDINATE = CoordinateType()
UNIT = UnitType()


def _unit_option(func):
    return click.option(
        "--unit", default=DEFAULT_UNIT, type=UNIT, show_default=True,
        help="Miles, NauticalMiles, Kilometers or Meters (mi, nmi, km, m).",
    )(func)


@click.group()
def cli():
    """geolocation-utils — great-circle distances and bounding boxes."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--from", "origin", required=True, type=COORDINATE, help="Start point.")
@click.option("--to", "target", required=True, type=COORDINATE, help="End point.")
@_unit_option
@click.option("--precision", default=2, type=click.IntRange(min=0), help="Decimal places to print.")
def distance(origin: Coordinate, target: Coordinate, unit: DistanceUnit, precision: int):
    """Print the great-circle distance between two points."""
    value = origin.get_distance_from(target, unit)
    console.print(f"{value:.{precision}f} {unit.value}")


@cli.command()
@click.option("--from", "origin", required=True, type=COORDINATE, help="Center point.")
@click.option("--to", "target", required=True, type=COORDINATE, help="Point to test.")
@click.option("--radius", required=True, type=float, help="Radius in --unit.")
@_unit_option
@click.pass_context
def within(ctx: click.Context, origin: Coordinate, target: Coordinate,
           radius: float, unit: DistanceUnit):
    """Check whether a point lies within a radius. Exit code 1 when outside."""
    inside = origin.in_radius(target, radius, unit)
    value = origin.get_distance_from(target, unit)
    color = "green" if inside else "red"
    verdict = "inside" if inside else "outside"
    console.print(f"[{color}]{verdict}[/] ({value:.2f} of {radius:g} {unit.value})")
    ctx.exit(0 if inside else 1)


@cli.command()
@click.option("--origin", required=True, type=COORDINATE, help="Center of the box.")
@click.option("--distance", "radius", required=True, type=float, help="Radius in --unit.")
@_unit_option
def bounds(origin: Coordinate, radius: float, unit: DistanceUnit):
    """Show the lat/lon bounding box around an origin."""
    box = BoundingBox.create(origin, radius, unit)
    if box is None:
        raise click.BadParameter("; ".join(validate_coordinate(origin)), param_hint="--origin")

    table = Table(title=f"Bounds for {origin} within {radius:g} {unit.value}")
    table.add_column("Axis", style="bold")
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")
    table.add_row("Latitude", f"{box.min_latitude():.6f}", f"{box.max_latitude():.6f}")
    table.add_row("Longitude", f"{box.min_longitude():.6f}", f"{box.max_longitude():.6f}")

    console.print(table)
