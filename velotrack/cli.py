"""
Command line interface for track ingestion.

Usage:
    python -m velotrack.cli summarize ride.gpx
    python -m velotrack.cli summarize ride.gpx --json
    python -m velotrack.cli decode '_p~iF~ps|U_ulLnnqC'
"""

import json
import logging
import sys
from pathlib import Path

import click

from velotrack.features.tracks import TrackError, TrackIngestionService
from velotrack.shared.formatters import format_distance_km, format_duration, format_elevation
from velotrack.shared.polyline import decode as decode_polyline, PolylineDecodeError


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """GPX track tools for velotrack."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.option(
    "--max-points",
    default=None,
    type=click.IntRange(min=0),
    help="Override the point limit (0 = no limit)"
)
def summarize(path, as_json, max_points):
    """
    Summarize a GPX file.

    Prints distance, elevation gain, estimated moving time and the
    encoded polyline.
    """
    try:
        summary = TrackIngestionService(max_points=max_points).ingest(path.read_bytes())
    except TrackError as e:
        click.echo(f"Error ({e.code}): {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(summary.to_dict(), indent=2))
        return

    click.echo(f"Track:       {summary.name or path.name}")
    click.echo(f"Points:      {summary.points_count}")
    click.echo(f"Distance:    {format_distance_km(summary.distance_km)}")
    click.echo(f"Elevation:   {format_elevation(summary.elevation_gain_m)}")
    click.echo(f"Moving time: {format_duration(summary.moving_time_s)} (estimate)")
    click.echo(f"Start date:  {summary.start_date}")
    click.echo(f"Polyline:    {summary.polyline}")


@cli.command()
@click.argument("polyline")
def decode(polyline):
    """Decode an encoded polyline into lat,lon lines."""
    try:
        points = decode_polyline(polyline)
    except PolylineDecodeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for lat, lon in points:
        click.echo(f"{lat:.5f},{lon:.5f}")


if __name__ == "__main__":
    cli()
