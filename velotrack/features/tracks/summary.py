"""
Track summary encoder.

Turns a validated Track into distance, elevation gain, polyline and
an estimated moving time.
"""

import math
from datetime import datetime, timezone

from velotrack.shared.elevation import calculate_elevation_gain
from velotrack.shared.geo import calculate_total_distance
from velotrack.shared.polyline import encode as encode_polyline

from .models import Track, TrackSummary

# Constant speed used to estimate moving time, km/h.
# Timestamps in the trace are deliberately not used.
REFERENCE_SPEED_KMH = 20.0

DISTANCE_DECIMALS = 2


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up."""
    return int(math.floor(value + 0.5))


def format_start_date(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a 'Z' suffix."""
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def estimate_moving_time(
    distance_km: float,
    reference_speed_kmh: float = REFERENCE_SPEED_KMH
) -> int:
    """
    Estimate moving time in seconds at a constant speed.

    Args:
        distance_km: Route distance in kilometers
        reference_speed_kmh: Assumed average speed

    Returns:
        Seconds, e.g. 10 km at 20 km/h -> 1800
    """
    if reference_speed_kmh <= 0:
        raise ValueError("reference_speed_kmh must be positive")
    return round_half_up(distance_km / reference_speed_kmh * 3600)


def summarize_track(
    track: Track,
    reference_speed_kmh: float = REFERENCE_SPEED_KMH
) -> TrackSummary:
    """
    Build the summary for one track.

    Distance and moving time are derived from the unrounded haversine
    total; only the reported distance is rounded to 2 decimals.
    """
    coords = [p.lat_lon for p in track.points]

    distance_km = calculate_total_distance(coords)
    elevation_gain = calculate_elevation_gain([p.elevation for p in track.points])

    return TrackSummary(
        distance_km=round(distance_km, DISTANCE_DECIMALS),
        elevation_gain_m=round_half_up(elevation_gain),
        polyline=encode_polyline(coords),
        start_date=format_start_date(track.start_time),
        moving_time_s=estimate_moving_time(distance_km, reference_speed_kmh),
        points_count=len(track.points),
        name=track.name,
    )


class SummaryEncoder:
    """Summary encoder bound to a reference speed."""

    def __init__(self, reference_speed_kmh: float = REFERENCE_SPEED_KMH):
        if reference_speed_kmh <= 0:
            raise ValueError("reference_speed_kmh must be positive")
        self.reference_speed_kmh = reference_speed_kmh

    def encode(self, track: Track) -> TrackSummary:
        return summarize_track(track, self.reference_speed_kmh)
