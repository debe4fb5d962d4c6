"""
Shared utilities (NOT business logic).

Usage:
    from velotrack.shared import haversine, encode_polyline
    from velotrack.shared.formatters import format_duration
"""
from .geo import (
    haversine,
    calculate_total_distance,
    is_valid_coordinate,
    EARTH_RADIUS_KM,
)
from .elevation import calculate_elevation_gain
from .polyline import (
    encode as encode_polyline,
    decode as decode_polyline,
    PolylineDecodeError,
)
from .formatters import (
    format_duration,
    format_distance_km,
    format_elevation,
)

__all__ = [
    # geo
    "haversine",
    "calculate_total_distance",
    "is_valid_coordinate",
    "EARTH_RADIUS_KM",
    # elevation
    "calculate_elevation_gain",
    # polyline
    "encode_polyline",
    "decode_polyline",
    "PolylineDecodeError",
    # formatters
    "format_duration",
    "format_distance_km",
    "format_elevation",
]
