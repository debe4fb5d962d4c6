"""
Track domain models.

Plain immutable values: a parsed Track goes in, a TrackSummary comes out.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class GeoPoint:
    """Single recorded point, longitude first as stored in the trace."""

    longitude: float
    latitude: float
    elevation: float = 0.0
    time: Optional[datetime] = None

    @property
    def lat_lon(self) -> Tuple[float, float]:
        """(lat, lon) pair in polyline axis order."""
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class Track:
    """
    Ordered path extracted from a track file.

    start_time is always UTC. When the trace carries no timestamp it is
    the ingestion wall-clock time and start_time_recorded is False.
    """

    points: Tuple[GeoPoint, ...]
    start_time: datetime
    start_time_recorded: bool = False
    name: Optional[str] = None

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class TrackSummary:
    """
    Aggregate statistics for one ingested track.

    moving_time_s is an estimate at a fixed reference speed, not a
    logged duration.
    """

    distance_km: float
    elevation_gain_m: int
    polyline: str
    start_date: str
    moving_time_s: int
    points_count: int = 0
    name: Optional[str] = None

    def to_dict(self) -> dict:
        """Shape consumed by the activity UI."""
        return {
            "distance": self.distance_km,
            "elevation": self.elevation_gain_m,
            "polyline": self.polyline,
            "startDate": self.start_date,
            "movingTime": self.moving_time_s,
        }
