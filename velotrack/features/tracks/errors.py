"""
Track ingestion errors.

Every failure is terminal for one ingestion call: parsing is
deterministic, so nothing here is retried.
"""

from typing import Optional


class TrackError(Exception):
    """Base track ingestion error."""

    code = "track_error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.__doc__)


class MalformedDocument(TrackError):
    """Track file could not be parsed."""

    code = "malformed_document"


class NoTrackFound(TrackError):
    """Track file has no track or route."""

    code = "no_track_found"


class TrackValidationError(TrackError):
    """Track geometry failed validation."""

    code = "invalid_track"


class EmptyTrack(TrackValidationError):
    """Track geometry has no points."""

    code = "empty_track"


class TrackTooShort(TrackValidationError):
    """Track needs at least two points."""

    code = "track_too_short"


class InvalidCoordinate(TrackValidationError):
    """Point lies outside valid latitude/longitude ranges."""

    code = "invalid_coordinate"

    def __init__(self, index: int, latitude: float, longitude: float):
        self.index = index
        self.latitude = latitude
        self.longitude = longitude
        super().__init__(
            f"Point #{index} is out of range: lat={latitude}, lon={longitude}"
        )


class TrackTooLarge(TrackError):
    """Track exceeds the configured point limit."""

    code = "track_too_large"

    def __init__(self, points_count: int, max_points: int):
        self.points_count = points_count
        self.max_points = max_points
        super().__init__(
            f"Track has {points_count} points, limit is {max_points}"
        )
