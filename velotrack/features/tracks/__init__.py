"""
GPS track ingestion.

Usage:
    from velotrack.features.tracks import TrackIngestionService

    summary = TrackIngestionService().ingest(gpx_bytes)
    summary.to_dict()

Components:
- GPXParserService: GPX document -> Track
- SummaryEncoder / summarize_track: Track -> TrackSummary
- TrackIngestionService: both steps with configured limits
- errors: classified failures (TrackError and subclasses)
"""

from .errors import (
    TrackError,
    MalformedDocument,
    NoTrackFound,
    TrackValidationError,
    EmptyTrack,
    TrackTooShort,
    InvalidCoordinate,
    TrackTooLarge,
)
from .models import GeoPoint, Track, TrackSummary
from .parser import GPXParserService, parse_track
from .summary import SummaryEncoder, summarize_track, estimate_moving_time
from .service import TrackIngestionService
from .schemas import TrackSummaryResponse, PolylineDecodeRequest, PolylineDecodeResponse

__all__ = [
    # Errors
    "TrackError",
    "MalformedDocument",
    "NoTrackFound",
    "TrackValidationError",
    "EmptyTrack",
    "TrackTooShort",
    "InvalidCoordinate",
    "TrackTooLarge",
    # Models
    "GeoPoint",
    "Track",
    "TrackSummary",
    # Services
    "GPXParserService",
    "parse_track",
    "SummaryEncoder",
    "summarize_track",
    "estimate_moving_time",
    "TrackIngestionService",
    # Schemas
    "TrackSummaryResponse",
    "PolylineDecodeRequest",
    "PolylineDecodeResponse",
]
