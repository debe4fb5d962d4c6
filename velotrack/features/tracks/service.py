"""
Track ingestion service.

Single entry point used by the API and the CLI: raw GPX bytes in,
TrackSummary out.
"""

import logging
from datetime import datetime
from typing import Optional, Union

from velotrack.config import settings

from .errors import TrackError
from .models import TrackSummary
from .parser import GPXParserService
from .summary import SummaryEncoder

logger = logging.getLogger(__name__)


class TrackIngestionService:
    """
    Extract and summarize a track in one call.

    Errors from either step propagate unchanged; no partial summary is
    ever returned.
    """

    def __init__(
        self,
        max_points: Optional[int] = None,
        reference_speed_kmh: Optional[float] = None,
    ):
        self.max_points = (
            settings.max_track_points if max_points is None else max_points
        )
        self.encoder = SummaryEncoder(
            settings.reference_speed_kmh
            if reference_speed_kmh is None
            else reference_speed_kmh
        )

    def ingest(
        self,
        content: Union[bytes, str],
        now: Optional[datetime] = None,
    ) -> TrackSummary:
        """
        Parse GPX content and compute its summary.

        Raises:
            TrackError: Any classified parse/validation failure
        """
        try:
            track = GPXParserService.parse(content, max_points=self.max_points, now=now)
        except TrackError as e:
            logger.warning(f"Track rejected ({e.code}): {e}")
            raise

        summary = self.encoder.encode(track)

        logger.info(
            f"Ingested track: {summary.points_count} points, "
            f"{summary.distance_km} km, +{summary.elevation_gain_m} m"
        )
        return summary
