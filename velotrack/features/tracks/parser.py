"""
GPX Parser Service

Extracts the recorded path from a GPX document.
"""

import logging
import math
from datetime import datetime, timezone
from typing import List, Optional, Tuple, Union

import gpxpy
import gpxpy.gpx

from velotrack.shared.geo import is_valid_coordinate

from .errors import (
    EmptyTrack,
    InvalidCoordinate,
    MalformedDocument,
    NoTrackFound,
    TrackTooLarge,
    TrackTooShort,
)
from .models import GeoPoint, Track

logger = logging.getLogger(__name__)

MIN_TRACK_POINTS = 2


class GPXParserService:
    """Service for turning GPX files into Track values."""

    @staticmethod
    def parse(
        content: Union[bytes, str],
        max_points: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> Track:
        """
        Parse GPX content and extract the first path.

        Args:
            content: GPX file content as bytes or text
            max_points: Reject paths longer than this (None or 0 = no limit)
            now: Fallback start time when the trace has no timestamps

        Returns:
            Track with at least two validated points

        Raises:
            MalformedDocument: Unparsable markup
            NoTrackFound: No track or route in the document
            EmptyTrack: Track/route present but without points
            TrackTooShort: Single point path
            TrackTooLarge: Path longer than max_points
            InvalidCoordinate: Latitude/longitude out of range
        """
        gpx = GPXParserService._load(content)

        raw_points, name = GPXParserService._select_path(gpx)

        if max_points and len(raw_points) > max_points:
            raise TrackTooLarge(len(raw_points), max_points)

        points = GPXParserService._convert_points(raw_points)
        if len(points) < MIN_TRACK_POINTS:
            raise TrackTooShort()

        start_time, recorded = GPXParserService._start_time(points, now)

        logger.debug(
            f"Extracted {len(points)} points from '{name or 'unnamed'}' "
            f"(start time recorded: {recorded})"
        )

        return Track(
            points=tuple(points),
            start_time=start_time,
            start_time_recorded=recorded,
            name=name,
        )

    @staticmethod
    def _load(content: Union[bytes, str]) -> gpxpy.gpx.GPX:
        """Decode and parse the raw document."""
        if isinstance(content, bytes):
            try:
                content = content.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise MalformedDocument(f"Track file is not valid UTF-8: {e}") from e

        try:
            return gpxpy.parse(content)
        except (gpxpy.gpx.GPXException, ValueError) as e:
            raise MalformedDocument(f"Invalid GPX file: {e}") from e

    @staticmethod
    def _select_path(
        gpx: gpxpy.gpx.GPX,
    ) -> Tuple[List[gpxpy.gpx.GPXTrackPoint], Optional[str]]:
        """
        Pick the first line-shaped path in document order.

        Track segments come before routes. Returns the raw points and
        the name of the owning track/route.
        """
        for track in gpx.tracks:
            for segment in track.segments:
                if segment.points:
                    return segment.points, track.name

        for route in gpx.routes:
            if route.points:
                return route.points, route.name

        if not gpx.tracks and not gpx.routes:
            raise NoTrackFound()
        raise EmptyTrack()

    @staticmethod
    def _convert_points(raw_points) -> List[GeoPoint]:
        """Validate coordinates and default missing elevation to 0."""
        points: List[GeoPoint] = []

        for index, point in enumerate(raw_points):
            lat = float(point.latitude)
            lon = float(point.longitude)
            if not is_valid_coordinate(lat, lon):
                raise InvalidCoordinate(index, lat, lon)

            ele = float(point.elevation) if point.elevation is not None else 0.0
            if not math.isfinite(ele):
                raise MalformedDocument(f"Point #{index} has a non-numeric elevation: {ele}")

            points.append(GeoPoint(
                longitude=lon,
                latitude=lat,
                elevation=ele,
                time=_to_utc(point.time),
            ))

        return points

    @staticmethod
    def _start_time(
        points: List[GeoPoint],
        now: Optional[datetime] = None,
    ) -> Tuple[datetime, bool]:
        """First point's time if recorded, else ingestion time."""
        if points[0].time is not None:
            return points[0].time, True

        fallback = _to_utc(now) if now is not None else datetime.now(timezone.utc)
        return fallback, False


def _to_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize to an aware UTC datetime, naive values are taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_track(
    content: Union[bytes, str],
    max_points: Optional[int] = None,
    now: Optional[datetime] = None,
) -> Track:
    """Shortcut for GPXParserService.parse()."""
    return GPXParserService.parse(content, max_points=max_points, now=now)
