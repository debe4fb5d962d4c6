"""
Tests for GPXParserService.

Covers path selection, defaults for missing fields and the error taxonomy.
"""

from datetime import datetime, timezone

import pytest

from velotrack.features.tracks import (
    GPXParserService,
    parse_track,
    MalformedDocument,
    NoTrackFound,
    EmptyTrack,
    TrackTooShort,
    TrackTooLarge,
    InvalidCoordinate,
    TrackValidationError,
    TrackError,
)


INGESTED_AT = datetime(2025, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# Test Point Extraction
# =============================================================================

class TestExtraction:
    """Tests for reading points from a valid document."""

    def test_points_in_source_order(self, climbing_ride_gpx):
        track = GPXParserService.parse(climbing_ride_gpx)

        assert len(track) == 4
        assert [p.latitude for p in track.points] == [45.0, 45.001, 45.002, 45.003]
        assert all(p.longitude == 6.0 for p in track.points)
        assert [p.elevation for p in track.points] == [100, 150, 120, 170]

    def test_accepts_bytes(self, climbing_ride_gpx):
        track = GPXParserService.parse(climbing_ride_gpx.encode("utf-8"))
        assert len(track) == 4

    def test_accepts_bom(self, climbing_ride_gpx):
        content = b"\xef\xbb\xbf" + climbing_ride_gpx.encode("utf-8")
        assert len(GPXParserService.parse(content)) == 4

    def test_missing_elevation_defaults_to_zero(self, gpx_builder):
        content = gpx_builder(segments=[[(45.0, 6.0), (45.001, 6.001, 250)]])
        track = GPXParserService.parse(content)
        assert track.points[0].elevation == 0.0
        assert track.points[1].elevation == 250.0

    def test_track_name(self, climbing_ride_gpx):
        assert GPXParserService.parse(climbing_ride_gpx).name == "Morning Ride"

    def test_lat_lon_axis_order(self, gpx_builder):
        content = gpx_builder(segments=[[(10.0, 20.0), (11.0, 21.0)]])
        point = GPXParserService.parse(content).points[0]
        assert point.longitude == 20.0
        assert point.latitude == 10.0
        assert point.lat_lon == (10.0, 20.0)


class TestPathSelection:
    """Tests for choosing the first line-shaped path."""

    def test_first_segment_wins(self, gpx_builder):
        content = gpx_builder(segments=[
            [(45.0, 6.0), (45.1, 6.1)],
            [(46.0, 7.0), (46.1, 7.1), (46.2, 7.2)],
        ])
        track = GPXParserService.parse(content)
        assert len(track) == 2
        assert track.points[0].latitude == 45.0

    def test_empty_segment_skipped(self, gpx_builder):
        content = gpx_builder(segments=[[], [(46.0, 7.0), (46.1, 7.1)]])
        track = GPXParserService.parse(content)
        assert track.points[0].latitude == 46.0

    def test_track_before_route(self, gpx_builder):
        content = gpx_builder(
            segments=[[(45.0, 6.0), (45.1, 6.1)]],
            routes=[[(1.0, 1.0), (2.0, 2.0)]],
        )
        assert GPXParserService.parse(content).points[0].latitude == 45.0

    def test_route_used_without_track(self, gpx_builder):
        content = gpx_builder(routes=[[(1.0, 1.0, 5), (2.0, 2.0, 8)]])
        track = GPXParserService.parse(content)
        assert [p.lat_lon for p in track.points] == [(1.0, 1.0), (2.0, 2.0)]
        assert track.name == "Planned"

    def test_waypoints_are_not_a_path(self, gpx_builder):
        content = gpx_builder(
            segments=[[(45.0, 6.0), (45.1, 6.1)]],
            waypoints=[(0.0, 0.0), (1.0, 1.0)],
        )
        assert GPXParserService.parse(content).points[0].latitude == 45.0


# =============================================================================
# Test Start Time
# =============================================================================

class TestStartTime:
    """Tests for start timestamp derivation."""

    def test_recorded_time(self, climbing_ride_gpx):
        track = GPXParserService.parse(climbing_ride_gpx, now=INGESTED_AT)
        assert track.start_time == datetime(2024, 5, 1, 7, 30, tzinfo=timezone.utc)
        assert track.start_time_recorded is True

    def test_offset_normalized_to_utc(self, gpx_builder):
        content = gpx_builder(segments=[[
            (45.0, 6.0, 100, "2024-05-01T09:30:00+02:00"),
            (45.1, 6.1, 100, "2024-05-01T09:31:00+02:00"),
        ]])
        track = GPXParserService.parse(content)
        assert track.start_time == datetime(2024, 5, 1, 7, 30, tzinfo=timezone.utc)
        assert track.start_time.utcoffset().total_seconds() == 0

    def test_falls_back_to_ingestion_time(self, gpx_builder):
        content = gpx_builder(segments=[[(45.0, 6.0), (45.1, 6.1)]])
        track = GPXParserService.parse(content, now=INGESTED_AT)
        assert track.start_time == INGESTED_AT
        assert track.start_time_recorded is False

    def test_fallback_defaults_to_current_time(self, gpx_builder):
        content = gpx_builder(segments=[[(45.0, 6.0), (45.1, 6.1)]])
        before = datetime.now(timezone.utc)
        track = GPXParserService.parse(content)
        after = datetime.now(timezone.utc)
        assert before <= track.start_time <= after


# =============================================================================
# Test Errors
# =============================================================================

class TestErrors:
    """Tests for classified parse failures."""

    def test_malformed_markup(self):
        with pytest.raises(MalformedDocument):
            GPXParserService.parse("this is not xml <gpx")

    def test_invalid_utf8(self):
        with pytest.raises(MalformedDocument):
            GPXParserService.parse(b"\xff\xfe\xfa<gpx/>")

    def test_no_track_or_route(self, gpx_builder):
        content = gpx_builder(waypoints=[(45.0, 6.0), (45.1, 6.1)])
        with pytest.raises(NoTrackFound):
            GPXParserService.parse(content)

    def test_empty_document(self, gpx_builder):
        with pytest.raises(NoTrackFound):
            GPXParserService.parse(gpx_builder())

    def test_track_without_points(self, gpx_builder):
        with pytest.raises(EmptyTrack):
            GPXParserService.parse(gpx_builder(segments=[[]]))

    def test_single_point(self, gpx_builder):
        with pytest.raises(TrackTooShort):
            GPXParserService.parse(gpx_builder(segments=[[(45.0, 6.0)]]))

    def test_latitude_out_of_range(self, gpx_builder):
        content = gpx_builder(segments=[[(45.0, 6.0), (95.0, 6.0)]])
        with pytest.raises(InvalidCoordinate) as exc_info:
            GPXParserService.parse(content)
        assert exc_info.value.index == 1
        assert exc_info.value.latitude == 95.0

    def test_longitude_out_of_range(self, gpx_builder):
        content = gpx_builder(segments=[[(45.0, 181.0), (45.0, 6.0)]])
        with pytest.raises(InvalidCoordinate) as exc_info:
            GPXParserService.parse(content)
        assert exc_info.value.index == 0

    @pytest.mark.parametrize("ele", ["inf", "-inf", "nan"])
    def test_non_finite_elevation(self, gpx_builder, ele):
        """xsd:decimal has no inf/nan, gain would be meaningless."""
        content = gpx_builder(segments=[[(45.0, 6.0, 0), (45.1, 6.1, ele)]])
        with pytest.raises(MalformedDocument, match="Point #1"):
            GPXParserService.parse(content)

    def test_point_limit(self, gpx_builder):
        points = [(45.0 + i * 0.001, 6.0) for i in range(6)]
        content = gpx_builder(segments=[points])
        with pytest.raises(TrackTooLarge) as exc_info:
            GPXParserService.parse(content, max_points=5)
        assert exc_info.value.points_count == 6
        assert exc_info.value.max_points == 5

    def test_point_limit_not_reached(self, gpx_builder):
        points = [(45.0 + i * 0.001, 6.0) for i in range(5)]
        content = gpx_builder(segments=[points])
        assert len(parse_track(content, max_points=5)) == 5

    def test_zero_limit_disables_check(self, gpx_builder):
        points = [(45.0 + i * 0.001, 6.0) for i in range(50)]
        assert len(parse_track(gpx_builder(segments=[points]), max_points=0)) == 50

    def test_hierarchy(self):
        """Callers can catch every failure through TrackError."""
        assert issubclass(EmptyTrack, TrackValidationError)
        assert issubclass(TrackTooShort, TrackValidationError)
        assert issubclass(InvalidCoordinate, TrackValidationError)
        for error in (MalformedDocument, NoTrackFound, TrackTooLarge, TrackValidationError):
            assert issubclass(error, TrackError)

    def test_error_codes(self):
        assert NoTrackFound().code == "no_track_found"
        assert str(NoTrackFound()) == "Track file has no track or route."
