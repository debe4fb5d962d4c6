"""
Shared test fixtures.

Builds small GPX documents so tests don't depend on fixture files.
"""

import pytest


GPX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<gpx version="1.1" creator="velotrack-tests" '
    'xmlns="http://www.topografix.com/GPX/1/1">\n'
)
GPX_FOOTER = '</gpx>\n'


def _point_xml(tag, point):
    """Render (lat, lon[, ele[, time]]) as a GPX point element."""
    lat, lon = point[0], point[1]
    ele = point[2] if len(point) > 2 else None
    time = point[3] if len(point) > 3 else None

    children = ""
    if ele is not None:
        children += f"<ele>{ele}</ele>"
    if time is not None:
        children += f"<time>{time}</time>"
    return f'<{tag} lat="{lat}" lon="{lon}">{children}</{tag}>\n'


def build_gpx(segments=(), routes=(), waypoints=(), name="Morning Ride"):
    """
    Build a GPX document.

    Args:
        segments: One track with these segments (lists of point tuples)
        routes: Routes, each a list of point tuples
        waypoints: Standalone waypoints
    """
    body = "".join(_point_xml("wpt", p) for p in waypoints)

    if segments:
        body += f"<trk><name>{name}</name>\n"
        for segment in segments:
            body += "<trkseg>\n"
            body += "".join(_point_xml("trkpt", p) for p in segment)
            body += "</trkseg>\n"
        body += "</trk>\n"

    for route in routes:
        body += "<rte><name>Planned</name>\n"
        body += "".join(_point_xml("rtept", p) for p in route)
        body += "</rte>\n"

    return GPX_HEADER + body + GPX_FOOTER


@pytest.fixture
def gpx_builder():
    """Factory fixture returning build_gpx."""
    return build_gpx


@pytest.fixture
def climbing_ride_gpx():
    """Four point ride with a dip in the middle of the climb."""
    return build_gpx(segments=[[
        (45.0, 6.0, 100, "2024-05-01T07:30:00Z"),
        (45.001, 6.0, 150, "2024-05-01T07:31:00Z"),
        (45.002, 6.0, 120, "2024-05-01T07:32:00Z"),
        (45.003, 6.0, 170, "2024-05-01T07:33:00Z"),
    ]])
