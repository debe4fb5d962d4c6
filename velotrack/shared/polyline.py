"""
Encoded polyline codec.

Implements the delta / zig-zag / base-64-ish text format used by mapping
platforms (Google, Strava, Leaflet plugins) to ship coordinate paths.
Output must stay byte-identical to that format, map displays decode it.

Usage:
    from velotrack.shared.polyline import encode, decode

    encode([(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)])
    # '_p~iF~ps|U_ulLnnqC_mqNvxq`@'
"""

import math
from typing import Iterable, List, NamedTuple, Sequence, Tuple

LatLon = Tuple[float, float]

DEFAULT_PRECISION = 5

# Character alphabet: every group is offset into printable ASCII '?'..'~'
CHAR_OFFSET = 63
CHUNK_BITS = 5
CHUNK_MASK = 0x1F
CONTINUATION_BIT = 0x20

# Longest value accepted when decoding (7 groups). A full 360° longitude
# delta at precision 7 still fits.
MAX_VALUE_BITS = 35


class PolylineDecodeError(ValueError):
    """Encoded string is not a valid polyline."""
    pass


class EncoderState(NamedTuple):
    """
    Scaled coordinates of the previously emitted point.

    Threaded through a single encode pass and dropped afterwards.
    """
    last_lat: int = 0
    last_lng: int = 0


def scale_coordinate(value: float, precision: int = DEFAULT_PRECISION) -> int:
    """
    Scale degrees to a fixed-precision integer.

    Rounds half up (towards +inf), matching the reference encoder,
    so -0.000005 scales to 0 rather than -1.
    """
    return int(math.floor(value * 10 ** precision + 0.5))


def zigzag(delta: int) -> int:
    """Map a signed delta onto a non-negative integer."""
    return ~(delta << 1) if delta < 0 else delta << 1


def unzigzag(value: int) -> int:
    """Inverse of zigzag()."""
    return ~(value >> 1) if value & 1 else value >> 1


def encode_value(delta: int) -> str:
    """Encode one signed delta as 5-bit groups, least significant first."""
    value = zigzag(delta)
    chars = []

    while value >= CONTINUATION_BIT:
        chars.append(chr((CONTINUATION_BIT | (value & CHUNK_MASK)) + CHAR_OFFSET))
        value >>= CHUNK_BITS

    chars.append(chr(value + CHAR_OFFSET))
    return "".join(chars)


def _encode_point(
    state: EncoderState,
    point: Sequence[float],
    precision: int,
) -> Tuple[EncoderState, str]:
    """Emit the lat/lng deltas of one point and return the advanced state."""
    lat = scale_coordinate(point[0], precision)
    lng = scale_coordinate(point[1], precision)

    chunk = encode_value(lat - state.last_lat) + encode_value(lng - state.last_lng)
    return EncoderState(lat, lng), chunk


def encode(points: Iterable[Sequence[float]], precision: int = DEFAULT_PRECISION) -> str:
    """
    Encode (lat, lon) pairs into a polyline string.

    Args:
        points: Iterable of (lat, lon) pairs, latitude first
        precision: Decimal places kept (5 for the standard format)

    Returns:
        Concatenated encoding, latitude delta before longitude delta
        for every point, no separators
    """
    state = EncoderState()
    chunks = []

    for point in points:
        state, chunk = _encode_point(state, point, precision)
        chunks.append(chunk)

    return "".join(chunks)


def _decode_values(encoded: str) -> List[int]:
    """Split an encoded string back into signed deltas."""
    values: List[int] = []
    result = 0
    shift = 0

    for position, char in enumerate(encoded):
        code = ord(char) - CHAR_OFFSET
        if code < 0 or code > 0x3F:
            raise PolylineDecodeError(
                f"Invalid character {char!r} at position {position}"
            )

        result |= (code & CHUNK_MASK) << shift
        shift += CHUNK_BITS

        if code >= CONTINUATION_BIT and shift >= MAX_VALUE_BITS:
            raise PolylineDecodeError(
                f"Value longer than {MAX_VALUE_BITS} bits at position {position}"
            )

        if code < CONTINUATION_BIT:
            values.append(unzigzag(result))
            result = 0
            shift = 0

    if shift:
        raise PolylineDecodeError("Truncated value at end of polyline")

    return values


def decode(encoded: str, precision: int = DEFAULT_PRECISION) -> List[LatLon]:
    """
    Decode a polyline string into (lat, lon) tuples.

    Exact inverse of encode() up to the fixed-precision quantization.

    Raises:
        PolylineDecodeError: On characters outside the alphabet,
            a truncated or overlong value, or an unpaired latitude
    """
    if not encoded:
        return []

    values = _decode_values(encoded)
    if len(values) % 2:
        raise PolylineDecodeError("Polyline holds an unpaired coordinate value")

    factor = 10 ** precision
    points: List[LatLon] = []
    lat = 0
    lng = 0

    for d_lat, d_lng in zip(values[0::2], values[1::2]):
        lat += d_lat
        lng += d_lng
        points.append((lat / factor, lng / factor))

    return points
