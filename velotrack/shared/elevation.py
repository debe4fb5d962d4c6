"""
Elevation utility functions.

Raw elevations are used as recorded. No smoothing is applied, so noisy
barometric or GPS altitude will inflate the gain.
"""

from typing import List


def calculate_elevation_gain(elevations: List[float]) -> float:
    """
    Calculate cumulative elevation gain.

    Only rises between consecutive samples count; descents contribute
    nothing, so this is not the net elevation change.

    Args:
        elevations: Elevation values in meters, in route order

    Returns:
        Total gain in meters (unrounded)

    Example:
        >>> calculate_elevation_gain([100, 150, 120, 170])
        100.0
    """
    gain = 0.0

    for i in range(1, len(elevations)):
        diff = elevations[i] - elevations[i - 1]
        if diff > 0:
            gain += diff

    return gain
