"""
Formatting utilities for display.

Used by the CLI summary output.
"""


def format_duration(seconds: int) -> str:
    """
    Format seconds as 'Xh YYmin'.

    Args:
        seconds: Duration in seconds (e.g., 5400)

    Returns:
        Formatted string (e.g., '1h 30min')
    """
    if seconds < 0:
        return "—"

    total_minutes = seconds // 60
    h = total_minutes // 60
    m = total_minutes % 60

    if h == 0:
        return f"{m}min"
    elif m == 0:
        return f"{h}h"
    else:
        return f"{h}h {m:02d}min"


def format_distance_km(km: float) -> str:
    """
    Format distance.

    Args:
        km: Distance in kilometers

    Returns:
        Formatted string (e.g., '12.50 km' or '850 m')
    """
    if km < 1:
        return f"{int(km * 1000)} m"
    return f"{km:.2f} km"


def format_elevation(meters: float) -> str:
    """Format elevation gain (e.g., '+850 m')."""
    if meters >= 0:
        return f"+{int(meters)} m"
    return f"{int(meters)} m"
