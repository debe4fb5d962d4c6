"""
Track-related schemas.

Pydantic models for the HTTP API.
"""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .models import TrackSummary


class TrackSummaryResponse(BaseModel):
    """Summary returned after a track upload."""

    model_config = ConfigDict(populate_by_name=True)

    distance: float = Field(..., ge=0, description="Distance in km, 2 decimals")
    elevation: int = Field(..., ge=0, description="Elevation gain in meters")
    polyline: str
    start_date: str = Field(..., alias="startDate")
    moving_time: int = Field(..., ge=0, alias="movingTime")

    @classmethod
    def from_summary(cls, summary: TrackSummary) -> "TrackSummaryResponse":
        return cls(**summary.to_dict())


class PolylineDecodeRequest(BaseModel):
    """Encoded polyline to expand."""

    polyline: str


class PolylineDecodeResponse(BaseModel):
    """Decoded (lat, lon) pairs."""

    points: List[Tuple[float, float]]
