"""
Track Routes

Endpoints for uploading GPX tracks and decoding polylines.
"""

from fastapi import APIRouter, UploadFile, File, HTTPException

from velotrack.config import settings
from velotrack.features.tracks import (
    TrackError,
    TrackTooLarge,
    TrackIngestionService,
    TrackSummaryResponse,
    PolylineDecodeRequest,
    PolylineDecodeResponse,
)
from velotrack.shared.polyline import decode, PolylineDecodeError

router = APIRouter()


@router.post("/upload", response_model=TrackSummaryResponse)
async def upload_track(file: UploadFile = File(...)):
    """
    Upload and summarize a GPX track.

    Returns distance, elevation gain, encoded polyline, start date
    and estimated moving time.
    """
    # Validate file
    if not file.filename or not file.filename.lower().endswith('.gpx'):
        raise HTTPException(status_code=400, detail="Only .gpx files are allowed")

    # Read content
    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large (max {settings.max_upload_bytes} bytes)"
        )

    try:
        summary = TrackIngestionService().ingest(content)
    except TrackTooLarge as e:
        raise HTTPException(status_code=413, detail={"code": e.code, "message": str(e)})
    except TrackError as e:
        raise HTTPException(status_code=400, detail={"code": e.code, "message": str(e)})

    return TrackSummaryResponse.from_summary(summary)


@router.post("/polyline/decode", response_model=PolylineDecodeResponse)
async def decode_polyline(request: PolylineDecodeRequest):
    """Expand an encoded polyline into (lat, lon) pairs."""
    try:
        points = decode(request.polyline)
    except PolylineDecodeError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return PolylineDecodeResponse(points=points)
