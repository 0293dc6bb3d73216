import re
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
from typing import List, Optional
from infra.database.connection import get_session
from api.schemas.track import TrackCreate, TrackUpdate, TrackRead, MessageResponse, ErrorResponse
from app.services.track_app_service import TrackAppService, MissingFieldsError
from utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)

_ID_PATTERN = re.compile(r"-?[0-9]+")

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

def parse_track_id(raw_id: str) -> int:
    """Base-10 integers only; rejected before any storage access."""
    if not _ID_PATTERN.fullmatch(raw_id):
        raise HTTPException(status_code=400, detail="Invalid id parameter")
    return int(raw_id)

@router.get("/api/tracks", response_model=List[TrackRead], responses={500: ERROR_RESPONSES[500]})
def get_tracks(session: Session = Depends(get_session)):
    app_service = TrackAppService(session)
    try:
        return app_service.get_tracks()
    except Exception:
        logger.exception("Error fetching tracks")
        raise HTTPException(status_code=500, detail="Failed to fetch tracks")

@router.get("/api/tracks/{track_id}", response_model=TrackRead, responses=ERROR_RESPONSES)
def get_track(track_id: str, session: Session = Depends(get_session)):
    parsed_id = parse_track_id(track_id)
    app_service = TrackAppService(session)
    try:
        track = app_service.get_track(parsed_id)
    except Exception:
        logger.exception("Error fetching track")
        raise HTTPException(status_code=500, detail="Failed to fetch track")
    if not track:
        raise HTTPException(status_code=404, detail="Track not found")
    return track

@router.post("/api/tracks", response_model=TrackRead, status_code=201, responses={400: ERROR_RESPONSES[400], 500: ERROR_RESPONSES[500]})
def create_track(payload: TrackCreate, session: Session = Depends(get_session)):
    try:
        TrackAppService.validate_create(payload)
    except MissingFieldsError as e:
        raise HTTPException(status_code=400, detail=str(e))

    app_service = TrackAppService(session)
    try:
        return app_service.create_track(payload)
    except Exception:
        logger.exception("Error creating track")
        raise HTTPException(status_code=500, detail="Failed to create track")

@router.put("/api/tracks/{track_id}", response_model=TrackRead, responses=ERROR_RESPONSES)
def update_track(track_id: str, payload: Optional[TrackUpdate] = None, session: Session = Depends(get_session)):
    parsed_id = parse_track_id(track_id)
    app_service = TrackAppService(session)
    try:
        track = app_service.update_track(parsed_id, payload if payload is not None else TrackUpdate())
    except Exception:
        logger.exception("Error updating track")
        raise HTTPException(status_code=500, detail="Failed to update track")
    if not track:
        raise HTTPException(status_code=404, detail="Track not found")
    return track

@router.delete("/api/tracks/{track_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
def delete_track(track_id: str, session: Session = Depends(get_session)):
    parsed_id = parse_track_id(track_id)
    app_service = TrackAppService(session)
    try:
        deleted = app_service.delete_track(parsed_id)
    except Exception:
        logger.exception("Error deleting track")
        raise HTTPException(status_code=500, detail="Failed to delete track")
    if not deleted:
        raise HTTPException(status_code=404, detail="Track not found")
    return {"message": f"Track {parsed_id} deleted"}
