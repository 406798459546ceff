"""
Analysis, profile and session endpoints
"""

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, Request, UploadFile

from sxa.errors import DependencyUnavailableError, ValidationError
from sxa.models.analysis import AnalysisResponse, AnalyzeRequest, UploadResponse
from sxa.models.profile import AthleteProfile, ProfileRequest, ProfileSaved
from sxa.models.session import SessionRecord
from sxa.services.analysis_service import AnalysisService
from sxa.utils.logger import get_logger
from sxa.utils.sport_configs import resolve_sport_key

logger = get_logger(__name__)
router = APIRouter(prefix="/api")


# Capabilities are built once in the application lifespan and read from app.state
def get_analysis_service(request: Request) -> AnalysisService:
    return request.app.state.analysis_service


def get_session_store(request: Request):
    return request.app.state.session_store


def get_profile_store(request: Request):
    return request.app.state.profile_store


def get_upload_storage(request: Request):
    return request.app.state.upload_storage


@router.post("/upload", response_model=UploadResponse)
async def upload_video(
    video: Optional[UploadFile] = File(None),
    sport: Optional[str] = Form(None),
    storage=Depends(get_upload_storage),
):
    """Store a video for a later analyze call"""
    if not storage.available:
        raise DependencyUnavailableError(storage.reason)
    if video is None:
        raise ValidationError("No video file uploaded.")

    stored = await storage.save(video)
    return UploadResponse(
        message="File uploaded successfully",
        session_id=str(uuid.uuid4()),
        filename=stored.filename,
        size=stored.size,
        sport=resolve_sport_key(sport),
        file_url=f"/uploads/{stored.filename}",
        file_path=stored.path,
        next_step="POST /api/analyze with { sport, filePath }",
    )


@router.post("/analyze", response_model=AnalysisResponse)
async def analyze(
    payload: Optional[AnalyzeRequest] = None,
    service: AnalysisService = Depends(get_analysis_service),
):
    """Score a movement; the result is returned even when it could not be stored"""
    request = payload or AnalyzeRequest()
    logger.info(
        f"Analysis requested: sport={request.sport or '-'}, athlete={request.athlete_id or '-'}, "
        f"frames={len(request.frames) if request.frames else 0}"
    )
    return await service.analyze(request)


# Store calls block on the database, so these handlers are plain def and run in the threadpool
@router.post("/profile", response_model=ProfileSaved)
def save_profile(payload: ProfileRequest, store=Depends(get_profile_store)):
    athlete_id = store.upsert(payload)
    return ProfileSaved(id=athlete_id)


@router.get("/profile/{athlete_id}", response_model=AthleteProfile)
def get_profile(athlete_id: str, store=Depends(get_profile_store)):
    return store.get(athlete_id)


@router.get("/sessions/{session_id}", response_model=SessionRecord)
def get_session(session_id: str, store=Depends(get_session_store)):
    return store.get(session_id)


@router.get("/sessions", response_model=List[SessionRecord])
def list_sessions(
    request: Request,
    athlete_id: Optional[str] = Query(None, alias="athleteId"),
    limit: Optional[int] = Query(None, ge=1),
    store=Depends(get_session_store),
):
    if limit is None:
        limit = request.app.state.settings.DEFAULT_SESSION_LIMIT
    return store.list(athlete_id=athlete_id, limit=limit)
