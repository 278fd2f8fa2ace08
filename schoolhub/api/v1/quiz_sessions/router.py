from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.auth.dependencies import get_current_user
from schoolhub.auth.rbac import require_campus
from schoolhub.auth.schemas import CurrentUser
from schoolhub.core.exceptions import ServiceError
from schoolhub.core.schemas import MessageResponse
from schoolhub.db.session import get_db

from .schemas import QuizProgress, QuizSessionCreate, QuizSessionExtend, QuizSessionResponse
from . import service

router = APIRouter(prefix="/api/v1/quiz-sessions", tags=["quiz-sessions"])


@router.post("", response_model=QuizSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(
    payload: QuizSessionCreate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> QuizSessionResponse:
    return await service.create_session(db, current_user.campus_id, current_user.id, payload)


@router.get("", response_model=List[QuizSessionResponse])
async def list_my_sessions(
    quiz_id: Optional[str] = None,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> List[QuizSessionResponse]:
    """The caller's sessions, most recently active first."""
    return await service.list_sessions(db, current_user.id, quiz_id=quiz_id)


@router.get("/{session_id}", response_model=QuizSessionResponse)
async def get_session(
    session_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> QuizSessionResponse:
    session = await service.get_session(db, session_id, current_user.id)
    if not session:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Quiz session not found")
    return session


@router.post("/{session_id}/start", response_model=QuizSessionResponse)
async def start_session(
    session_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> QuizSessionResponse:
    try:
        return await service.start_session(db, session_id, current_user.id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/{session_id}/progress", response_model=QuizSessionResponse)
async def record_progress(
    session_id: str,
    payload: QuizProgress,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> QuizSessionResponse:
    try:
        return await service.record_progress(db, session_id, current_user.id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/{session_id}/complete", response_model=QuizSessionResponse)
async def complete_session(
    session_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> QuizSessionResponse:
    try:
        return await service.complete_session(db, session_id, current_user.id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/{session_id}/abandon", response_model=QuizSessionResponse)
async def abandon_session(
    session_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> QuizSessionResponse:
    try:
        return await service.abandon_session(db, session_id, current_user.id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post("/{session_id}/extend", response_model=QuizSessionResponse)
async def extend_session(
    session_id: str,
    payload: QuizSessionExtend,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> QuizSessionResponse:
    try:
        return await service.extend_session(db, session_id, current_user.id, payload.additional_minutes)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{session_id}", response_model=MessageResponse)
async def delete_session(
    session_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> MessageResponse:
    try:
        await service.delete_session(db, session_id, current_user.id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return MessageResponse(message="Quiz session deleted successfully")
