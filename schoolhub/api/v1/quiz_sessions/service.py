"""
Class quiz sessions.

A session moves not_started -> in_progress -> completed | expired | abandoned.
There is no background timer: whenever an in_progress session past its
``expires_at`` is loaded, it is first persisted as expired.
"""

import secrets
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from fastapi import status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.core.enums import QuizSessionStatus
from schoolhub.core.exceptions import ConflictError, NotFoundError, ServiceError
from schoolhub.core.logging import get_logger
from schoolhub.core.models import QuizSession
from schoolhub.db import documents
from schoolhub.db.defaults import utcnow

from .schemas import QuizProgress, QuizSessionCreate, QuizSessionResponse

logger = get_logger(__name__)

IN_PROGRESS = QuizSessionStatus.IN_PROGRESS.value


def _remaining_seconds(expires_at: Optional[datetime], now: datetime) -> Optional[int]:
    if expires_at is None:
        return None
    return max(0, int((expires_at - now).total_seconds()))


async def _expire_if_due(db: AsyncSession, session: QuizSession) -> QuizSession:
    now = utcnow()
    if session.status == IN_PROGRESS and session.expires_at is not None and now > session.expires_at:
        session = await documents.update_by_id(
            db,
            QuizSession,
            session.id,
            {"status": QuizSessionStatus.EXPIRED.value, "remaining_time_seconds": 0},
        )
        logger.info("quiz_session_expired", session_id=session.id, quiz_id=session.quiz_id)
    return session


async def _load(db: AsyncSession, session_id: str, user_id: str) -> QuizSession:
    session = await documents.find_by_id(db, QuizSession, session_id)
    if not session or session.is_deleted or session.user_id != user_id:
        raise NotFoundError("Quiz session not found")
    return await _expire_if_due(db, session)


def _require_status(session: QuizSession, expected: QuizSessionStatus, action: str) -> None:
    if session.status != expected.value:
        raise ConflictError(f"Cannot {action} a quiz session that is {session.status}")


async def create_session(
    db: AsyncSession,
    campus_id: str,
    user_id: str,
    payload: QuizSessionCreate,
) -> QuizSessionResponse:
    session = await documents.create(
        db,
        QuizSession,
        campus_id=campus_id,
        user_id=user_id,
        class_id=payload.class_id,
        quiz_id=payload.quiz_id,
        session_token=secrets.token_hex(32),
        status=QuizSessionStatus.NOT_STARTED.value,
        time_limit_minutes=payload.time_limit_minutes,
        remaining_time_seconds=payload.time_limit_minutes * 60 if payload.time_limit_minutes else None,
        last_activity_at=utcnow(),
        answers_count=0,
        total_questions=payload.total_questions,
        current_question_index=0,
        meta_data=payload.meta_data,
        is_active=True,
        is_deleted=False,
    )
    return QuizSessionResponse.model_validate(session)


async def get_session(db: AsyncSession, session_id: str, user_id: str) -> Optional[QuizSessionResponse]:
    try:
        session = await _load(db, session_id, user_id)
    except NotFoundError:
        return None
    return QuizSessionResponse.model_validate(session)


async def list_sessions(
    db: AsyncSession,
    user_id: str,
    quiz_id: Optional[str] = None,
) -> List[QuizSessionResponse]:
    filters: Dict[str, Any] = {"user_id": user_id, "is_deleted": False}
    if quiz_id:
        filters["quiz_id"] = quiz_id
    rows = await documents.find(db, QuizSession, filters, order_by=("-last_activity_at",))
    sessions = [await _expire_if_due(db, s) for s in rows]
    return [QuizSessionResponse.model_validate(s) for s in sessions]


async def start_session(db: AsyncSession, session_id: str, user_id: str) -> QuizSessionResponse:
    session = await _load(db, session_id, user_id)
    _require_status(session, QuizSessionStatus.NOT_STARTED, "start")
    now = utcnow()
    expires_at = None
    if session.time_limit_minutes:
        expires_at = now + timedelta(minutes=session.time_limit_minutes)
    session = await documents.update_by_id(
        db,
        QuizSession,
        session.id,
        {
            "status": IN_PROGRESS,
            "started_at": now,
            "expires_at": expires_at,
            "remaining_time_seconds": _remaining_seconds(expires_at, now),
            "last_activity_at": now,
        },
    )
    logger.info("quiz_session_started", session_id=session.id, quiz_id=session.quiz_id, user_id=user_id)
    return QuizSessionResponse.model_validate(session)


async def record_progress(
    db: AsyncSession,
    session_id: str,
    user_id: str,
    payload: QuizProgress,
) -> QuizSessionResponse:
    session = await _load(db, session_id, user_id)
    _require_status(session, QuizSessionStatus.IN_PROGRESS, "update")
    if payload.current_question_index >= session.total_questions or payload.answers_count > session.total_questions:
        raise ServiceError("Progress is beyond the number of questions", status.HTTP_400_BAD_REQUEST)
    now = utcnow()
    session = await documents.update_by_id(
        db,
        QuizSession,
        session.id,
        {
            "answers_count": payload.answers_count,
            "current_question_index": payload.current_question_index,
            "remaining_time_seconds": _remaining_seconds(session.expires_at, now),
            "last_activity_at": now,
        },
    )
    return QuizSessionResponse.model_validate(session)


async def complete_session(db: AsyncSession, session_id: str, user_id: str) -> QuizSessionResponse:
    session = await _load(db, session_id, user_id)
    _require_status(session, QuizSessionStatus.IN_PROGRESS, "complete")
    now = utcnow()
    session = await documents.update_by_id(
        db,
        QuizSession,
        session.id,
        {
            "status": QuizSessionStatus.COMPLETED.value,
            "completed_at": now,
            "remaining_time_seconds": _remaining_seconds(session.expires_at, now),
            "last_activity_at": now,
        },
    )
    logger.info("quiz_session_completed", session_id=session.id, quiz_id=session.quiz_id, user_id=user_id)
    return QuizSessionResponse.model_validate(session)


async def abandon_session(db: AsyncSession, session_id: str, user_id: str) -> QuizSessionResponse:
    session = await _load(db, session_id, user_id)
    _require_status(session, QuizSessionStatus.IN_PROGRESS, "abandon")
    session = await documents.update_by_id(
        db,
        QuizSession,
        session.id,
        {"status": QuizSessionStatus.ABANDONED.value, "last_activity_at": utcnow()},
    )
    return QuizSessionResponse.model_validate(session)


async def extend_session(
    db: AsyncSession,
    session_id: str,
    user_id: str,
    additional_minutes: int,
) -> QuizSessionResponse:
    session = await _load(db, session_id, user_id)
    _require_status(session, QuizSessionStatus.IN_PROGRESS, "extend")
    if session.expires_at is None:
        raise ServiceError("This quiz does not have a time limit", status.HTTP_400_BAD_REQUEST)
    expires_at = session.expires_at + timedelta(minutes=additional_minutes)
    session = await documents.update_by_id(
        db,
        QuizSession,
        session.id,
        {"expires_at": expires_at, "remaining_time_seconds": _remaining_seconds(expires_at, utcnow())},
    )
    return QuizSessionResponse.model_validate(session)


async def delete_session(db: AsyncSession, session_id: str, user_id: str) -> None:
    session = await documents.find_by_id(db, QuizSession, session_id)
    if not session or session.user_id != user_id:
        raise NotFoundError("Quiz session not deleted")
    await documents.soft_delete_by_id(db, QuizSession, session_id)
