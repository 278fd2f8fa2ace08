from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.auth.dependencies import get_current_user
from schoolhub.auth.rbac import require_campus, require_user_types
from schoolhub.auth.schemas import CurrentUser
from schoolhub.core.enums import UserType
from schoolhub.core.exceptions import ServiceError
from schoolhub.core.schemas import MessageResponse
from schoolhub.db.session import get_db

from .schemas import SyllabusCreate, SyllabusResponse, SyllabusUpdate
from . import service

router = APIRouter(prefix="/api/v1/syllabus", tags=["syllabus"])

require_staff = require_user_types(UserType.SUPER_ADMIN, UserType.ADMIN, UserType.TEACHER)


@router.post(
    "",
    response_model=SyllabusResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_staff)],
)
async def create_syllabus(
    payload: SyllabusCreate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> SyllabusResponse:
    try:
        return await service.create_syllabus(db, current_user.campus_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("", response_model=List[SyllabusResponse])
async def list_syllabi(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> List[SyllabusResponse]:
    return await service.list_syllabi_by_campus(db, current_user.campus_id)


@router.get(
    "/subjects/{subject_id}",
    response_model=List[SyllabusResponse],
    dependencies=[Depends(get_current_user)],
)
async def list_syllabi_for_subject(subject_id: str, db: AsyncSession = Depends(get_db)) -> List[SyllabusResponse]:
    return await service.list_syllabi_by_subject(db, subject_id)


@router.get("/{syllabus_id}", response_model=SyllabusResponse, dependencies=[Depends(get_current_user)])
async def get_syllabus(syllabus_id: str, db: AsyncSession = Depends(get_db)) -> SyllabusResponse:
    syllabus = await service.get_syllabus(db, syllabus_id)
    if not syllabus:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Syllabus not found")
    return syllabus


@router.patch("/{syllabus_id}", response_model=SyllabusResponse, dependencies=[Depends(require_staff)])
async def update_syllabus(
    syllabus_id: str,
    payload: SyllabusUpdate,
    db: AsyncSession = Depends(get_db),
) -> SyllabusResponse:
    try:
        return await service.update_syllabus(db, syllabus_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{syllabus_id}", response_model=MessageResponse, dependencies=[Depends(require_staff)])
async def delete_syllabus(syllabus_id: str, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    try:
        await service.delete_syllabus(db, syllabus_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return MessageResponse(message="Syllabus deleted successfully")
