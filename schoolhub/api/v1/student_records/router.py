"""Student records router."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.auth.dependencies import get_current_user
from schoolhub.auth.rbac import require_campus, require_user_types
from schoolhub.auth.schemas import CurrentUser
from schoolhub.core.enums import UserType
from schoolhub.core.exceptions import ServiceError
from schoolhub.db.session import get_db

from .schemas import StudentRecordCreate, StudentRecordResponse, StudentRecordUpdate
from . import service

router = APIRouter(prefix="/api/v1/student-records", tags=["student-records"])

require_staff = require_user_types(UserType.SUPER_ADMIN, UserType.ADMIN, UserType.TEACHER)


@router.post(
    "",
    response_model=StudentRecordResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_staff)],
)
async def create_student_record(
    payload: StudentRecordCreate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> StudentRecordResponse:
    try:
        return await service.create_student_record(db, current_user.campus_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("", response_model=List[StudentRecordResponse])
async def list_student_records(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> List[StudentRecordResponse]:
    return await service.list_records_by_campus(db, current_user.campus_id)


@router.get(
    "/students/{student_id}",
    response_model=List[StudentRecordResponse],
    dependencies=[Depends(get_current_user)],
)
async def list_records_for_student(student_id: str, db: AsyncSession = Depends(get_db)) -> List[StudentRecordResponse]:
    return await service.list_records_by_student(db, student_id)


@router.get(
    "/{student_record_id}",
    response_model=StudentRecordResponse,
    dependencies=[Depends(get_current_user)],
)
async def get_student_record(student_record_id: str, db: AsyncSession = Depends(get_db)) -> StudentRecordResponse:
    record = await service.get_student_record(db, student_record_id)
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student record not found")
    return record


@router.patch(
    "/{student_record_id}",
    response_model=StudentRecordResponse,
    dependencies=[Depends(require_staff)],
)
async def update_student_record(
    student_record_id: str,
    payload: StudentRecordUpdate,
    db: AsyncSession = Depends(get_db),
) -> StudentRecordResponse:
    try:
        return await service.update_student_record(db, student_record_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete(
    "/{student_record_id}",
    response_model=StudentRecordResponse,
    dependencies=[Depends(require_staff)],
)
async def delete_student_record(student_record_id: str, db: AsyncSession = Depends(get_db)) -> StudentRecordResponse:
    """Soft delete; returns the record with is_deleted=true."""
    try:
        return await service.delete_student_record(db, student_record_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
