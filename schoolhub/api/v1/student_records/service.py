"""Student record service layer."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.core.exceptions import NotFoundError
from schoolhub.core.models import StudentRecord
from schoolhub.db import documents

from .schemas import StudentRecordCreate, StudentRecordResponse, StudentRecordUpdate


def _to_response(record: StudentRecord) -> StudentRecordResponse:
    return StudentRecordResponse.model_validate(record)


async def create_student_record(
    db: AsyncSession,
    campus_id: str,
    payload: StudentRecordCreate,
) -> StudentRecordResponse:
    record = await documents.create(
        db,
        StudentRecord,
        campus_id=campus_id,
        student_id=payload.student_id,
        record_data=[r.model_dump() for r in payload.record_data],
        meta_data=payload.meta_data,
        is_active=True,
        is_deleted=False,
    )
    return _to_response(record)


async def list_records_by_student(db: AsyncSession, student_id: str) -> List[StudentRecordResponse]:
    rows = await documents.find(db, StudentRecord, {"student_id": student_id, "is_deleted": False})
    return [_to_response(r) for r in rows]


async def list_records_by_campus(db: AsyncSession, campus_id: str) -> List[StudentRecordResponse]:
    rows = await documents.find(db, StudentRecord, {"campus_id": campus_id, "is_deleted": False})
    return [_to_response(r) for r in rows]


async def get_student_record(db: AsyncSession, record_id: str) -> Optional[StudentRecordResponse]:
    record = await documents.find_by_id(db, StudentRecord, record_id)
    return _to_response(record) if record else None


async def update_student_record(
    db: AsyncSession,
    record_id: str,
    payload: StudentRecordUpdate,
) -> StudentRecordResponse:
    record = await documents.update_by_id(
        db,
        StudentRecord,
        record_id,
        {"record_data": [r.model_dump() for r in payload.record_data]},
    )
    if not record:
        raise NotFoundError("Student record not updated")
    return _to_response(record)


async def delete_student_record(db: AsyncSession, record_id: str) -> StudentRecordResponse:
    record = await documents.soft_delete_by_id(db, StudentRecord, record_id)
    if not record:
        raise NotFoundError("Student record not deleted")
    return _to_response(record)
