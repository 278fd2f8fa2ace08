from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.core.exceptions import NotFoundError
from schoolhub.core.models import Syllabus
from schoolhub.db import documents

from .schemas import SyllabusCreate, SyllabusResponse, SyllabusUpdate


def _to_response(syllabus: Syllabus) -> SyllabusResponse:
    return SyllabusResponse.model_validate(syllabus)


async def create_syllabus(db: AsyncSession, campus_id: str, payload: SyllabusCreate) -> SyllabusResponse:
    syllabus = await documents.create(
        db,
        Syllabus,
        campus_id=campus_id,
        subject_id=payload.subject_id,
        name=payload.name.strip(),
        description=payload.description,
        meta_data=payload.meta_data,
        is_active=True,
        is_deleted=False,
    )
    return _to_response(syllabus)


async def get_syllabus(db: AsyncSession, syllabus_id: str) -> Optional[SyllabusResponse]:
    syllabus = await documents.find_by_id(db, Syllabus, syllabus_id)
    return _to_response(syllabus) if syllabus else None


async def list_syllabi_by_campus(db: AsyncSession, campus_id: str) -> List[SyllabusResponse]:
    rows = await documents.find(
        db, Syllabus, {"campus_id": campus_id, "is_deleted": False, "is_active": True}
    )
    return [_to_response(s) for s in rows]


async def list_syllabi_by_subject(db: AsyncSession, subject_id: str) -> List[SyllabusResponse]:
    rows = await documents.find(
        db, Syllabus, {"subject_id": subject_id, "is_deleted": False, "is_active": True}
    )
    return [_to_response(s) for s in rows]


async def update_syllabus(db: AsyncSession, syllabus_id: str, payload: SyllabusUpdate) -> SyllabusResponse:
    patch = payload.model_dump(exclude_unset=True, exclude_none=True)
    syllabus = await documents.update_by_id(db, Syllabus, syllabus_id, patch)
    if not syllabus:
        raise NotFoundError("Syllabus not updated")
    return _to_response(syllabus)


async def delete_syllabus(db: AsyncSession, syllabus_id: str) -> None:
    syllabus = await documents.soft_delete_by_id(db, Syllabus, syllabus_id)
    if not syllabus:
        raise NotFoundError("Syllabus not deleted")
