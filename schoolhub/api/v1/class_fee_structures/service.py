"""Class fee structure service layer."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.core.exceptions import NotFoundError
from schoolhub.core.models import ClassFeeStructure
from schoolhub.db import documents

from .schemas import ClassFeeStructureCreate, ClassFeeStructureResponse, ClassFeeStructureUpdate


def _to_response(structure: ClassFeeStructure) -> ClassFeeStructureResponse:
    return ClassFeeStructureResponse.model_validate(structure)


async def create_class_fee_structure(
    db: AsyncSession,
    campus_id: str,
    created_by: str,
    payload: ClassFeeStructureCreate,
) -> ClassFeeStructureResponse:
    structure = await documents.create(
        db,
        ClassFeeStructure,
        campus_id=campus_id,
        created_by=created_by,
        is_active=True,
        is_deleted=False,
        **payload.model_dump(mode="json"),
    )
    return _to_response(structure)


async def list_class_fee_structures(db: AsyncSession, campus_id: str) -> List[ClassFeeStructureResponse]:
    rows = await documents.find(db, ClassFeeStructure, {"campus_id": campus_id, "is_deleted": False})
    return [_to_response(s) for s in rows]


async def get_active_structure_for_class(
    db: AsyncSession,
    campus_id: str,
    class_id: str,
) -> Optional[ClassFeeStructureResponse]:
    """Most recently updated active structure for the class, if any."""
    structure = await documents.find_one(
        db,
        ClassFeeStructure,
        {"campus_id": campus_id, "class_id": class_id, "is_active": True, "is_deleted": False},
    )
    return _to_response(structure) if structure else None


async def get_class_fee_structure(db: AsyncSession, structure_id: str) -> Optional[ClassFeeStructureResponse]:
    structure = await documents.find_by_id(db, ClassFeeStructure, structure_id)
    return _to_response(structure) if structure else None


async def update_class_fee_structure(
    db: AsyncSession,
    structure_id: str,
    updated_by: str,
    payload: ClassFeeStructureUpdate,
) -> ClassFeeStructureResponse:
    patch = payload.model_dump(exclude_unset=True, exclude_none=True, mode="json")
    patch["updated_by"] = updated_by
    structure = await documents.update_by_id(db, ClassFeeStructure, structure_id, patch)
    if not structure:
        raise NotFoundError("Class fee structure not updated")
    return _to_response(structure)


async def delete_class_fee_structure(db: AsyncSession, structure_id: str) -> None:
    structure = await documents.soft_delete_by_id(db, ClassFeeStructure, structure_id)
    if not structure:
        raise NotFoundError("Class fee structure not deleted")
