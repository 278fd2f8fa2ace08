"""Class fee structures router."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.auth.dependencies import get_current_user
from schoolhub.auth.rbac import require_admin, require_campus
from schoolhub.auth.schemas import CurrentUser
from schoolhub.core.exceptions import ServiceError
from schoolhub.core.schemas import MessageResponse
from schoolhub.db.session import get_db

from .schemas import ClassFeeStructureCreate, ClassFeeStructureResponse, ClassFeeStructureUpdate
from . import service

router = APIRouter(prefix="/api/v1/class-fee-structures", tags=["class-fee-structures"])


@router.post(
    "",
    response_model=ClassFeeStructureResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_class_fee_structure(
    payload: ClassFeeStructureCreate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> ClassFeeStructureResponse:
    try:
        return await service.create_class_fee_structure(db, current_user.campus_id, current_user.id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("", response_model=List[ClassFeeStructureResponse])
async def list_class_fee_structures(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> List[ClassFeeStructureResponse]:
    return await service.list_class_fee_structures(db, current_user.campus_id)


@router.get("/classes/{class_id}", response_model=ClassFeeStructureResponse)
async def get_structure_for_class(
    class_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> ClassFeeStructureResponse:
    structure = await service.get_active_structure_for_class(db, current_user.campus_id, class_id)
    if not structure:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No active fee structure for this class",
        )
    return structure


@router.get(
    "/{structure_id}",
    response_model=ClassFeeStructureResponse,
    dependencies=[Depends(get_current_user)],
)
async def get_class_fee_structure(
    structure_id: str,
    db: AsyncSession = Depends(get_db),
) -> ClassFeeStructureResponse:
    structure = await service.get_class_fee_structure(db, structure_id)
    if not structure:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Class fee structure not found")
    return structure


@router.patch("/{structure_id}", response_model=ClassFeeStructureResponse)
async def update_class_fee_structure(
    structure_id: str,
    payload: ClassFeeStructureUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
) -> ClassFeeStructureResponse:
    try:
        return await service.update_class_fee_structure(db, structure_id, current_user.id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete(
    "/{structure_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_class_fee_structure(structure_id: str, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    try:
        await service.delete_class_fee_structure(db, structure_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return MessageResponse(message="Class fee structure deleted successfully")
