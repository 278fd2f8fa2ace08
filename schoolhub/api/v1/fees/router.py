"""Fees router."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.auth.dependencies import get_current_user
from schoolhub.auth.rbac import require_admin, require_campus
from schoolhub.auth.schemas import CurrentUser
from schoolhub.core.exceptions import ServiceError
from schoolhub.core.schemas import MessageResponse
from schoolhub.db.session import get_db

from .schemas import FeeCreate, FeeResponse, FeeUpdate
from . import service

router = APIRouter(prefix="/api/v1/fees", tags=["fees"])


@router.post(
    "",
    response_model=FeeResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_fee(
    payload: FeeCreate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> FeeResponse:
    try:
        return await service.create_fee(db, current_user.campus_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("", response_model=List[FeeResponse])
async def list_fees(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> List[FeeResponse]:
    return await service.list_fees_by_campus(db, current_user.campus_id)


@router.get("/users/{user_id}", response_model=List[FeeResponse])
async def list_unpaid_fees_for_user(
    user_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> List[FeeResponse]:
    """Outstanding (is_paid=false) fees for a student, newest first."""
    return await service.list_unpaid_fees_by_user(db, user_id)


@router.get("/me", response_model=List[FeeResponse])
async def list_my_unpaid_fees(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> List[FeeResponse]:
    return await service.list_unpaid_fees_by_user(db, current_user.id)


@router.get("/{fee_id}", response_model=FeeResponse, dependencies=[Depends(get_current_user)])
async def get_fee(fee_id: str, db: AsyncSession = Depends(get_db)) -> FeeResponse:
    fee = await service.get_fee(db, fee_id)
    if not fee:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Fee not found")
    return fee


@router.patch("/{fee_id}", response_model=FeeResponse, dependencies=[Depends(require_admin)])
async def update_fee(
    fee_id: str,
    payload: FeeUpdate,
    db: AsyncSession = Depends(get_db),
) -> FeeResponse:
    try:
        return await service.update_fee(db, fee_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{fee_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def delete_fee(fee_id: str, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    try:
        await service.delete_fee(db, fee_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return MessageResponse(message="Fee deleted successfully")
