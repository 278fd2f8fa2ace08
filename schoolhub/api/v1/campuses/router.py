"""Campuses router."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.auth.dependencies import get_current_user
from schoolhub.auth.rbac import require_admin
from schoolhub.core.exceptions import ServiceError
from schoolhub.core.schemas import MessageResponse
from schoolhub.db.session import get_db

from .schemas import CampusCreate, CampusResponse, CampusUpdate
from . import service

router = APIRouter(prefix="/api/v1/campuses", tags=["campuses"])


@router.post(
    "",
    response_model=CampusResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_campus(
    payload: CampusCreate,
    db: AsyncSession = Depends(get_db),
) -> CampusResponse:
    try:
        return await service.create_campus(db, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get(
    "",
    response_model=List[CampusResponse],
    dependencies=[Depends(get_current_user)],
)
async def list_campuses(db: AsyncSession = Depends(get_db)) -> List[CampusResponse]:
    return await service.list_campuses(db)


@router.get(
    "/{campus_id}",
    response_model=CampusResponse,
    dependencies=[Depends(get_current_user)],
)
async def get_campus(campus_id: str, db: AsyncSession = Depends(get_db)) -> CampusResponse:
    campus = await service.get_campus(db, campus_id)
    if not campus:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Campus not found")
    return campus


@router.patch(
    "/{campus_id}",
    response_model=CampusResponse,
    dependencies=[Depends(require_admin)],
)
async def update_campus(
    campus_id: str,
    payload: CampusUpdate,
    db: AsyncSession = Depends(get_db),
) -> CampusResponse:
    try:
        return await service.update_campus(db, campus_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete(
    "/{campus_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_campus(campus_id: str, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    try:
        await service.delete_campus(db, campus_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return MessageResponse(message="Campus deleted successfully")
