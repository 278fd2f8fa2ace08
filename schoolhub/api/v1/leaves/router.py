from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.auth.dependencies import get_current_user
from schoolhub.auth.rbac import require_admin, require_campus
from schoolhub.auth.schemas import CurrentUser
from schoolhub.core.exceptions import ServiceError
from schoolhub.core.schemas import MessageResponse
from schoolhub.db.session import get_db

from .schemas import (
    LeavePolicyCreate,
    LeavePolicyResponse,
    LeavePolicyUpdate,
    LeaveTypeCreate,
    LeaveTypeResponse,
    LeaveTypeUpdate,
)
from . import service

router = APIRouter(prefix="/api/v1/leaves", tags=["leaves"])


@router.get("/types", response_model=List[LeaveTypeResponse])
async def list_leave_types(
    active_only: bool = True,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> List[LeaveTypeResponse]:
    """List leave types for the campus (for apply form dropdown)."""
    return await service.list_leave_types(db, current_user.campus_id, active_only=active_only)


@router.post(
    "/types",
    response_model=LeaveTypeResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_leave_type(
    payload: LeaveTypeCreate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> LeaveTypeResponse:
    """Create a leave type for the current campus. Codes are unique per campus."""
    try:
        return await service.create_leave_type(db, current_user.campus_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/types/{type_id}", response_model=LeaveTypeResponse, dependencies=[Depends(get_current_user)])
async def get_leave_type(type_id: str, db: AsyncSession = Depends(get_db)) -> LeaveTypeResponse:
    lt = await service.get_leave_type(db, type_id)
    if not lt:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Leave type not found")
    return lt


@router.patch("/types/{type_id}", response_model=LeaveTypeResponse, dependencies=[Depends(require_admin)])
async def update_leave_type(
    type_id: str,
    payload: LeaveTypeUpdate,
    db: AsyncSession = Depends(get_db),
) -> LeaveTypeResponse:
    try:
        return await service.update_leave_type(db, type_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/types/{type_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def delete_leave_type(type_id: str, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    try:
        await service.delete_leave_type(db, type_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return MessageResponse(message="Leave type deleted successfully")


@router.get("/policies", response_model=List[LeavePolicyResponse])
async def list_leave_policies(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> List[LeavePolicyResponse]:
    return await service.list_leave_policies(db, current_user.campus_id)


@router.post(
    "/policies",
    response_model=LeavePolicyResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_leave_policy(
    payload: LeavePolicyCreate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> LeavePolicyResponse:
    try:
        return await service.create_leave_policy(db, current_user.campus_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get(
    "/types/{type_id}/policies",
    response_model=List[LeavePolicyResponse],
    dependencies=[Depends(get_current_user)],
)
async def list_policies_for_leave_type(type_id: str, db: AsyncSession = Depends(get_db)) -> List[LeavePolicyResponse]:
    return await service.list_policies_by_leave_type(db, type_id)


@router.get("/policies/{policy_id}", response_model=LeavePolicyResponse, dependencies=[Depends(get_current_user)])
async def get_leave_policy(policy_id: str, db: AsyncSession = Depends(get_db)) -> LeavePolicyResponse:
    policy = await service.get_leave_policy(db, policy_id)
    if not policy:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Leave policy not found")
    return policy


@router.patch("/policies/{policy_id}", response_model=LeavePolicyResponse, dependencies=[Depends(require_admin)])
async def update_leave_policy(
    policy_id: str,
    payload: LeavePolicyUpdate,
    db: AsyncSession = Depends(get_db),
) -> LeavePolicyResponse:
    try:
        return await service.update_leave_policy(db, policy_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/policies/{policy_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def delete_leave_policy(policy_id: str, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    try:
        await service.delete_leave_policy(db, policy_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return MessageResponse(message="Leave policy deleted successfully")
