"""Student payment trackers router."""

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
    InstallmentPayment,
    OneTimePayment,
    PaymentTrackerCreate,
    PaymentTrackerResponse,
    PaymentTrackerUpdate,
)
from . import service

router = APIRouter(prefix="/api/v1/payment-trackers", tags=["payment-trackers"])


@router.post(
    "",
    response_model=PaymentTrackerResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_tracker(
    payload: PaymentTrackerCreate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> PaymentTrackerResponse:
    try:
        return await service.create_tracker(db, current_user.campus_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("", response_model=List[PaymentTrackerResponse], dependencies=[Depends(require_admin)])
async def list_trackers(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> List[PaymentTrackerResponse]:
    return await service.list_trackers_by_campus(db, current_user.campus_id)


@router.get(
    "/students/{student_id}",
    response_model=List[PaymentTrackerResponse],
    dependencies=[Depends(get_current_user)],
)
async def list_trackers_for_student(
    student_id: str,
    db: AsyncSession = Depends(get_db),
) -> List[PaymentTrackerResponse]:
    return await service.list_trackers_by_student(db, student_id)


@router.get("/{tracker_id}", response_model=PaymentTrackerResponse, dependencies=[Depends(get_current_user)])
async def get_tracker(tracker_id: str, db: AsyncSession = Depends(get_db)) -> PaymentTrackerResponse:
    tracker = await service.get_tracker(db, tracker_id)
    if not tracker:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment tracker not found")
    return tracker


@router.patch("/{tracker_id}", response_model=PaymentTrackerResponse, dependencies=[Depends(require_admin)])
async def update_tracker(
    tracker_id: str,
    payload: PaymentTrackerUpdate,
    db: AsyncSession = Depends(get_db),
) -> PaymentTrackerResponse:
    try:
        return await service.update_tracker(db, tracker_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post(
    "/{tracker_id}/installments",
    response_model=PaymentTrackerResponse,
    dependencies=[Depends(require_admin)],
)
async def record_installment_payment(
    tracker_id: str,
    payload: InstallmentPayment,
    db: AsyncSession = Depends(get_db),
) -> PaymentTrackerResponse:
    try:
        return await service.record_installment_payment(db, tracker_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.post(
    "/{tracker_id}/one-time",
    response_model=PaymentTrackerResponse,
    dependencies=[Depends(require_admin)],
)
async def record_one_time_payment(
    tracker_id: str,
    payload: OneTimePayment,
    db: AsyncSession = Depends(get_db),
) -> PaymentTrackerResponse:
    try:
        return await service.record_one_time_payment(db, tracker_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{tracker_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def delete_tracker(tracker_id: str, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    try:
        await service.delete_tracker(db, tracker_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return MessageResponse(message="Payment tracker deleted successfully")
