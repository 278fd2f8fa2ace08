"""Student payment tracker service layer.

A tracker accumulates payments against one class fee structure. Its status
is PENDING until the first payment, PARTIAL while total_paid < total_due,
and COMPLETED once the due amount is covered. OVERDUE is only ever set by
an explicit update.
"""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.core.enums import TrackerPaymentStatus
from schoolhub.core.exceptions import ConflictError, NotFoundError
from schoolhub.core.logging import get_logger
from schoolhub.core.models import PaymentTracker
from schoolhub.db import documents

from .schemas import (
    InstallmentPayment,
    OneTimePayment,
    PaymentTrackerCreate,
    PaymentTrackerResponse,
    PaymentTrackerUpdate,
)

logger = get_logger(__name__)


def _to_response(tracker: PaymentTracker) -> PaymentTrackerResponse:
    return PaymentTrackerResponse.model_validate(tracker)


def _status_after_payment(total_paid: float, total_due: float) -> str:
    if total_paid >= total_due:
        return TrackerPaymentStatus.COMPLETED.value
    return TrackerPaymentStatus.PARTIAL.value


async def _load(db: AsyncSession, tracker_id: str) -> PaymentTracker:
    tracker = await documents.find_by_id(db, PaymentTracker, tracker_id)
    if not tracker or tracker.is_deleted:
        raise NotFoundError("Payment tracker not found")
    return tracker


async def create_tracker(
    db: AsyncSession,
    campus_id: str,
    payload: PaymentTrackerCreate,
) -> PaymentTrackerResponse:
    tracker = await documents.create(
        db,
        PaymentTracker,
        campus_id=campus_id,
        total_paid=0,
        installments_paid=[],
        one_time_paid=False,
        payment_status=TrackerPaymentStatus.PENDING.value,
        is_active=True,
        is_deleted=False,
        **payload.model_dump(),
    )
    return _to_response(tracker)


async def get_tracker(db: AsyncSession, tracker_id: str) -> Optional[PaymentTrackerResponse]:
    tracker = await documents.find_by_id(db, PaymentTracker, tracker_id)
    return _to_response(tracker) if tracker else None


async def list_trackers_by_student(db: AsyncSession, student_id: str) -> List[PaymentTrackerResponse]:
    rows = await documents.find(db, PaymentTracker, {"student_id": student_id, "is_deleted": False})
    return [_to_response(t) for t in rows]


async def list_trackers_by_campus(db: AsyncSession, campus_id: str) -> List[PaymentTrackerResponse]:
    rows = await documents.find(db, PaymentTracker, {"campus_id": campus_id, "is_deleted": False})
    return [_to_response(t) for t in rows]


async def update_tracker(
    db: AsyncSession,
    tracker_id: str,
    payload: PaymentTrackerUpdate,
) -> PaymentTrackerResponse:
    patch = payload.model_dump(exclude_unset=True, exclude_none=True, mode="json")
    tracker = await documents.update_by_id(db, PaymentTracker, tracker_id, patch)
    if not tracker:
        raise NotFoundError("Payment tracker not updated")
    return _to_response(tracker)


async def record_installment_payment(
    db: AsyncSession,
    tracker_id: str,
    payment: InstallmentPayment,
) -> PaymentTrackerResponse:
    tracker = await _load(db, tracker_id)
    paid = list(tracker.installments_paid or [])
    if payment.installment_number in paid:
        raise ConflictError(f"Installment {payment.installment_number} is already paid")

    total_paid = (tracker.total_paid or 0) + payment.amount
    updated = await documents.update_by_id(
        db,
        PaymentTracker,
        tracker_id,
        {
            "installments_paid": sorted(paid + [payment.installment_number]),
            "total_paid": total_paid,
            "payment_status": _status_after_payment(total_paid, tracker.total_due),
        },
    )
    logger.info(
        "installment_recorded",
        tracker_id=tracker_id,
        installment_number=payment.installment_number,
        payment_status=updated.payment_status,
    )
    return _to_response(updated)


async def record_one_time_payment(
    db: AsyncSession,
    tracker_id: str,
    payment: OneTimePayment,
) -> PaymentTrackerResponse:
    tracker = await _load(db, tracker_id)
    if tracker.one_time_paid:
        raise ConflictError("One-time payment is already recorded")

    total_paid = (tracker.total_paid or 0) + payment.amount
    updated = await documents.update_by_id(
        db,
        PaymentTracker,
        tracker_id,
        {
            "one_time_paid": True,
            "total_paid": total_paid,
            "payment_status": _status_after_payment(total_paid, tracker.total_due),
        },
    )
    logger.info("one_time_payment_recorded", tracker_id=tracker_id, payment_status=updated.payment_status)
    return _to_response(updated)


async def delete_tracker(db: AsyncSession, tracker_id: str) -> None:
    tracker = await documents.soft_delete_by_id(db, PaymentTracker, tracker_id)
    if not tracker:
        raise NotFoundError("Payment tracker not deleted")
