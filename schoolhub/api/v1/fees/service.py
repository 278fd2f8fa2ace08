"""Fee service layer."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.core.enums import FeePaymentStatus
from schoolhub.core.exceptions import NotFoundError
from schoolhub.core.models import Fee
from schoolhub.db import documents

from .schemas import FeeCreate, FeeResponse, FeeUpdate


def _to_response(fee: Fee) -> FeeResponse:
    return FeeResponse.model_validate(fee)


async def create_fee(db: AsyncSession, campus_id: str, payload: FeeCreate) -> FeeResponse:
    items = [item.model_dump() for item in payload.items]
    fee = await documents.create(
        db,
        Fee,
        campus_id=campus_id,
        user_id=payload.user_id,
        items=items,
        meta_data=payload.meta_data,
        due_amount=sum(item["amount"] for item in items),
        paid_amount=0,
        payment_status=FeePaymentStatus.unpaid.value,
        is_paid=False,
        is_deleted=False,
    )
    return _to_response(fee)


async def list_unpaid_fees_by_user(db: AsyncSession, user_id: str) -> List[FeeResponse]:
    rows = await documents.find(db, Fee, {"user_id": user_id, "is_paid": False, "is_deleted": False})
    return [_to_response(f) for f in rows]


async def list_fees_by_campus(db: AsyncSession, campus_id: str) -> List[FeeResponse]:
    rows = await documents.find(db, Fee, {"campus_id": campus_id, "is_deleted": False})
    return [_to_response(f) for f in rows]


async def get_fee(db: AsyncSession, fee_id: str) -> Optional[FeeResponse]:
    fee = await documents.find_by_id(db, Fee, fee_id)
    return _to_response(fee) if fee else None


async def update_fee(db: AsyncSession, fee_id: str, payload: FeeUpdate) -> FeeResponse:
    patch = payload.model_dump(exclude_unset=True, exclude_none=True, mode="json")
    if "payment_date" in patch:
        patch["payment_date"] = payload.payment_date
    fee = await documents.update_by_id(db, Fee, fee_id, patch)
    if not fee:
        raise NotFoundError("Fee not updated")
    return _to_response(fee)


async def delete_fee(db: AsyncSession, fee_id: str) -> None:
    fee = await documents.soft_delete_by_id(db, Fee, fee_id)
    if not fee:
        raise NotFoundError("Fee not deleted")
