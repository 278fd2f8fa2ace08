"""Leave types and leave policies, scoped per campus."""

from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.core.exceptions import ConflictError, NotFoundError
from schoolhub.core.models import LeavePolicy, LeaveType
from schoolhub.db import documents

from .schemas import (
    LeavePolicyCreate,
    LeavePolicyResponse,
    LeavePolicyUpdate,
    LeaveTypeCreate,
    LeaveTypeResponse,
    LeaveTypeUpdate,
)


def _code_taken(code: str) -> ConflictError:
    return ConflictError(f"Leave type with code '{code}' already exists for this campus")


async def _ensure_code_free(db: AsyncSession, campus_id: str, code: str) -> None:
    existing = await documents.find_one(
        db, LeaveType, {"campus_id": campus_id, "code": code}
    )
    if existing:
        raise _code_taken(code)


# ----- Leave Type -----
async def create_leave_type(
    db: AsyncSession,
    campus_id: str,
    payload: LeaveTypeCreate,
) -> LeaveTypeResponse:
    """Create a leave type for the campus. Code must be unique per campus."""
    code = payload.code.strip()
    await _ensure_code_free(db, campus_id, code)
    try:
        lt = await documents.create(
            db,
            LeaveType,
            campus_id=campus_id,
            name=payload.name.strip(),
            code=code,
            description=payload.description,
            max_days_per_year=payload.max_days_per_year,
            is_paid=payload.is_paid,
            is_active=payload.is_active,
            is_deleted=False,
        )
    except IntegrityError:
        await db.rollback()
        raise _code_taken(code)
    return LeaveTypeResponse.model_validate(lt)


async def list_leave_types(
    db: AsyncSession,
    campus_id: str,
    active_only: bool = True,
) -> List[LeaveTypeResponse]:
    filters = {"campus_id": campus_id, "is_deleted": False}
    if active_only:
        filters["is_active"] = True
    rows = await documents.find(db, LeaveType, filters, order_by=("name",))
    return [LeaveTypeResponse.model_validate(lt) for lt in rows]


async def get_leave_type(db: AsyncSession, type_id: str) -> Optional[LeaveTypeResponse]:
    lt = await documents.find_by_id(db, LeaveType, type_id)
    return LeaveTypeResponse.model_validate(lt) if lt else None


async def update_leave_type(
    db: AsyncSession,
    type_id: str,
    payload: LeaveTypeUpdate,
) -> LeaveTypeResponse:
    lt = await documents.find_by_id(db, LeaveType, type_id)
    if not lt:
        raise NotFoundError("Leave type not updated")
    patch = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "name" in patch:
        patch["name"] = patch["name"].strip()
    if "code" in patch:
        patch["code"] = patch["code"].strip()
        if patch["code"] != lt.code:
            await _ensure_code_free(db, lt.campus_id, patch["code"])
    try:
        lt = await documents.update_by_id(db, LeaveType, type_id, patch)
    except IntegrityError:
        await db.rollback()
        raise _code_taken(patch.get("code", ""))
    return LeaveTypeResponse.model_validate(lt)


async def delete_leave_type(db: AsyncSession, type_id: str) -> None:
    if not await documents.soft_delete_by_id(db, LeaveType, type_id):
        raise NotFoundError("Leave type not deleted")


# ----- Leave Policy -----
async def create_leave_policy(
    db: AsyncSession,
    campus_id: str,
    payload: LeavePolicyCreate,
) -> LeavePolicyResponse:
    policy = await documents.create(
        db,
        LeavePolicy,
        campus_id=campus_id,
        is_active=True,
        is_deleted=False,
        **payload.model_dump(mode="json"),
    )
    return LeavePolicyResponse.model_validate(policy)


async def list_leave_policies(db: AsyncSession, campus_id: str) -> List[LeavePolicyResponse]:
    rows = await documents.find(db, LeavePolicy, {"campus_id": campus_id, "is_deleted": False})
    return [LeavePolicyResponse.model_validate(p) for p in rows]


async def list_policies_by_leave_type(db: AsyncSession, leave_type_id: str) -> List[LeavePolicyResponse]:
    rows = await documents.find(db, LeavePolicy, {"leave_type_id": leave_type_id, "is_deleted": False})
    return [LeavePolicyResponse.model_validate(p) for p in rows]


async def get_leave_policy(db: AsyncSession, policy_id: str) -> Optional[LeavePolicyResponse]:
    policy = await documents.find_by_id(db, LeavePolicy, policy_id)
    return LeavePolicyResponse.model_validate(policy) if policy else None


async def update_leave_policy(
    db: AsyncSession,
    policy_id: str,
    payload: LeavePolicyUpdate,
) -> LeavePolicyResponse:
    patch = payload.model_dump(mode="json", exclude_unset=True, exclude_none=True)
    policy = await documents.update_by_id(db, LeavePolicy, policy_id, patch)
    if not policy:
        raise NotFoundError("Leave policy not updated")
    return LeavePolicyResponse.model_validate(policy)


async def delete_leave_policy(db: AsyncSession, policy_id: str) -> None:
    if not await documents.soft_delete_by_id(db, LeavePolicy, policy_id):
        raise NotFoundError("Leave policy not deleted")
