"""Campus service layer."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.core.exceptions import NotFoundError
from schoolhub.core.logging import get_logger
from schoolhub.core.models import Campus
from schoolhub.db import documents

from .schemas import CampusCreate, CampusResponse, CampusUpdate

logger = get_logger(__name__)


def _to_response(campus: Campus) -> CampusResponse:
    return CampusResponse.model_validate(campus)


async def create_campus(db: AsyncSession, payload: CampusCreate) -> CampusResponse:
    campus = await documents.create(
        db,
        Campus,
        name=payload.name.strip(),
        address=payload.address.strip(),
        domain=payload.domain.strip().lower(),
        meta_data=payload.meta_data,
        is_active=True,
        is_deleted=False,
    )
    logger.info("campus_created", campus_id=campus.id, domain=campus.domain)
    return _to_response(campus)


async def list_campuses(db: AsyncSession) -> List[CampusResponse]:
    rows = await documents.find(db, Campus, {"is_deleted": False})
    return [_to_response(c) for c in rows]


async def get_campus(db: AsyncSession, campus_id: str) -> Optional[CampusResponse]:
    campus = await documents.find_by_id(db, Campus, campus_id)
    return _to_response(campus) if campus else None


async def update_campus(db: AsyncSession, campus_id: str, payload: CampusUpdate) -> CampusResponse:
    patch = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "domain" in patch:
        patch["domain"] = patch["domain"].strip().lower()
    campus = await documents.update_by_id(db, Campus, campus_id, patch)
    if not campus:
        raise NotFoundError("Campus not updated")
    return _to_response(campus)


async def delete_campus(db: AsyncSession, campus_id: str) -> None:
    campus = await documents.soft_delete_by_id(db, Campus, campus_id)
    if not campus:
        raise NotFoundError("Campus not deleted")
    logger.info("campus_deleted", campus_id=campus_id)
