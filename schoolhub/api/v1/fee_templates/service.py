"""Fee template service layer."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.core.exceptions import NotFoundError
from schoolhub.core.models import FeeTemplate
from schoolhub.db import documents

from .schemas import FeeTemplateCreate, FeeTemplateResponse, FeeTemplateUpdate


def _to_response(template: FeeTemplate) -> FeeTemplateResponse:
    return FeeTemplateResponse.model_validate(template)


async def create_fee_template(
    db: AsyncSession,
    campus_id: str,
    payload: FeeTemplateCreate,
) -> FeeTemplateResponse:
    template = await documents.create(
        db,
        FeeTemplate,
        campus_id=campus_id,
        is_active=True,
        is_deleted=False,
        **payload.model_dump(mode="json"),
    )
    return _to_response(template)


async def list_fee_templates(db: AsyncSession, campus_id: str) -> List[FeeTemplateResponse]:
    rows = await documents.find(db, FeeTemplate, {"campus_id": campus_id, "is_deleted": False})
    return [_to_response(t) for t in rows]


async def list_fee_templates_by_class(
    db: AsyncSession,
    campus_id: str,
    class_id: str,
) -> List[FeeTemplateResponse]:
    rows = await documents.find(
        db,
        FeeTemplate,
        {"campus_id": campus_id, "class_id": class_id, "is_deleted": False},
    )
    return [_to_response(t) for t in rows]


async def get_fee_template(db: AsyncSession, template_id: str) -> Optional[FeeTemplateResponse]:
    template = await documents.find_by_id(db, FeeTemplate, template_id)
    return _to_response(template) if template else None


async def update_fee_template(
    db: AsyncSession,
    template_id: str,
    payload: FeeTemplateUpdate,
) -> FeeTemplateResponse:
    patch = payload.model_dump(exclude_unset=True, exclude_none=True, mode="json")
    template = await documents.update_by_id(db, FeeTemplate, template_id, patch)
    if not template:
        raise NotFoundError("Fee template not updated")
    return _to_response(template)


async def delete_fee_template(db: AsyncSession, template_id: str) -> None:
    template = await documents.soft_delete_by_id(db, FeeTemplate, template_id)
    if not template:
        raise NotFoundError("Fee template not deleted")
