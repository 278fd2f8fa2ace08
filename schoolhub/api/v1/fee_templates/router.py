"""Fee templates router."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.auth.dependencies import get_current_user
from schoolhub.auth.rbac import require_admin, require_campus
from schoolhub.auth.schemas import CurrentUser
from schoolhub.core.exceptions import ServiceError
from schoolhub.core.schemas import MessageResponse
from schoolhub.db.session import get_db

from .schemas import FeeTemplateCreate, FeeTemplateResponse, FeeTemplateUpdate
from . import service

router = APIRouter(prefix="/api/v1/fee-templates", tags=["fee-templates"])


@router.post(
    "",
    response_model=FeeTemplateResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_fee_template(
    payload: FeeTemplateCreate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> FeeTemplateResponse:
    try:
        return await service.create_fee_template(db, current_user.campus_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("", response_model=List[FeeTemplateResponse])
async def list_fee_templates(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> List[FeeTemplateResponse]:
    return await service.list_fee_templates(db, current_user.campus_id)


@router.get("/classes/{class_id}", response_model=List[FeeTemplateResponse])
async def list_fee_templates_by_class(
    class_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> List[FeeTemplateResponse]:
    return await service.list_fee_templates_by_class(db, current_user.campus_id, class_id)


@router.get("/{template_id}", response_model=FeeTemplateResponse, dependencies=[Depends(get_current_user)])
async def get_fee_template(template_id: str, db: AsyncSession = Depends(get_db)) -> FeeTemplateResponse:
    template = await service.get_fee_template(db, template_id)
    if not template:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Fee template not found")
    return template


@router.patch("/{template_id}", response_model=FeeTemplateResponse, dependencies=[Depends(require_admin)])
async def update_fee_template(
    template_id: str,
    payload: FeeTemplateUpdate,
    db: AsyncSession = Depends(get_db),
) -> FeeTemplateResponse:
    try:
        return await service.update_fee_template(db, template_id, payload)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{template_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def delete_fee_template(template_id: str, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    try:
        await service.delete_fee_template(db, template_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return MessageResponse(message="Fee template deleted successfully")
