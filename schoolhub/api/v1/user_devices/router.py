from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.auth.dependencies import get_current_user
from schoolhub.auth.rbac import require_campus
from schoolhub.auth.schemas import CurrentUser
from schoolhub.core.exceptions import ServiceError
from schoolhub.core.schemas import MessageResponse
from schoolhub.db.session import get_db

from .schemas import ActiveDeviceCount, DeviceRegister, DeviceSync, PushTokenUpdate, UserDeviceResponse
from . import service

router = APIRouter(prefix="/api/v1/user-devices", tags=["user-devices"])


@router.post("", response_model=UserDeviceResponse)
async def register_device(
    payload: DeviceRegister,
    request: Request,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(require_campus),
) -> UserDeviceResponse:
    """Register the calling device. Client address and user agent default to the request's."""
    if payload.ip_address is None and request.client:
        payload.ip_address = request.client.host
    if payload.user_agent is None:
        payload.user_agent = request.headers.get("user-agent")
    return await service.register_device(db, current_user.id, current_user.campus_id, payload)


@router.get("", response_model=List[UserDeviceResponse])
async def list_my_devices(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> List[UserDeviceResponse]:
    return await service.list_user_devices(db, current_user.id)


@router.get("/active-count", response_model=ActiveDeviceCount)
async def active_device_count(
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> ActiveDeviceCount:
    return ActiveDeviceCount(active_devices=await service.count_active_devices(db, current_user.id))


@router.put("/{device_id}/push-token", response_model=UserDeviceResponse)
async def update_push_token(
    device_id: str,
    payload: PushTokenUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> UserDeviceResponse:
    try:
        return await service.update_push_token(db, current_user.id, device_id, payload.push_token)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("/{device_id}/sync", response_model=UserDeviceResponse)
async def record_sync(
    device_id: str,
    payload: DeviceSync,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> UserDeviceResponse:
    try:
        return await service.record_sync(db, current_user.id, device_id, payload.last_message_seq)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.put("/{device_id}/activity", response_model=UserDeviceResponse)
async def touch_device(
    device_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> UserDeviceResponse:
    try:
        return await service.touch_device(db, current_user.id, device_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete("/{device_id}", response_model=MessageResponse)
async def deactivate_device(
    device_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> MessageResponse:
    try:
        await service.deactivate_device(db, current_user.id, device_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return MessageResponse(message="Device deactivated successfully")
