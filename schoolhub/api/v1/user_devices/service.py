"""Device registration and multi-device bookkeeping."""

from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.core.exceptions import NotFoundError
from schoolhub.core.logging import get_logger
from schoolhub.core.models import UserDevice
from schoolhub.db import documents
from schoolhub.db.defaults import utcnow

from .schemas import DeviceRegister, UserDeviceResponse

logger = get_logger(__name__)


async def _find_device(db: AsyncSession, user_id: str, device_id: str) -> Optional[UserDevice]:
    return await documents.find_one(db, UserDevice, {"user_id": user_id, "device_id": device_id})


async def _patch_device(db: AsyncSession, user_id: str, device_id: str, patch: Dict[str, Any]) -> UserDevice:
    device = await _find_device(db, user_id, device_id)
    if not device:
        raise NotFoundError("Device not found")
    return await documents.update_by_id(db, UserDevice, device.id, patch)


async def register_device(
    db: AsyncSession,
    user_id: str,
    campus_id: str,
    payload: DeviceRegister,
) -> UserDeviceResponse:
    """
    Register a device, or refresh it when the user already has it.

    Re-registering reactivates the device and keeps its previous push token
    unless a new one is supplied.
    """
    fields = payload.model_dump(mode="json")
    fields["is_active"] = True
    fields["last_active_at"] = utcnow()

    existing = await _find_device(db, user_id, payload.device_id)
    if existing:
        fields["push_token"] = payload.push_token or existing.push_token
        device = await documents.update_by_id(db, UserDevice, existing.id, fields)
        logger.info("device_updated", user_id=user_id, device_id=payload.device_id)
    else:
        try:
            device = await documents.create(
                db, UserDevice, user_id=user_id, campus_id=campus_id, is_deleted=False, **fields
            )
        except IntegrityError:
            await db.rollback()
            existing = await _find_device(db, user_id, payload.device_id)
            fields["push_token"] = payload.push_token or existing.push_token
            device = await documents.update_by_id(db, UserDevice, existing.id, fields)
            logger.info("device_updated", user_id=user_id, device_id=payload.device_id)
        else:
            logger.info("device_registered", user_id=user_id, device_id=payload.device_id)
    return UserDeviceResponse.model_validate(device)


async def list_user_devices(db: AsyncSession, user_id: str) -> List[UserDeviceResponse]:
    rows = await documents.find(db, UserDevice, {"user_id": user_id}, order_by=("-last_active_at",))
    return [UserDeviceResponse.model_validate(d) for d in rows]


async def count_active_devices(db: AsyncSession, user_id: str) -> int:
    rows = await documents.find(db, UserDevice, {"user_id": user_id, "is_active": True})
    return len(rows)


async def update_push_token(db: AsyncSession, user_id: str, device_id: str, push_token: str) -> UserDeviceResponse:
    device = await _patch_device(db, user_id, device_id, {"push_token": push_token})
    return UserDeviceResponse.model_validate(device)


async def record_sync(
    db: AsyncSession,
    user_id: str,
    device_id: str,
    last_message_seq: Optional[int] = None,
) -> UserDeviceResponse:
    now = utcnow()
    patch: Dict[str, Any] = {"last_sync_at": now, "last_active_at": now}
    if last_message_seq is not None:
        patch["last_message_seq"] = last_message_seq
    device = await _patch_device(db, user_id, device_id, patch)
    return UserDeviceResponse.model_validate(device)


async def touch_device(db: AsyncSession, user_id: str, device_id: str) -> UserDeviceResponse:
    device = await _patch_device(db, user_id, device_id, {"last_active_at": utcnow()})
    return UserDeviceResponse.model_validate(device)


async def deactivate_device(db: AsyncSession, user_id: str, device_id: str) -> None:
    await _patch_device(db, user_id, device_id, {"is_active": False})
    logger.info("device_deactivated", user_id=user_id, device_id=device_id)
