from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from schoolhub.core.enums import DeviceType


class DeviceRegister(BaseModel):
    device_id: str = Field(..., min_length=1, max_length=255)
    device_name: str = Field(..., min_length=1, max_length=255, examples=["Pixel 8"])
    device_type: DeviceType
    platform: str = Field(..., max_length=50, examples=["android"])
    app_version: str = Field(..., max_length=50, examples=["2.4.1"])
    push_token: Optional[str] = None
    ip_address: Optional[str] = Field(None, max_length=64)
    user_agent: Optional[str] = None


class PushTokenUpdate(BaseModel):
    push_token: str = Field(..., min_length=1)


class DeviceSync(BaseModel):
    last_message_seq: Optional[int] = Field(None, ge=0)


class ActiveDeviceCount(BaseModel):
    active_devices: int


class UserDeviceResponse(BaseModel):
    id: str
    user_id: str
    campus_id: str
    device_id: str
    device_name: str
    device_type: DeviceType
    platform: str
    app_version: str
    push_token: Optional[str] = None
    is_active: bool
    last_active_at: datetime
    last_sync_at: Optional[datetime] = None
    last_message_seq: Optional[int] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
