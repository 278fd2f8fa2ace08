from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ArchiveRequest(BaseModel):
    archived: bool = True


class MuteRequest(BaseModel):
    muted: bool = True
    muted_until: Optional[datetime] = Field(None, description="Omit to mute until unmuted")


class MarkReadRequest(BaseModel):
    last_read_message_id: Optional[str] = Field(None, max_length=64)


class ChatPreferenceResponse(BaseModel):
    """Preferences for one room. ``id`` is null while the user has never changed anything."""

    id: Optional[str] = None
    user_id: str
    room_id: str
    is_archived: bool = False
    archived_at: Optional[datetime] = None
    messages_cleared_at: Optional[datetime] = None
    is_deleted: bool = False
    deleted_at: Optional[datetime] = None
    last_read_message_id: Optional[str] = None
    last_read_at: Optional[datetime] = None
    manually_marked_unread: bool = False
    is_muted: bool = False
    muted_until: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
