"""Per-user chat room preferences: archive, mute, read markers, clear and delete."""

from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.core.models import ChatPreference
from schoolhub.db import documents
from schoolhub.db.defaults import utcnow

from .schemas import ChatPreferenceResponse


async def _find(db: AsyncSession, user_id: str, room_id: str) -> Optional[ChatPreference]:
    return await documents.find_one(db, ChatPreference, {"user_id": user_id, "room_id": room_id})


async def _upsert(
    db: AsyncSession,
    user_id: str,
    room_id: str,
    campus_id: Optional[str],
    patch: Dict[str, Any],
) -> ChatPreferenceResponse:
    existing = await _find(db, user_id, room_id)
    if existing:
        pref = await documents.update_by_id(db, ChatPreference, existing.id, patch)
    else:
        try:
            pref = await documents.create(
                db, ChatPreference, user_id=user_id, room_id=room_id, campus_id=campus_id, **patch
            )
        except IntegrityError:
            await db.rollback()
            existing = await _find(db, user_id, room_id)
            pref = await documents.update_by_id(db, ChatPreference, existing.id, patch)
    return ChatPreferenceResponse.model_validate(pref)


async def list_preferences(
    db: AsyncSession,
    user_id: str,
    archived: Optional[bool] = None,
) -> List[ChatPreferenceResponse]:
    filters: Dict[str, Any] = {"user_id": user_id, "is_deleted": False}
    if archived is not None:
        filters["is_archived"] = archived
    rows = await documents.find(db, ChatPreference, filters)
    return [ChatPreferenceResponse.model_validate(p) for p in rows]


async def get_preference(db: AsyncSession, user_id: str, room_id: str) -> ChatPreferenceResponse:
    """Stored preferences, or the defaults when the user never touched this room."""
    pref = await _find(db, user_id, room_id)
    if pref is None:
        return ChatPreferenceResponse(user_id=user_id, room_id=room_id)
    return ChatPreferenceResponse.model_validate(pref)


async def set_archived(
    db: AsyncSession, user_id: str, room_id: str, campus_id: Optional[str], archived: bool
) -> ChatPreferenceResponse:
    return await _upsert(
        db,
        user_id,
        room_id,
        campus_id,
        {"is_archived": archived, "archived_at": utcnow() if archived else None},
    )


async def set_muted(
    db: AsyncSession,
    user_id: str,
    room_id: str,
    campus_id: Optional[str],
    muted: bool,
    muted_until=None,
) -> ChatPreferenceResponse:
    return await _upsert(
        db,
        user_id,
        room_id,
        campus_id,
        {"is_muted": muted, "muted_until": muted_until if muted else None},
    )


async def mark_read(
    db: AsyncSession,
    user_id: str,
    room_id: str,
    campus_id: Optional[str],
    last_read_message_id: Optional[str] = None,
) -> ChatPreferenceResponse:
    patch: Dict[str, Any] = {"last_read_at": utcnow(), "manually_marked_unread": False}
    if last_read_message_id:
        patch["last_read_message_id"] = last_read_message_id
    return await _upsert(db, user_id, room_id, campus_id, patch)


async def mark_unread(
    db: AsyncSession, user_id: str, room_id: str, campus_id: Optional[str]
) -> ChatPreferenceResponse:
    return await _upsert(db, user_id, room_id, campus_id, {"manually_marked_unread": True})


async def clear_messages(
    db: AsyncSession, user_id: str, room_id: str, campus_id: Optional[str]
) -> ChatPreferenceResponse:
    """Hide every message sent before now from this user's view of the room."""
    return await _upsert(db, user_id, room_id, campus_id, {"messages_cleared_at": utcnow()})


async def delete_chat(
    db: AsyncSession, user_id: str, room_id: str, campus_id: Optional[str]
) -> ChatPreferenceResponse:
    return await _upsert(db, user_id, room_id, campus_id, {"is_deleted": True, "deleted_at": utcnow()})
