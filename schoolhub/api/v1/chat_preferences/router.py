from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.auth.dependencies import get_current_user
from schoolhub.auth.schemas import CurrentUser
from schoolhub.db.session import get_db

from .schemas import ArchiveRequest, ChatPreferenceResponse, MarkReadRequest, MuteRequest
from . import service

router = APIRouter(prefix="/api/v1/chat-preferences", tags=["chat-preferences"])


@router.get("", response_model=List[ChatPreferenceResponse])
async def list_my_preferences(
    archived: Optional[bool] = None,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> List[ChatPreferenceResponse]:
    """Rooms the caller has preferences for, excluding deleted chats. Filter with ?archived=true|false."""
    return await service.list_preferences(db, current_user.id, archived=archived)


@router.get("/rooms/{room_id}", response_model=ChatPreferenceResponse)
async def get_room_preference(
    room_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> ChatPreferenceResponse:
    return await service.get_preference(db, current_user.id, room_id)


@router.put("/rooms/{room_id}/archive", response_model=ChatPreferenceResponse)
async def archive_room(
    room_id: str,
    payload: ArchiveRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> ChatPreferenceResponse:
    return await service.set_archived(db, current_user.id, room_id, current_user.campus_id, payload.archived)


@router.put("/rooms/{room_id}/mute", response_model=ChatPreferenceResponse)
async def mute_room(
    room_id: str,
    payload: MuteRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> ChatPreferenceResponse:
    return await service.set_muted(
        db, current_user.id, room_id, current_user.campus_id, payload.muted, payload.muted_until
    )


@router.put("/rooms/{room_id}/read", response_model=ChatPreferenceResponse)
async def mark_room_read(
    room_id: str,
    payload: MarkReadRequest,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> ChatPreferenceResponse:
    return await service.mark_read(
        db, current_user.id, room_id, current_user.campus_id, payload.last_read_message_id
    )


@router.put("/rooms/{room_id}/unread", response_model=ChatPreferenceResponse)
async def mark_room_unread(
    room_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> ChatPreferenceResponse:
    return await service.mark_unread(db, current_user.id, room_id, current_user.campus_id)


@router.put("/rooms/{room_id}/clear", response_model=ChatPreferenceResponse)
async def clear_room_messages(
    room_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> ChatPreferenceResponse:
    return await service.clear_messages(db, current_user.id, room_id, current_user.campus_id)


@router.delete("/rooms/{room_id}", response_model=ChatPreferenceResponse)
async def delete_room_chat(
    room_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> ChatPreferenceResponse:
    return await service.delete_chat(db, current_user.id, room_id, current_user.campus_id)
