"""Per-user settings for one chat room: archive, mute, unread and clear markers."""

from sqlalchemy import Boolean, Column, DateTime, String, UniqueConstraint

from schoolhub.db.defaults import new_id, utcnow
from schoolhub.db.session import Base


class ChatPreference(Base):
    __tablename__ = "user_chat_preferences"
    __table_args__ = (UniqueConstraint("user_id", "room_id", name="uq_chat_preference_user_room"),)

    id = Column(String(36), primary_key=True, default=new_id)
    campus_id = Column(String(36), nullable=True, index=True)
    user_id = Column(String(36), nullable=False, index=True)
    room_id = Column(String(36), nullable=False, index=True)

    is_archived = Column(Boolean, nullable=False, default=False)
    archived_at = Column(DateTime, nullable=True)

    messages_cleared_at = Column(DateTime, nullable=True)

    is_deleted = Column(Boolean, nullable=False, default=False)
    deleted_at = Column(DateTime, nullable=True)

    last_read_message_id = Column(String(64), nullable=True)
    last_read_at = Column(DateTime, nullable=True)
    manually_marked_unread = Column(Boolean, nullable=False, default=False)

    is_muted = Column(Boolean, nullable=False, default=False)
    muted_until = Column(DateTime, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
