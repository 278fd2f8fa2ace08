"""Devices a user is signed in on, for push delivery and multi-device sync."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, UniqueConstraint

from schoolhub.db.defaults import new_id, utcnow
from schoolhub.db.session import Base


class UserDevice(Base):
    __tablename__ = "user_devices"
    __table_args__ = (UniqueConstraint("user_id", "device_id", name="uq_user_device"),)

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), nullable=False, index=True)
    campus_id = Column(String(36), nullable=False, index=True)
    device_id = Column(String(255), nullable=False, index=True)
    device_name = Column(String(255), nullable=False)
    # mobile | web | desktop | tablet
    device_type = Column(String(20), nullable=False)
    platform = Column(String(50), nullable=False)
    app_version = Column(String(50), nullable=False)
    push_token = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    last_active_at = Column(DateTime, default=utcnow, nullable=False)
    last_sync_at = Column(DateTime, nullable=True)
    last_message_seq = Column(Integer, nullable=True)
    ip_address = Column(String(64), nullable=True)
    user_agent = Column(Text, nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
