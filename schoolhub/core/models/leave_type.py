"""Configurable leave types per campus (Sick, Casual, Earned, Other, etc.)."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, UniqueConstraint

from schoolhub.db.defaults import new_id, utcnow
from schoolhub.db.session import Base


class LeaveType(Base):
    __tablename__ = "leave_types"
    __table_args__ = (UniqueConstraint("campus_id", "code", name="uq_leave_type_campus_code"),)

    id = Column(String(36), primary_key=True, default=new_id)
    campus_id = Column(String(36), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    code = Column(String(50), nullable=False)
    description = Column(Text, nullable=True)
    max_days_per_year = Column(Integer, nullable=True)
    is_paid = Column(Boolean, nullable=False, default=True)
    is_active = Column(Boolean, nullable=False, default=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
