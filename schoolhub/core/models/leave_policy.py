"""Rules attached to a leave type: eligibility, notice, blackout periods, approvals."""

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text

from schoolhub.db.defaults import new_id, utcnow
from schoolhub.db.session import Base


class LeavePolicy(Base):
    __tablename__ = "leave_policies"

    id = Column(String(36), primary_key=True, default=new_id)
    campus_id = Column(String(36), nullable=False, index=True)
    leave_type_id = Column(String(36), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    # e.g. "All employees", "After probation"
    eligibility = Column(String(255), nullable=False)
    notice_period = Column(Integer, nullable=False)
    documentation_required = Column(Text, nullable=True)
    blackout_periods = Column(JSON, nullable=False, default=list)
    max_consecutive_days = Column(Integer, nullable=True)
    min_notice_days = Column(Integer, nullable=False)
    # [{"days": int, "approvers": [str]}]
    approval_matrix = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
