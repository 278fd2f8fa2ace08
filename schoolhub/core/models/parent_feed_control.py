"""Per (parent, student) switch that blocks a student's access to the campus feed."""

from sqlalchemy import Boolean, Column, DateTime, String, UniqueConstraint

from schoolhub.db.defaults import new_id, utcnow
from schoolhub.db.session import Base


class ParentFeedControl(Base):
    __tablename__ = "parent_feed_controls"
    __table_args__ = (UniqueConstraint("parent_id", "student_id", name="uq_feed_control_parent_student"),)

    id = Column(String(36), primary_key=True, default=new_id)
    campus_id = Column(String(36), nullable=True, index=True)
    parent_id = Column(String(36), nullable=False, index=True)
    student_id = Column(String(36), nullable=False, index=True)
    feed_access_enabled = Column(Boolean, nullable=False, default=True)
    is_active = Column(Boolean, nullable=False, default=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
