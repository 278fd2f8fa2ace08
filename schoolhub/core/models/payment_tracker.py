"""Tracks which installments of a class fee structure a student has paid."""

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, String

from schoolhub.db.defaults import new_id, utcnow
from schoolhub.db.session import Base


class PaymentTracker(Base):
    __tablename__ = "payment_trackers"

    id = Column(String(36), primary_key=True, default=new_id)
    campus_id = Column(String(36), nullable=False, index=True)
    student_id = Column(String(36), nullable=False, index=True)
    class_id = Column(String(36), nullable=False)
    fee_structure_id = Column(String(36), nullable=False, index=True)
    academic_year = Column(String(20), nullable=False)
    total_paid = Column(Float, nullable=False, default=0)
    total_due = Column(Float, nullable=False)
    installments_paid = Column(JSON, nullable=False, default=list)
    one_time_paid = Column(Boolean, nullable=False, default=False)
    # PENDING | PARTIAL | COMPLETED | OVERDUE
    payment_status = Column(String(20), nullable=False, default="PENDING")
    meta_data = Column(JSON, nullable=False, default=dict)
    is_active = Column(Boolean, nullable=False, default=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
