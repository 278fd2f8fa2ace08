"""Fee structure an admin sets per class, with one-time and installment options."""

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, String, Text

from schoolhub.db.defaults import new_id, utcnow
from schoolhub.db.session import Base


class ClassFeeStructure(Base):
    __tablename__ = "class_fee_structures"

    id = Column(String(36), primary_key=True, default=new_id)
    campus_id = Column(String(36), nullable=False, index=True)
    class_id = Column(String(36), nullable=False, index=True)
    class_name = Column(String(100), nullable=False)
    academic_year = Column(String(20), nullable=False)
    total_amount = Column(Float, nullable=False)
    one_time_amount = Column(Float, nullable=False)
    one_time_enabled = Column(Boolean, nullable=False, default=True)
    installments_enabled = Column(Boolean, nullable=False, default=True)
    # [{"installment_number": int, "amount": float, "due_date": str | None, "description": str | None}]
    installments = Column(JSON, nullable=False, default=list)
    vendor_id = Column(String(100), nullable=False)
    vendor_split_percentage = Column(Float, nullable=False, default=100)
    fee_description = Column(Text, nullable=True)
    meta_data = Column(JSON, nullable=False, default=dict)
    is_active = Column(Boolean, nullable=False, default=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_by = Column(String(36), nullable=True)
    updated_by = Column(String(36), nullable=True)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
