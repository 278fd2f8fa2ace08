"""Reusable fee template for a class and academic year."""

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, String

from schoolhub.db.defaults import new_id, utcnow
from schoolhub.db.session import Base


class FeeTemplate(Base):
    __tablename__ = "fee_templates"

    id = Column(String(36), primary_key=True, default=new_id)
    campus_id = Column(String(36), nullable=False, index=True)
    template_name = Column(String(255), nullable=False)
    class_id = Column(String(36), nullable=False, index=True)
    academic_year = Column(String(20), nullable=False, index=True)
    # [{"category_id", "category_name", "amount", "is_mandatory", "due_date", "late_fee_applicable"}]
    fee_structure = Column(JSON, nullable=False, default=list)
    total_amount = Column(Float, nullable=False)
    # Empty means every student in the class
    applicable_students = Column(JSON, nullable=False, default=list)
    # {"start_date": ..., "end_date": ...}
    validity_period = Column(JSON, nullable=False, default=dict)
    auto_generate = Column(Boolean, nullable=False, default=False)
    meta_data = Column(JSON, nullable=False, default=dict)
    is_active = Column(Boolean, nullable=False, default=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
