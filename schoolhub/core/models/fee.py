"""Per-student fee bill. Amounts are stored as given; nothing is recomputed on update."""

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, String

from schoolhub.db.defaults import new_id, utcnow
from schoolhub.db.session import Base


class Fee(Base):
    __tablename__ = "fees"

    id = Column(String(36), primary_key=True, default=new_id)
    campus_id = Column(String(36), nullable=False, index=True)
    user_id = Column(String(36), nullable=False, index=True)
    # [{"fee_type": str, "amount": float, "name": str}]
    items = Column(JSON, nullable=False, default=list)
    paid_amount = Column(Float, nullable=False, default=0)
    due_amount = Column(Float, nullable=False)
    payment_status = Column(String(20), nullable=False, default="unpaid", index=True)
    is_paid = Column(Boolean, nullable=False, default=False)
    payment_date = Column(DateTime, nullable=True)
    payment_mode = Column(String(50), nullable=True)
    meta_data = Column(JSON, nullable=False, default=dict)
    is_active = Column(Boolean, nullable=False, default=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
