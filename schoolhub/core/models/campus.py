"""Campus: the tenant scope every other record points at through campus_id."""

from sqlalchemy import JSON, Boolean, Column, DateTime, String, Text

from schoolhub.db.defaults import new_id, utcnow
from schoolhub.db.session import Base


class Campus(Base):
    __tablename__ = "campuses"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    address = Column(Text, nullable=False)
    domain = Column(String(255), nullable=False, index=True)
    meta_data = Column(JSON, nullable=False, default=dict)
    is_active = Column(Boolean, nullable=False, default=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
