"""Academic record of a student: exam terms with per-subject marks."""

from sqlalchemy import JSON, Boolean, Column, DateTime, String

from schoolhub.db.defaults import new_id, utcnow
from schoolhub.db.session import Base


class StudentRecord(Base):
    __tablename__ = "student_records"

    id = Column(String(36), primary_key=True, default=new_id)
    campus_id = Column(String(36), nullable=False, index=True)
    student_id = Column(String(36), nullable=False, index=True)
    # [{"exam_term_id": str, "marks": [{"subject_id", "mark_gained", "total_marks", "grade", "examination_id"}]}]
    record_data = Column(JSON, nullable=False, default=list)
    meta_data = Column(JSON, nullable=False, default=dict)
    is_active = Column(Boolean, nullable=False, default=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
