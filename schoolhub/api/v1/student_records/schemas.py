"""Student record schemas."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Mark(BaseModel):
    subject_id: str
    mark_gained: float = Field(..., ge=0)
    total_marks: float = Field(..., gt=0)
    grade: str
    examination_id: str


class RecordData(BaseModel):
    exam_term_id: str
    marks: List[Mark] = Field(default_factory=list)


class StudentRecordCreate(BaseModel):
    student_id: str
    record_data: List[RecordData] = Field(default_factory=list)
    meta_data: Dict[str, Any] = Field(default_factory=dict)


class StudentRecordUpdate(BaseModel):
    record_data: List[RecordData]


class StudentRecordResponse(BaseModel):
    id: str
    campus_id: str
    student_id: str
    record_data: List[RecordData]
    meta_data: Dict[str, Any]
    is_active: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
