from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class SyllabusCreate(BaseModel):
    subject_id: str
    name: str = Field(..., min_length=1, max_length=255, examples=["Mathematics Syllabus 2024"])
    description: str = Field("", examples=["Algebra, geometry and calculus"])
    meta_data: Dict[str, Any] = Field(default_factory=dict, examples=[{"academic_year": "2024-2025", "grade_level": "10"}])


class SyllabusUpdate(BaseModel):
    subject_id: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    meta_data: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None


class SyllabusResponse(BaseModel):
    id: str
    campus_id: str
    subject_id: str
    name: str
    description: str
    meta_data: Dict[str, Any]
    is_active: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
