"""Fee template schemas."""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator


class FeeStructureLine(BaseModel):
    category_id: str
    category_name: str
    amount: float = Field(..., ge=0)
    is_mandatory: bool = True
    due_date: Optional[date] = None
    late_fee_applicable: bool = False


class ValidityPeriod(BaseModel):
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_order(self) -> "ValidityPeriod":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class FeeTemplateCreate(BaseModel):
    template_name: str = Field(..., min_length=1, max_length=255)
    class_id: str
    academic_year: str = Field(..., max_length=20, examples=["2024-2025"])
    fee_structure: List[FeeStructureLine] = Field(..., min_length=1)
    total_amount: float = Field(..., ge=0)
    applicable_students: List[str] = Field(default_factory=list, description="Empty means all students in the class")
    validity_period: ValidityPeriod
    auto_generate: bool = False
    meta_data: Dict[str, Any] = Field(default_factory=dict)


class FeeTemplateUpdate(BaseModel):
    template_name: Optional[str] = Field(None, min_length=1, max_length=255)
    class_id: Optional[str] = None
    academic_year: Optional[str] = Field(None, max_length=20)
    fee_structure: Optional[List[FeeStructureLine]] = None
    total_amount: Optional[float] = Field(None, ge=0)
    applicable_students: Optional[List[str]] = None
    validity_period: Optional[ValidityPeriod] = None
    auto_generate: Optional[bool] = None
    is_active: Optional[bool] = None
    meta_data: Optional[Dict[str, Any]] = None


class FeeTemplateResponse(BaseModel):
    id: str
    campus_id: str
    template_name: str
    class_id: str
    academic_year: str
    fee_structure: List[FeeStructureLine]
    total_amount: float
    applicable_students: List[str]
    validity_period: ValidityPeriod
    auto_generate: bool
    meta_data: Dict[str, Any]
    is_active: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
