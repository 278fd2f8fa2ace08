"""Class fee structure schemas."""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class Installment(BaseModel):
    installment_number: int = Field(..., ge=1)
    amount: float = Field(..., ge=0)
    due_date: Optional[date] = None
    description: Optional[str] = None


def _unique_installment_numbers(installments: Optional[List[Installment]]) -> Optional[List[Installment]]:
    if installments is None:
        return installments
    numbers = [i.installment_number for i in installments]
    if len(numbers) != len(set(numbers)):
        raise ValueError("installment_number values must be unique")
    return installments


class ClassFeeStructureCreate(BaseModel):
    class_id: str
    class_name: str = Field(..., max_length=100)
    academic_year: str = Field(..., max_length=20)
    total_amount: float = Field(..., ge=0)
    one_time_amount: float = Field(..., ge=0, description="May be discounted against total_amount")
    one_time_enabled: bool = True
    installments_enabled: bool = True
    installments: List[Installment] = Field(default_factory=list)
    vendor_id: str
    vendor_split_percentage: float = Field(100, ge=0, le=100)
    fee_description: Optional[str] = None
    meta_data: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("installments")
    @classmethod
    def check_installments(cls, v: Optional[List[Installment]]) -> Optional[List[Installment]]:
        return _unique_installment_numbers(v)


class ClassFeeStructureUpdate(BaseModel):
    class_name: Optional[str] = Field(None, max_length=100)
    academic_year: Optional[str] = Field(None, max_length=20)
    total_amount: Optional[float] = Field(None, ge=0)
    one_time_amount: Optional[float] = Field(None, ge=0)
    one_time_enabled: Optional[bool] = None
    installments_enabled: Optional[bool] = None
    installments: Optional[List[Installment]] = None
    vendor_id: Optional[str] = None
    vendor_split_percentage: Optional[float] = Field(None, ge=0, le=100)
    fee_description: Optional[str] = None
    is_active: Optional[bool] = None
    meta_data: Optional[Dict[str, Any]] = None

    @field_validator("installments")
    @classmethod
    def check_installments(cls, v: Optional[List[Installment]]) -> Optional[List[Installment]]:
        return _unique_installment_numbers(v)


class ClassFeeStructureResponse(BaseModel):
    id: str
    campus_id: str
    class_id: str
    class_name: str
    academic_year: str
    total_amount: float
    one_time_amount: float
    one_time_enabled: bool
    installments_enabled: bool
    installments: List[Installment]
    vendor_id: str
    vendor_split_percentage: float
    fee_description: Optional[str] = None
    meta_data: Dict[str, Any]
    is_active: bool
    is_deleted: bool
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
