"""Student payment tracker schemas."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from schoolhub.core.enums import TrackerPaymentStatus


class PaymentTrackerCreate(BaseModel):
    student_id: str
    class_id: str
    fee_structure_id: str
    academic_year: str = Field(..., max_length=20)
    total_due: float = Field(..., ge=0)
    meta_data: Dict[str, Any] = Field(default_factory=dict)


class PaymentTrackerUpdate(BaseModel):
    total_due: Optional[float] = Field(None, ge=0)
    payment_status: Optional[TrackerPaymentStatus] = None
    meta_data: Optional[Dict[str, Any]] = None


class InstallmentPayment(BaseModel):
    installment_number: int = Field(..., ge=1)
    amount: float = Field(..., gt=0)


class OneTimePayment(BaseModel):
    amount: float = Field(..., gt=0)


class PaymentTrackerResponse(BaseModel):
    id: str
    campus_id: str
    student_id: str
    class_id: str
    fee_structure_id: str
    academic_year: str
    total_paid: float
    total_due: float
    installments_paid: List[int]
    one_time_paid: bool
    payment_status: TrackerPaymentStatus
    meta_data: Dict[str, Any]
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
