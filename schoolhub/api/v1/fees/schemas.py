"""Fee schemas."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from schoolhub.core.enums import FeePaymentStatus


class FeeItem(BaseModel):
    fee_type: str = Field(..., examples=["tuition"])
    amount: float = Field(..., ge=0)
    name: str = Field(..., examples=["Term 1 tuition"])


class FeeCreate(BaseModel):
    user_id: str
    items: List[FeeItem] = Field(..., min_length=1)
    meta_data: Dict[str, Any] = Field(default_factory=dict)


class FeeUpdate(BaseModel):
    """Raw patch. Amounts are stored as sent; due_amount is never derived from paid_amount."""

    items: Optional[List[FeeItem]] = None
    paid_amount: Optional[float] = Field(None, ge=0)
    due_amount: Optional[float] = Field(None, ge=0)
    payment_status: Optional[FeePaymentStatus] = None
    is_paid: Optional[bool] = None
    payment_date: Optional[datetime] = None
    payment_mode: Optional[str] = Field(None, max_length=50)
    meta_data: Optional[Dict[str, Any]] = None


class FeeResponse(BaseModel):
    id: str
    campus_id: str
    user_id: str
    items: List[FeeItem]
    paid_amount: float
    due_amount: float
    payment_status: FeePaymentStatus
    is_paid: bool
    payment_date: Optional[datetime] = None
    payment_mode: Optional[str] = None
    meta_data: Dict[str, Any]
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
