from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


# ----- Leave Type -----
class LeaveTypeCreate(BaseModel):
    name: str = Field(..., max_length=100)
    code: str = Field(..., max_length=50)
    description: Optional[str] = None
    max_days_per_year: Optional[int] = Field(None, ge=0)
    is_paid: bool = True
    is_active: bool = True


class LeaveTypeUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    code: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None
    max_days_per_year: Optional[int] = Field(None, ge=0)
    is_paid: Optional[bool] = None
    is_active: Optional[bool] = None


class LeaveTypeResponse(BaseModel):
    id: str
    campus_id: str
    name: str
    code: str
    description: Optional[str] = None
    max_days_per_year: Optional[int] = None
    is_paid: bool
    is_active: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


# ----- Leave Policy -----
class BlackoutPeriod(BaseModel):
    start_date: date
    end_date: date
    reason: Optional[str] = None

    @model_validator(mode="after")
    def check_range(self) -> "BlackoutPeriod":
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class ApprovalStep(BaseModel):
    """Leaves of up to ``days`` days go to ``approvers``."""

    days: int = Field(..., ge=1)
    approvers: List[str] = Field(..., min_length=1)


class LeavePolicyCreate(BaseModel):
    leave_type_id: str
    name: str = Field(..., max_length=255)
    description: Optional[str] = None
    eligibility: str = Field(..., max_length=255, examples=["All employees"])
    notice_period: int = Field(..., ge=0)
    documentation_required: Optional[str] = None
    blackout_periods: List[BlackoutPeriod] = Field(default_factory=list)
    max_consecutive_days: Optional[int] = Field(None, ge=1)
    min_notice_days: int = Field(..., ge=0)
    approval_matrix: List[ApprovalStep] = Field(default_factory=list)


class LeavePolicyUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    eligibility: Optional[str] = Field(None, max_length=255)
    notice_period: Optional[int] = Field(None, ge=0)
    documentation_required: Optional[str] = None
    blackout_periods: Optional[List[BlackoutPeriod]] = None
    max_consecutive_days: Optional[int] = Field(None, ge=1)
    min_notice_days: Optional[int] = Field(None, ge=0)
    approval_matrix: Optional[List[ApprovalStep]] = None
    is_active: Optional[bool] = None


class LeavePolicyResponse(BaseModel):
    id: str
    campus_id: str
    leave_type_id: str
    name: str
    description: Optional[str] = None
    eligibility: str
    notice_period: int
    documentation_required: Optional[str] = None
    blackout_periods: List[BlackoutPeriod]
    max_consecutive_days: Optional[int] = None
    min_notice_days: int
    approval_matrix: List[ApprovalStep]
    is_active: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
