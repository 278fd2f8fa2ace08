"""Campus schemas."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class CampusCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Main Campus"])
    address: str = Field(..., examples=["123 Education Ave, City"])
    domain: str = Field(..., max_length=255, examples=["maincampus.edu"])
    meta_data: Dict[str, Any] = Field(default_factory=dict, examples=[{"region": "North", "capacity": 1000}])


class CampusUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = None
    domain: Optional[str] = Field(None, max_length=255)
    meta_data: Optional[Dict[str, Any]] = None
    is_active: Optional[bool] = None


class CampusResponse(BaseModel):
    id: str
    name: str
    address: str
    domain: str
    meta_data: Dict[str, Any]
    is_active: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
