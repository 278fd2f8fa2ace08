from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class DataResponse(BaseModel, Generic[DataT]):
    """Envelope for endpoints that report an outcome alongside the record."""

    success: bool = True
    message: Optional[str] = None
    data: DataT


class ErrorResponse(BaseModel):
    """Canonical error body returned for every handled failure."""

    success: bool = False
    message: str


class HealthResponse(BaseModel):
    status: str
    database: bool
