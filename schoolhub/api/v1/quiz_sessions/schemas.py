from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from schoolhub.core.enums import QuizSessionStatus


class QuizSessionCreate(BaseModel):
    class_id: str
    quiz_id: str
    total_questions: int = Field(..., ge=1)
    time_limit_minutes: Optional[int] = Field(None, ge=1, description="Omit for an untimed quiz")
    meta_data: Dict[str, Any] = Field(default_factory=dict, examples=[{"question_order": ["q1", "q2"]}])


class QuizProgress(BaseModel):
    answers_count: int = Field(..., ge=0)
    current_question_index: int = Field(..., ge=0)


class QuizSessionExtend(BaseModel):
    additional_minutes: int = Field(..., ge=1, le=240)


class QuizSessionResponse(BaseModel):
    id: str
    campus_id: str
    class_id: str
    quiz_id: str
    user_id: str
    session_token: str
    status: QuizSessionStatus
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    time_limit_minutes: Optional[int] = None
    remaining_time_seconds: Optional[int] = None
    last_activity_at: datetime
    answers_count: int
    total_questions: int
    current_question_index: int
    meta_data: Dict[str, Any]
    is_active: bool
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
