"""One student's attempt at a class quiz.

Status moves not_started -> in_progress -> completed | expired | abandoned.
Expiry is applied when the session is next read, not by a timer.
"""

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String

from schoolhub.db.defaults import new_id, utcnow
from schoolhub.db.session import Base


class QuizSession(Base):
    __tablename__ = "class_quiz_sessions"

    id = Column(String(36), primary_key=True, default=new_id)
    campus_id = Column(String(36), nullable=False, index=True)
    class_id = Column(String(36), nullable=False, index=True)
    quiz_id = Column(String(36), nullable=False, index=True)
    user_id = Column(String(36), nullable=False, index=True)
    session_token = Column(String(64), nullable=False, unique=True)
    status = Column(String(20), nullable=False, default="not_started", index=True)
    started_at = Column(DateTime, nullable=True)
    completed_at = Column(DateTime, nullable=True)
    expires_at = Column(DateTime, nullable=True)
    time_limit_minutes = Column(Integer, nullable=True)
    remaining_time_seconds = Column(Integer, nullable=True)
    last_activity_at = Column(DateTime, default=utcnow, nullable=False)
    answers_count = Column(Integer, nullable=False, default=0)
    total_questions = Column(Integer, nullable=False)
    current_question_index = Column(Integer, nullable=False, default=0)
    meta_data = Column(JSON, nullable=False, default=dict)
    is_active = Column(Boolean, nullable=False, default=True)
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)
