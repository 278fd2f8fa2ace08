from datetime import datetime

from pydantic import BaseModel, StrictBool


class FeedAccessToggle(BaseModel):
    feed_access_enabled: StrictBool


class FeedStatus(BaseModel):
    student_id: str
    feed_access_enabled: bool
    current_access: bool


class FeedAccessState(BaseModel):
    student_id: str
    feed_access_enabled: bool
    updated_at: datetime
