"""Column defaults shared by every document model."""

import uuid
from datetime import datetime, timezone


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    # Naive UTC: SQLite drops tzinfo on round-trip, so stored values stay comparable.
    return datetime.now(timezone.utc).replace(tzinfo=None)
