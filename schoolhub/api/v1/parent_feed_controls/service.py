"""Parents switching a student's access to the campus feed on or off."""

from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.core.logging import get_logger
from schoolhub.core.models import ParentFeedControl
from schoolhub.db import documents

logger = get_logger(__name__)


async def get_feed_control(db: AsyncSession, parent_id: str, student_id: str) -> Optional[ParentFeedControl]:
    return await documents.find_one(db, ParentFeedControl, {"parent_id": parent_id, "student_id": student_id})


async def set_feed_access(
    db: AsyncSession,
    parent_id: str,
    student_id: str,
    campus_id: Optional[str],
    feed_access_enabled: bool,
) -> ParentFeedControl:
    """Create or update the (parent, student) control record."""
    patch = {"feed_access_enabled": feed_access_enabled}
    existing = await get_feed_control(db, parent_id, student_id)
    if existing:
        control = await documents.update_by_id(db, ParentFeedControl, existing.id, patch)
    else:
        try:
            control = await documents.create(
                db,
                ParentFeedControl,
                parent_id=parent_id,
                student_id=student_id,
                campus_id=campus_id,
                is_active=True,
                is_deleted=False,
                **patch,
            )
        except IntegrityError:
            # Lost a race with a concurrent toggle; apply ours on top of it.
            await db.rollback()
            existing = await get_feed_control(db, parent_id, student_id)
            control = await documents.update_by_id(db, ParentFeedControl, existing.id, patch)
    logger.info(
        "feed_access_set",
        parent_id=parent_id,
        student_id=student_id,
        feed_access_enabled=feed_access_enabled,
    )
    return control


async def check_student_feed_access(db: AsyncSession, student_id: str) -> bool:
    """
    Whether the student may read the feed.

    Allowed when no parent has a control record; denied as soon as any parent
    disabled access. A database failure allows access.
    """
    try:
        controls = await documents.find(db, ParentFeedControl, {"student_id": student_id})
    except SQLAlchemyError:
        logger.exception("feed_access_check_failed", student_id=student_id)
        return True
    return all(c.feed_access_enabled for c in controls)
