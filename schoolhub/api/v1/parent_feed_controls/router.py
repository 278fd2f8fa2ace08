from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.auth.rbac import require_user_types
from schoolhub.auth.schemas import CurrentUser
from schoolhub.core.enums import UserType
from schoolhub.core.schemas import DataResponse
from schoolhub.db.session import get_db

from .schemas import FeedAccessState, FeedAccessToggle, FeedStatus
from . import service

router = APIRouter(prefix="/api/v1/parent-feed-controls", tags=["parent-feed-controls"])


@router.get("/students/{student_id}/status", response_model=DataResponse[FeedStatus])
async def get_student_feed_status(
    student_id: str,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(
        require_user_types(UserType.PARENT, detail="Only parents can check feed access status")
    ),
) -> DataResponse[FeedStatus]:
    control = await service.get_feed_control(db, current_user.id, student_id)
    current_access = await service.check_student_feed_access(db, student_id)
    return DataResponse[FeedStatus](
        data=FeedStatus(
            student_id=student_id,
            feed_access_enabled=control.feed_access_enabled if control else True,
            current_access=current_access,
        )
    )


@router.put("/students/{student_id}/toggle", response_model=DataResponse[FeedAccessState])
async def toggle_student_feed_access(
    student_id: str,
    payload: FeedAccessToggle,
    db: AsyncSession = Depends(get_db),
    current_user: CurrentUser = Depends(
        require_user_types(UserType.PARENT, detail="Only parents can control feed access")
    ),
) -> DataResponse[FeedAccessState]:
    control = await service.set_feed_access(
        db,
        current_user.id,
        student_id,
        current_user.campus_id,
        payload.feed_access_enabled,
    )
    state = "enabled" if control.feed_access_enabled else "disabled"
    return DataResponse[FeedAccessState](
        message=f"Feed access {state} successfully",
        data=FeedAccessState(
            student_id=student_id,
            feed_access_enabled=control.feed_access_enabled,
            updated_at=control.updated_at,
        ),
    )
