from fastapi import Depends, HTTPException, status

from schoolhub.auth.dependencies import get_current_user
from schoolhub.auth.schemas import CurrentUser
from schoolhub.core.enums import UserType


def require_user_types(*user_types: UserType, detail: str = "Insufficient permissions"):
    """
    Dependency factory restricting an endpoint to the given user types.

    Example:
        Depends(require_user_types(UserType.PARENT, detail="Only parents can control feed access"))
    """
    allowed = {t.value for t in user_types}

    async def _checker(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if current_user.user_type not in allowed:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
        return current_user

    return _checker


require_admin = require_user_types(UserType.SUPER_ADMIN, UserType.ADMIN)


async def require_campus(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """Dependency: the request must carry a campus scope (token claim, or ?campus_id= for Super Admin)."""
    if not current_user.campus_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="campus_id is required",
        )
    return current_user
