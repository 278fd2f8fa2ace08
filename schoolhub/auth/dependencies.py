from typing import Optional

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from schoolhub.auth.schemas import CurrentUser
from schoolhub.auth.security import decode_access_token
from schoolhub.core.enums import UserType


bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    scope_campus_id: Optional[str] = Query(
        None, alias="campus_id", description="Campus scope; honoured for Super Admin only"
    ),
) -> CurrentUser:
    """Resolve the caller from the access token claims."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError:
        raise credentials_exception

    user_id = payload.get("user_id") or payload.get("sub")
    user_type = payload.get("user_type")
    if not user_id or not user_type:
        raise credentials_exception

    token_campus_id = payload.get("campus_id")
    if user_type == UserType.SUPER_ADMIN.value:
        token_campus_id = scope_campus_id or token_campus_id

    return CurrentUser(id=str(user_id), user_type=user_type, campus_id=token_campus_id)
