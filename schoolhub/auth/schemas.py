from typing import Optional

from pydantic import BaseModel


class CurrentUser(BaseModel):
    """Authenticated caller, resolved from the bearer token.

    campus_id is the tenant scope for every campus-bound record the caller
    creates or lists. A Super Admin has no campus of their own and passes
    ?campus_id= instead.
    """

    id: str
    user_type: str
    campus_id: Optional[str] = None
