from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from schoolhub.core.logging import get_logger
from schoolhub.core.schemas import HealthResponse
from schoolhub.db.session import ping_database

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness plus a database round-trip."""
    try:
        database = await ping_database()
    except (SQLAlchemyError, OSError) as exc:
        logger.warning("health_database_unreachable", error=str(exc))
        database = False
    return HealthResponse(status="ok", database=database)
