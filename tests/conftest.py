import os
from typing import AsyncGenerator, Callable, Dict, Optional

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from schoolhub.auth.security import create_access_token
from schoolhub.core.enums import UserType
from schoolhub.db.session import Base, get_db
from schoolhub.main import app


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
CAMPUS_ID = "campus-1"


@pytest.fixture()
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Fresh in-memory database per test, shared by the app through get_db."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:

        async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
            yield session

        app.dependency_overrides[get_db] = override_get_db
        yield session

    app.dependency_overrides.pop(get_db, None)
    await engine.dispose()


@pytest.fixture()
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


def make_headers(user_type: UserType, user_id: str, campus_id: Optional[str] = CAMPUS_ID) -> Dict[str, str]:
    claims = {"user_id": user_id, "user_type": user_type.value}
    if campus_id:
        claims["campus_id"] = campus_id
    return {"Authorization": f"Bearer {create_access_token(subject=claims)}"}


@pytest.fixture()
def auth_headers() -> Callable[..., Dict[str, str]]:
    return make_headers


@pytest.fixture()
def admin_headers() -> Dict[str, str]:
    return make_headers(UserType.ADMIN, "admin-1")


@pytest.fixture()
def teacher_headers() -> Dict[str, str]:
    return make_headers(UserType.TEACHER, "teacher-1")


@pytest.fixture()
def student_headers() -> Dict[str, str]:
    return make_headers(UserType.STUDENT, "student-1")


@pytest.fixture()
def parent_headers() -> Dict[str, str]:
    return make_headers(UserType.PARENT, "parent-1")
