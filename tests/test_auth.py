import pytest
from httpx import AsyncClient

from schoolhub.core.enums import UserType


CAMPUS = {"name": "Main Campus", "address": "123 Education Ave", "domain": "maincampus.edu"}


@pytest.mark.asyncio
async def test_missing_token_is_rejected(client: AsyncClient) -> None:
    response = await client.get("/api/v1/campuses")
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "No token provided"}


@pytest.mark.asyncio
async def test_invalid_token_is_rejected(client: AsyncClient) -> None:
    response = await client.get("/api/v1/campuses", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
    assert response.json()["message"] == "Could not validate credentials"


@pytest.mark.asyncio
async def test_wrong_role_gets_forbidden(client: AsyncClient, student_headers) -> None:
    response = await client.post("/api/v1/campuses", json=CAMPUS, headers=student_headers)
    assert response.status_code == 403
    assert response.json() == {"success": False, "message": "Insufficient permissions"}


@pytest.mark.asyncio
async def test_campus_scope_required(client: AsyncClient, auth_headers) -> None:
    headers = auth_headers(UserType.ADMIN, "admin-2", campus_id=None)
    response = await client.get("/api/v1/fees", headers=headers)
    assert response.status_code == 400
    assert response.json()["message"] == "campus_id is required"


@pytest.mark.asyncio
async def test_super_admin_scopes_with_query_param(client: AsyncClient, auth_headers) -> None:
    headers = auth_headers(UserType.SUPER_ADMIN, "root", campus_id=None)
    payload = {"user_id": "student-9", "items": [{"fee_type": "tuition", "amount": 100, "name": "T1"}]}

    response = await client.post("/api/v1/fees", params={"campus_id": "campus-42"}, json=payload, headers=headers)
    assert response.status_code == 201
    assert response.json()["campus_id"] == "campus-42"


@pytest.mark.asyncio
async def test_non_super_admin_cannot_switch_campus(client: AsyncClient, admin_headers) -> None:
    payload = {"user_id": "student-9", "items": [{"fee_type": "tuition", "amount": 100, "name": "T1"}]}

    response = await client.post("/api/v1/fees", params={"campus_id": "campus-42"}, json=payload, headers=admin_headers)
    assert response.status_code == 201
    assert response.json()["campus_id"] == "campus-1"


@pytest.mark.asyncio
async def test_validation_errors_use_error_envelope(client: AsyncClient, admin_headers) -> None:
    response = await client.post("/api/v1/campuses", json={"name": "No address"}, headers=admin_headers)
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert "address" in body["message"]
