import pytest
from httpx import AsyncClient

from schoolhub.core.enums import UserType
from schoolhub.main import app


CAMPUS = {
    "name": "Main Campus",
    "address": "123 Education Ave, City",
    "domain": "MainCampus.edu",
    "meta_data": {"region": "North", "capacity": 1000},
}


async def _create_campus(client: AsyncClient, headers) -> dict:
    response = await client.post("/api/v1/campuses", json=CAMPUS, headers=headers)
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_and_get_campus(client: AsyncClient, admin_headers) -> None:
    created = await _create_campus(client, admin_headers)

    assert created["id"]
    assert created["name"] == "Main Campus"
    assert created["domain"] == "maincampus.edu"
    assert created["meta_data"] == {"region": "North", "capacity": 1000}
    assert created["is_deleted"] is False
    assert created["is_active"] is True
    assert created["created_at"] == created["updated_at"]

    response = await client.get(f"/api/v1/campuses/{created['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.asyncio
async def test_get_unknown_campus_returns_404(client: AsyncClient, admin_headers) -> None:
    response = await client.get("/api/v1/campuses/does-not-exist", headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Campus not found"}


@pytest.mark.asyncio
async def test_update_campus_restamps_updated_at(client: AsyncClient, admin_headers) -> None:
    created = await _create_campus(client, admin_headers)

    response = await client.patch(
        f"/api/v1/campuses/{created['id']}",
        json={"address": "42 New Road"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["address"] == "42 New Road"
    assert updated["name"] == created["name"]
    assert updated["updated_at"] > created["updated_at"]
    assert updated["created_at"] == created["created_at"]


@pytest.mark.asyncio
async def test_update_unknown_campus(client: AsyncClient, admin_headers) -> None:
    response = await client.patch("/api/v1/campuses/missing", json={"name": "X"}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Campus not updated"


@pytest.mark.asyncio
async def test_delete_campus_is_soft(client: AsyncClient, admin_headers) -> None:
    created = await _create_campus(client, admin_headers)
    other = await _create_campus(client, admin_headers)

    response = await client.delete(f"/api/v1/campuses/{created['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Campus deleted successfully"}

    listed = (await client.get("/api/v1/campuses", headers=admin_headers)).json()
    assert [c["id"] for c in listed] == [other["id"]]

    kept = (await client.get(f"/api/v1/campuses/{created['id']}", headers=admin_headers)).json()
    assert kept["is_deleted"] is True
    assert kept["is_active"] is False


@pytest.mark.asyncio
async def test_delete_unknown_campus(client: AsyncClient, admin_headers) -> None:
    response = await client.delete("/api/v1/campuses/missing", headers=admin_headers)
    assert response.status_code == 404
    assert response.json()["message"] == "Campus not deleted"


@pytest.mark.asyncio
async def test_list_campuses_newest_first(client: AsyncClient, admin_headers) -> None:
    first = await _create_campus(client, admin_headers)
    second = await _create_campus(client, admin_headers)
    await client.patch(f"/api/v1/campuses/{first['id']}", json={"name": "Renamed"}, headers=admin_headers)

    listed = (await client.get("/api/v1/campuses", headers=admin_headers)).json()
    assert [c["id"] for c in listed] == [first["id"], second["id"]]


@pytest.mark.asyncio
async def test_campus_path_id_is_independent_of_scope_query(client: AsyncClient, admin_headers, auth_headers) -> None:
    campus = await _create_campus(client, admin_headers)
    root = auth_headers(UserType.SUPER_ADMIN, "root", campus_id=None)

    response = await client.get(
        f"/api/v1/campuses/{campus['id']}", params={"campus_id": "campus-other"}, headers=root
    )
    assert response.status_code == 200
    assert response.json()["id"] == campus["id"]

    response = await client.patch(
        f"/api/v1/campuses/{campus['id']}", params={"campus_id": "campus-other"}, json={"name": "Renamed"}, headers=root
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Renamed"


def test_app_exposes_campus_item_routes() -> None:
    paths = {route.path for route in app.routes}
    assert "/api/v1/campuses/{campus_id}" in paths
