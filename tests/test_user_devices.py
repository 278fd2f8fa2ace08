import pytest
from httpx import AsyncClient

from schoolhub.api.v1.user_devices import service


DEVICE = {
    "device_id": "device-abc",
    "device_name": "Pixel 8",
    "device_type": "mobile",
    "platform": "android",
    "app_version": "2.4.1",
    "push_token": "token-1",
}


@pytest.mark.asyncio
async def test_register_device(client: AsyncClient, student_headers) -> None:
    response = await client.post("/api/v1/user-devices", json=DEVICE, headers=student_headers)
    assert response.status_code == 200
    device = response.json()
    assert device["user_id"] == "student-1"
    assert device["campus_id"] == "campus-1"
    assert device["is_active"] is True
    assert device["push_token"] == "token-1"
    assert device["user_agent"]


@pytest.mark.asyncio
async def test_reregister_keeps_push_token_and_reactivates(client: AsyncClient, student_headers) -> None:
    first = (await client.post("/api/v1/user-devices", json=DEVICE, headers=student_headers)).json()
    await client.delete("/api/v1/user-devices/device-abc", headers=student_headers)

    payload = dict(DEVICE, app_version="2.5.0")
    payload.pop("push_token")
    second = (await client.post("/api/v1/user-devices", json=payload, headers=student_headers)).json()

    assert second["id"] == first["id"]
    assert second["push_token"] == "token-1"
    assert second["app_version"] == "2.5.0"
    assert second["is_active"] is True


@pytest.mark.asyncio
async def test_invalid_device_type(client: AsyncClient, student_headers) -> None:
    response = await client.post("/api/v1/user-devices", json=dict(DEVICE, device_type="watch"), headers=student_headers)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_list_devices_most_recent_first(client: AsyncClient, student_headers) -> None:
    await client.post("/api/v1/user-devices", json=DEVICE, headers=student_headers)
    await client.post("/api/v1/user-devices", json=dict(DEVICE, device_id="laptop", device_type="web"), headers=student_headers)
    await client.put("/api/v1/user-devices/device-abc/activity", headers=student_headers)

    devices = (await client.get("/api/v1/user-devices", headers=student_headers)).json()
    assert [d["device_id"] for d in devices] == ["device-abc", "laptop"]

    count = (await client.get("/api/v1/user-devices/active-count", headers=student_headers)).json()
    assert count == {"active_devices": 2}


@pytest.mark.asyncio
async def test_push_token_and_sync(client: AsyncClient, student_headers) -> None:
    await client.post("/api/v1/user-devices", json=DEVICE, headers=student_headers)

    updated = await client.put(
        "/api/v1/user-devices/device-abc/push-token", json={"push_token": "token-2"}, headers=student_headers
    )
    assert updated.json()["push_token"] == "token-2"

    synced = (await client.put(
        "/api/v1/user-devices/device-abc/sync", json={"last_message_seq": 41}, headers=student_headers
    )).json()
    assert synced["last_sync_at"] is not None
    assert synced["last_message_seq"] == 41


@pytest.mark.asyncio
async def test_deactivate_unknown_device(client: AsyncClient, student_headers) -> None:
    response = await client.delete("/api/v1/user-devices/nope", headers=student_headers)
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Device not found"}


@pytest.mark.asyncio
async def test_deactivate_device(client: AsyncClient, student_headers) -> None:
    await client.post("/api/v1/user-devices", json=DEVICE, headers=student_headers)

    response = await client.delete("/api/v1/user-devices/device-abc", headers=student_headers)
    assert response.status_code == 200

    devices = (await client.get("/api/v1/user-devices", headers=student_headers)).json()
    assert devices[0]["is_active"] is False


@pytest.mark.asyncio
async def test_concurrent_registration_updates_existing(client: AsyncClient, student_headers, monkeypatch) -> None:
    first = (await client.post("/api/v1/user-devices", json=DEVICE, headers=student_headers)).json()

    real_find = service._find_device
    calls = []

    async def _miss_first(*args, **kwargs):
        calls.append(args)
        if len(calls) == 1:
            return None
        return await real_find(*args, **kwargs)

    monkeypatch.setattr(service, "_find_device", _miss_first)
    payload = dict(DEVICE, app_version="3.0.0")
    payload.pop("push_token")
    response = await client.post("/api/v1/user-devices", json=payload, headers=student_headers)
    assert response.status_code == 200
    device = response.json()
    assert device["id"] == first["id"]
    assert device["app_version"] == "3.0.0"
    assert device["push_token"] == "token-1"

    listed = (await client.get("/api/v1/user-devices", headers=student_headers)).json()
    assert len(listed) == 1
