import pytest
from httpx import AsyncClient


FEE_ITEMS = [
    {"fee_type": "tuition", "amount": 2000, "name": "Term 1 tuition"},
    {"fee_type": "transport", "amount": 1000, "name": "Bus"},
]


async def _create_fee(client: AsyncClient, headers, user_id: str = "student-1") -> dict:
    response = await client.post(
        "/api/v1/fees",
        json={"user_id": user_id, "items": FEE_ITEMS, "meta_data": {"term": 1}},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_fee_sums_items(client: AsyncClient, admin_headers) -> None:
    fee = await _create_fee(client, admin_headers)

    assert fee["due_amount"] == 3000
    assert fee["paid_amount"] == 0
    assert fee["payment_status"] == "unpaid"
    assert fee["is_paid"] is False
    assert fee["campus_id"] == "campus-1"
    assert len(fee["items"]) == 2


@pytest.mark.asyncio
async def test_fee_requires_items(client: AsyncClient, admin_headers) -> None:
    response = await client.post("/api/v1/fees", json={"user_id": "s", "items": []}, headers=admin_headers)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_patch_paid_amount_does_not_recompute_due(client: AsyncClient, admin_headers) -> None:
    fee = await _create_fee(client, admin_headers)

    response = await client.patch(f"/api/v1/fees/{fee['id']}", json={"paid_amount": 5000}, headers=admin_headers)
    assert response.status_code == 200
    updated = response.json()
    assert updated["paid_amount"] == 5000
    assert updated["due_amount"] == 3000
    assert updated["payment_status"] == "unpaid"


@pytest.mark.asyncio
async def test_mark_fee_paid(client: AsyncClient, admin_headers) -> None:
    fee = await _create_fee(client, admin_headers)

    response = await client.patch(
        f"/api/v1/fees/{fee['id']}",
        json={
            "paid_amount": 3000,
            "payment_status": "paid",
            "is_paid": True,
            "payment_mode": "upi",
            "payment_date": "2024-06-01T10:00:00",
        },
        headers=admin_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["is_paid"] is True
    assert body["payment_date"].startswith("2024-06-01T10:00:00")


@pytest.mark.asyncio
async def test_unpaid_fees_for_user(client: AsyncClient, admin_headers, student_headers) -> None:
    paid = await _create_fee(client, admin_headers)
    open_fee = await _create_fee(client, admin_headers)
    await _create_fee(client, admin_headers, user_id="student-2")
    await client.patch(f"/api/v1/fees/{paid['id']}", json={"is_paid": True}, headers=admin_headers)

    response = await client.get("/api/v1/fees/users/student-1", headers=admin_headers)
    assert response.status_code == 200
    assert [f["id"] for f in response.json()] == [open_fee["id"]]

    mine = await client.get("/api/v1/fees/me", headers=student_headers)
    assert [f["id"] for f in mine.json()] == [open_fee["id"]]


@pytest.mark.asyncio
async def test_unpaid_fees_for_unknown_user_is_empty(client: AsyncClient, admin_headers) -> None:
    response = await client.get("/api/v1/fees/users/nobody", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_delete_fee_hides_it_from_lists(client: AsyncClient, admin_headers) -> None:
    fee = await _create_fee(client, admin_headers)

    response = await client.delete(f"/api/v1/fees/{fee['id']}", headers=admin_headers)
    assert response.status_code == 200

    assert (await client.get("/api/v1/fees", headers=admin_headers)).json() == []
    assert (await client.get(f"/api/v1/fees/{fee['id']}", headers=admin_headers)).json()["is_deleted"] is True


@pytest.mark.asyncio
async def test_update_unknown_fee(client: AsyncClient, admin_headers) -> None:
    response = await client.patch("/api/v1/fees/missing", json={"paid_amount": 1}, headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Fee not updated"}
