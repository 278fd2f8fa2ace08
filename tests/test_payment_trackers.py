import pytest
from httpx import AsyncClient


TRACKER = {
    "student_id": "student-1",
    "class_id": "class-5",
    "fee_structure_id": "structure-1",
    "academic_year": "2024-2025",
    "total_due": 12000,
}


async def _create_tracker(client: AsyncClient, headers) -> dict:
    response = await client.post("/api/v1/payment-trackers", json=TRACKER, headers=headers)
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_new_tracker_is_pending(client: AsyncClient, admin_headers) -> None:
    tracker = await _create_tracker(client, admin_headers)
    assert tracker["payment_status"] == "PENDING"
    assert tracker["total_paid"] == 0
    assert tracker["installments_paid"] == []
    assert tracker["one_time_paid"] is False


@pytest.mark.asyncio
async def test_installments_move_tracker_to_completed(client: AsyncClient, admin_headers) -> None:
    tracker = await _create_tracker(client, admin_headers)
    url = f"/api/v1/payment-trackers/{tracker['id']}/installments"

    response = await client.post(url, json={"installment_number": 2, "amount": 6000}, headers=admin_headers)
    assert response.status_code == 200
    body = response.json()
    assert body["payment_status"] == "PARTIAL"
    assert body["installments_paid"] == [2]

    response = await client.post(url, json={"installment_number": 1, "amount": 6000}, headers=admin_headers)
    body = response.json()
    assert body["payment_status"] == "COMPLETED"
    assert body["installments_paid"] == [1, 2]
    assert body["total_paid"] == 12000


@pytest.mark.asyncio
async def test_installment_cannot_be_paid_twice(client: AsyncClient, admin_headers) -> None:
    tracker = await _create_tracker(client, admin_headers)
    url = f"/api/v1/payment-trackers/{tracker['id']}/installments"

    await client.post(url, json={"installment_number": 1, "amount": 6000}, headers=admin_headers)
    response = await client.post(url, json={"installment_number": 1, "amount": 6000}, headers=admin_headers)
    assert response.status_code == 409
    assert response.json()["message"] == "Installment 1 is already paid"


@pytest.mark.asyncio
async def test_one_time_payment(client: AsyncClient, admin_headers) -> None:
    tracker = await _create_tracker(client, admin_headers)
    url = f"/api/v1/payment-trackers/{tracker['id']}/one-time"

    response = await client.post(url, json={"amount": 12000}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["payment_status"] == "COMPLETED"
    assert response.json()["one_time_paid"] is True

    again = await client.post(url, json={"amount": 12000}, headers=admin_headers)
    assert again.status_code == 409


@pytest.mark.asyncio
async def test_payment_on_unknown_tracker(client: AsyncClient, admin_headers) -> None:
    response = await client.post(
        "/api/v1/payment-trackers/missing/one-time", json={"amount": 10}, headers=admin_headers
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_trackers_by_student(client: AsyncClient, admin_headers) -> None:
    tracker = await _create_tracker(client, admin_headers)

    response = await client.get("/api/v1/payment-trackers/students/student-1", headers=admin_headers)
    assert [t["id"] for t in response.json()] == [tracker["id"]]

    await client.patch(
        f"/api/v1/payment-trackers/{tracker['id']}", json={"payment_status": "OVERDUE"}, headers=admin_headers
    )
    overdue = (await client.get(f"/api/v1/payment-trackers/{tracker['id']}", headers=admin_headers)).json()
    assert overdue["payment_status"] == "OVERDUE"
