import pytest
from httpx import AsyncClient


TEMPLATE = {
    "template_name": "Grade 5 annual",
    "class_id": "class-5",
    "academic_year": "2024-2025",
    "fee_structure": [
        {"category_id": "cat-1", "category_name": "Tuition", "amount": 12000, "due_date": "2024-07-01"},
        {"category_id": "cat-2", "category_name": "Library", "amount": 500, "is_mandatory": False},
    ],
    "total_amount": 12500,
    "validity_period": {"start_date": "2024-06-01", "end_date": "2025-05-31"},
}

STRUCTURE = {
    "class_id": "class-5",
    "class_name": "Grade 5",
    "academic_year": "2024-2025",
    "total_amount": 12000,
    "one_time_amount": 11000,
    "installments": [
        {"installment_number": 1, "amount": 6000, "due_date": "2024-07-01"},
        {"installment_number": 2, "amount": 6000, "due_date": "2024-12-01"},
    ],
    "vendor_id": "vendor-1",
}


@pytest.mark.asyncio
async def test_fee_template_crud(client: AsyncClient, admin_headers) -> None:
    response = await client.post("/api/v1/fee-templates", json=TEMPLATE, headers=admin_headers)
    assert response.status_code == 201
    template = response.json()
    assert template["validity_period"] == {"start_date": "2024-06-01", "end_date": "2025-05-31"}
    assert template["fee_structure"][0]["due_date"] == "2024-07-01"
    assert template["applicable_students"] == []

    by_class = await client.get("/api/v1/fee-templates/classes/class-5", headers=admin_headers)
    assert [t["id"] for t in by_class.json()] == [template["id"]]
    assert (await client.get("/api/v1/fee-templates/classes/class-6", headers=admin_headers)).json() == []

    response = await client.patch(
        f"/api/v1/fee-templates/{template['id']}",
        json={"auto_generate": True},
        headers=admin_headers,
    )
    assert response.json()["auto_generate"] is True

    response = await client.delete(f"/api/v1/fee-templates/{template['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert (await client.get("/api/v1/fee-templates", headers=admin_headers)).json() == []


@pytest.mark.asyncio
async def test_fee_template_rejects_inverted_validity(client: AsyncClient, admin_headers) -> None:
    payload = dict(TEMPLATE, validity_period={"start_date": "2025-01-01", "end_date": "2024-01-01"})
    response = await client.post("/api/v1/fee-templates", json=payload, headers=admin_headers)
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_class_fee_structure_tracks_author(client: AsyncClient, admin_headers) -> None:
    response = await client.post("/api/v1/class-fee-structures", json=STRUCTURE, headers=admin_headers)
    assert response.status_code == 201
    structure = response.json()
    assert structure["created_by"] == "admin-1"
    assert structure["vendor_split_percentage"] == 100

    response = await client.patch(
        f"/api/v1/class-fee-structures/{structure['id']}",
        json={"fee_description": "Includes books"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["updated_by"] == "admin-1"


@pytest.mark.asyncio
async def test_class_fee_structure_requires_unique_installments(client: AsyncClient, admin_headers) -> None:
    payload = dict(
        STRUCTURE,
        installments=[
            {"installment_number": 1, "amount": 6000},
            {"installment_number": 1, "amount": 6000},
        ],
    )
    response = await client.post("/api/v1/class-fee-structures", json=payload, headers=admin_headers)
    assert response.status_code == 400
    assert "unique" in response.json()["message"]


@pytest.mark.asyncio
async def test_active_structure_for_class(client: AsyncClient, admin_headers, student_headers) -> None:
    created = (await client.post("/api/v1/class-fee-structures", json=STRUCTURE, headers=admin_headers)).json()

    response = await client.get("/api/v1/class-fee-structures/classes/class-5", headers=student_headers)
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]

    missing = await client.get("/api/v1/class-fee-structures/classes/class-9", headers=student_headers)
    assert missing.status_code == 404
    assert missing.json()["message"] == "No active fee structure for this class"
