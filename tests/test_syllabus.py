import pytest
from httpx import AsyncClient


SYLLABUS = {
    "subject_id": "subject-math",
    "name": "Mathematics Syllabus 2024",
    "description": "Algebra, geometry and calculus",
    "meta_data": {"academic_year": "2024-2025", "grade_level": "10"},
}


@pytest.mark.asyncio
async def test_create_and_list_syllabus(client: AsyncClient, teacher_headers, student_headers) -> None:
    response = await client.post("/api/v1/syllabus", json=SYLLABUS, headers=teacher_headers)
    assert response.status_code == 201
    syllabus = response.json()
    assert syllabus["campus_id"] == "campus-1"
    assert syllabus["is_active"] is True

    by_subject = await client.get("/api/v1/syllabus/subjects/subject-math", headers=student_headers)
    assert [s["id"] for s in by_subject.json()] == [syllabus["id"]]

    by_campus = await client.get("/api/v1/syllabus", headers=student_headers)
    assert [s["id"] for s in by_campus.json()] == [syllabus["id"]]


@pytest.mark.asyncio
async def test_students_cannot_write_syllabus(client: AsyncClient, student_headers) -> None:
    response = await client.post("/api/v1/syllabus", json=SYLLABUS, headers=student_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_inactive_syllabus_is_not_listed(client: AsyncClient, teacher_headers) -> None:
    syllabus = (await client.post("/api/v1/syllabus", json=SYLLABUS, headers=teacher_headers)).json()

    response = await client.patch(
        f"/api/v1/syllabus/{syllabus['id']}", json={"is_active": False}, headers=teacher_headers
    )
    assert response.status_code == 200

    assert (await client.get("/api/v1/syllabus", headers=teacher_headers)).json() == []
    assert (await client.get("/api/v1/syllabus/subjects/subject-math", headers=teacher_headers)).json() == []
    still_there = await client.get(f"/api/v1/syllabus/{syllabus['id']}", headers=teacher_headers)
    assert still_there.status_code == 200


@pytest.mark.asyncio
async def test_delete_syllabus(client: AsyncClient, teacher_headers) -> None:
    syllabus = (await client.post("/api/v1/syllabus", json=SYLLABUS, headers=teacher_headers)).json()

    response = await client.delete(f"/api/v1/syllabus/{syllabus['id']}", headers=teacher_headers)
    assert response.status_code == 200
    assert (await client.get("/api/v1/syllabus", headers=teacher_headers)).json() == []

    missing = await client.delete("/api/v1/syllabus/missing", headers=teacher_headers)
    assert missing.status_code == 404
    assert missing.json()["message"] == "Syllabus not deleted"
