from pathlib import Path

import pytest
from httpx import AsyncClient

from schoolhub.api.v1.android_apks import service
from schoolhub.core.config import settings


APK_TYPE = "application/vnd.android.package-archive"


@pytest.fixture(autouse=True)
def apk_storage(tmp_path, monkeypatch) -> Path:
    monkeypatch.setattr(settings, "apk_storage_dir", str(tmp_path))
    return tmp_path


async def _upload(client: AsyncClient, headers, version: str = "1.0.0", content: bytes = b"PK\x03\x04apk-bytes"):
    return await client.post(
        "/api/v1/android-apks",
        files={"file": ("school.apk", content, APK_TYPE)},
        data={"package_name": "com.school.app", "version": version},
        headers=headers,
    )


@pytest.mark.asyncio
async def test_upload_apk(client: AsyncClient, admin_headers, apk_storage: Path) -> None:
    response = await _upload(client, admin_headers)
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "APK uploaded successfully"
    apk = body["data"]
    assert apk["package_name"] == "com.school.app"
    assert apk["file_size"] == len(b"PK\x03\x04apk-bytes")
    assert apk["download_url"] == f"/api/v1/android-apks/{apk['id']}/download"
    assert (apk_storage / "com.school.app-1.0.0.apk").is_file()


@pytest.mark.asyncio
async def test_duplicate_version_conflicts(client: AsyncClient, admin_headers) -> None:
    await _upload(client, admin_headers)
    response = await _upload(client, admin_headers)
    assert response.status_code == 409
    assert response.json()["message"] == "APK with this package name and version already exists"


@pytest.mark.asyncio
async def test_rejects_non_apk(client: AsyncClient, admin_headers) -> None:
    response = await client.post(
        "/api/v1/android-apks",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        data={"package_name": "com.school.app", "version": "1.0.0"},
        headers=admin_headers,
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid file type. Only APK files are allowed"


@pytest.mark.asyncio
async def test_rejects_oversized_file(client: AsyncClient, admin_headers, monkeypatch, apk_storage: Path) -> None:
    monkeypatch.setattr(settings, "apk_max_size_bytes", 8)
    response = await _upload(client, admin_headers, content=b"x" * 64)
    assert response.status_code == 400
    assert "too large" in response.json()["message"]
    assert list(apk_storage.iterdir()) == []


@pytest.mark.asyncio
async def test_only_admins_upload(client: AsyncClient, student_headers) -> None:
    response = await _upload(client, student_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_lookup_by_package_and_version(client: AsyncClient, admin_headers, student_headers) -> None:
    v1 = (await _upload(client, admin_headers, "1.0.0")).json()["data"]
    v2 = (await _upload(client, admin_headers, "1.1.0")).json()["data"]

    listed = (await client.get("/api/v1/android-apks", headers=student_headers)).json()["data"]
    assert {a["id"] for a in listed} == {v1["id"], v2["id"]}

    by_package = (await client.get("/api/v1/android-apks/packages/com.school.app", headers=student_headers)).json()
    assert len(by_package["data"]) == 2

    latest = (await client.get("/api/v1/android-apks/packages/com.school.app/latest", headers=student_headers)).json()
    assert latest["data"]["version"] == "1.1.0"

    exact = await client.get("/api/v1/android-apks/packages/com.school.app/versions/1.0.0", headers=student_headers)
    assert exact.json()["data"]["id"] == v1["id"]

    missing = await client.get("/api/v1/android-apks/packages/com.other.app/latest", headers=student_headers)
    assert missing.status_code == 404
    assert missing.json()["message"] == "No APK found with this package name"


@pytest.mark.asyncio
async def test_download_and_delete(client: AsyncClient, admin_headers, apk_storage: Path) -> None:
    apk = (await _upload(client, admin_headers)).json()["data"]

    download = await client.get(apk["download_url"], headers=admin_headers)
    assert download.status_code == 200
    assert download.content == b"PK\x03\x04apk-bytes"
    assert download.headers["content-type"] == APK_TYPE

    response = await client.delete(f"/api/v1/android-apks/{apk['id']}", headers=admin_headers)
    assert response.status_code == 200
    assert not (apk_storage / "com.school.app-1.0.0.apk").exists()

    gone = await client.get(apk["download_url"], headers=admin_headers)
    assert gone.status_code == 404
    assert gone.json()["message"] == "APK not found"


@pytest.mark.asyncio
async def test_racing_duplicate_keeps_stored_file(client: AsyncClient, admin_headers, monkeypatch, apk_storage: Path) -> None:
    first = (await _upload(client, admin_headers, content=b"ORIGINAL")).json()["data"]

    async def _miss(*args, **kwargs):
        return None

    # Second upload slips past the duplicate lookup and hits the unique constraint.
    with monkeypatch.context() as patched:
        patched.setattr(service.documents, "find_one", _miss)
        response = await _upload(client, admin_headers, content=b"LOSER-BYTES")
    assert response.status_code == 409
    assert response.json()["message"] == "APK with this package name and version already exists"

    download = await client.get(first["download_url"], headers=admin_headers)
    assert download.content == b"ORIGINAL"
    assert len(download.content) == first["file_size"]
    assert sorted(p.name for p in apk_storage.iterdir()) == ["com.school.app-1.0.0.apk"]
