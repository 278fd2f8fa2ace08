"""Android APK uploads: validation, storage on disk, lookup and removal."""

import re
import secrets
from typing import List, Optional

from fastapi import UploadFile, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.core.config import settings
from schoolhub.core.exceptions import ConflictError, NotFoundError, ServiceError
from schoolhub.core.logging import get_logger
from schoolhub.core.models import AndroidApk
from schoolhub.db import documents
from schoolhub.db.defaults import utcnow
from schoolhub.utils import apk_storage

from .schemas import ApkResponse

logger = get_logger(__name__)

APK_CONTENT_TYPE = "application/vnd.android.package-archive"
_SAFE_NAME = re.compile(r"^[A-Za-z0-9._-]+$")


def _too_large_message() -> str:
    limit = settings.apk_max_size_bytes
    if limit >= 1024 * 1024:
        return f"File too large. Maximum size allowed is {limit // (1024 * 1024)}MB"
    return f"File too large. Maximum size allowed is {limit} bytes"


def _validate_upload(upload: UploadFile, package_name: str, version: str) -> None:
    if not package_name or not version:
        raise ServiceError("Package name and version are required", status.HTTP_400_BAD_REQUEST)
    if not _SAFE_NAME.match(package_name) or not _SAFE_NAME.match(version):
        raise ServiceError("Invalid package name or version", status.HTTP_400_BAD_REQUEST)
    filename = upload.filename or ""
    if not filename.lower().endswith(".apk") and upload.content_type != APK_CONTENT_TYPE:
        raise ServiceError("Invalid file type. Only APK files are allowed", status.HTTP_400_BAD_REQUEST)
    if upload.size is not None and upload.size > settings.apk_max_size_bytes:
        raise ServiceError(_too_large_message(), status.HTTP_400_BAD_REQUEST)


async def upload_apk(
    db: AsyncSession,
    upload: UploadFile,
    package_name: str,
    version: str,
) -> ApkResponse:
    package_name = package_name.strip()
    version = version.strip()
    _validate_upload(upload, package_name, version)

    if await documents.find_one(db, AndroidApk, {"package_name": package_name, "version": version}, order_by=()):
        raise ConflictError("APK with this package name and version already exists")

    # Bytes land under a private name and only replace the final file once the row exists.
    file_name = f"{package_name}-{version}.apk"
    temp_name = f"{file_name}.{secrets.token_hex(8)}.part"
    try:
        size = await apk_storage.write(temp_name, upload.file, max_bytes=settings.apk_max_size_bytes)
    except apk_storage.FileTooLargeError:
        raise ServiceError(_too_large_message(), status.HTTP_400_BAD_REQUEST)
    temp_path = str(apk_storage.path_for(temp_name))

    try:
        apk = await documents.create(
            db,
            AndroidApk,
            package_name=package_name,
            version=version,
            file_path=str(apk_storage.path_for(file_name)),
            file_size=size,
            upload_date=utcnow(),
        )
    except IntegrityError:
        await db.rollback()
        await apk_storage.delete(temp_path)
        raise ConflictError("APK with this package name and version already exists")
    except Exception:
        await apk_storage.delete(temp_path)
        raise

    try:
        await apk_storage.promote(temp_name, file_name)
    except OSError:
        await documents.remove_by_id(db, AndroidApk, apk.id)
        await apk_storage.delete(temp_path)
        raise

    logger.info("apk_uploaded", apk_id=apk.id, package_name=package_name, version=version, file_size=size)
    return ApkResponse.model_validate(apk)


async def list_apks(db: AsyncSession) -> List[ApkResponse]:
    rows = await documents.find(db, AndroidApk, order_by=("-upload_date",))
    return [ApkResponse.model_validate(a) for a in rows]


async def list_apks_by_package(db: AsyncSession, package_name: str) -> List[ApkResponse]:
    rows = await documents.find(db, AndroidApk, {"package_name": package_name}, order_by=("-upload_date",))
    return [ApkResponse.model_validate(a) for a in rows]


async def get_apk_by_package_and_version(db: AsyncSession, package_name: str, version: str) -> Optional[ApkResponse]:
    apk = await documents.find_one(
        db, AndroidApk, {"package_name": package_name, "version": version}, order_by=()
    )
    return ApkResponse.model_validate(apk) if apk else None


async def get_latest_apk(db: AsyncSession, package_name: str) -> Optional[ApkResponse]:
    """Most recently uploaded build of ``package_name``."""
    apk = await documents.find_one(db, AndroidApk, {"package_name": package_name}, order_by=("-upload_date",))
    return ApkResponse.model_validate(apk) if apk else None


async def get_apk_file(db: AsyncSession, apk_id: str) -> AndroidApk:
    apk = await documents.find_by_id(db, AndroidApk, apk_id)
    if not apk:
        raise NotFoundError("APK not found")
    return apk


async def delete_apk(db: AsyncSession, apk_id: str) -> None:
    """Remove the record and its stored file."""
    apk = await documents.find_by_id(db, AndroidApk, apk_id)
    if not apk:
        raise NotFoundError("APK not found")
    file_path = apk.file_path
    await documents.remove_by_id(db, AndroidApk, apk_id)
    await apk_storage.delete(file_path)
    logger.info("apk_deleted", apk_id=apk_id, package_name=apk.package_name, version=apk.version)
