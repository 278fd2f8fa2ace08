from pathlib import Path
from typing import List

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from fastapi.responses import FileResponse
from sqlalchemy.ext.asyncio import AsyncSession

from schoolhub.auth.dependencies import get_current_user
from schoolhub.auth.rbac import require_admin
from schoolhub.core.exceptions import ServiceError
from schoolhub.core.schemas import DataResponse, MessageResponse
from schoolhub.db.session import get_db

from .schemas import ApkResponse
from . import service

router = APIRouter(prefix="/api/v1/android-apks", tags=["android-apks"])


@router.post(
    "",
    response_model=DataResponse[ApkResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def upload_apk(
    file: UploadFile = File(...),
    package_name: str = Form(...),
    version: str = Form(...),
    db: AsyncSession = Depends(get_db),
) -> DataResponse[ApkResponse]:
    """Upload an APK (multipart: file, package_name, version)."""
    try:
        apk = await service.upload_apk(db, file, package_name, version)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return DataResponse[ApkResponse](message="APK uploaded successfully", data=apk)


@router.get("", response_model=DataResponse[List[ApkResponse]], dependencies=[Depends(get_current_user)])
async def list_apks(db: AsyncSession = Depends(get_db)) -> DataResponse[List[ApkResponse]]:
    apks = await service.list_apks(db)
    return DataResponse[List[ApkResponse]](message="APK files retrieved successfully", data=apks)


@router.get(
    "/packages/{package_name}",
    response_model=DataResponse[List[ApkResponse]],
    dependencies=[Depends(get_current_user)],
)
async def list_apks_for_package(package_name: str, db: AsyncSession = Depends(get_db)) -> DataResponse[List[ApkResponse]]:
    apks = await service.list_apks_by_package(db, package_name)
    if not apks:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No APK found with this package name")
    return DataResponse[List[ApkResponse]](message="APK files retrieved successfully", data=apks)


@router.get(
    "/packages/{package_name}/latest",
    response_model=DataResponse[ApkResponse],
    dependencies=[Depends(get_current_user)],
)
async def get_latest_apk(package_name: str, db: AsyncSession = Depends(get_db)) -> DataResponse[ApkResponse]:
    apk = await service.get_latest_apk(db, package_name)
    if not apk:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No APK found with this package name")
    return DataResponse[ApkResponse](message="Latest APK retrieved successfully", data=apk)


@router.get(
    "/packages/{package_name}/versions/{version}",
    response_model=DataResponse[ApkResponse],
    dependencies=[Depends(get_current_user)],
)
async def get_apk_version(package_name: str, version: str, db: AsyncSession = Depends(get_db)) -> DataResponse[ApkResponse]:
    apk = await service.get_apk_by_package_and_version(db, package_name, version)
    if not apk:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="APK not found")
    return DataResponse[ApkResponse](message="APK retrieved successfully", data=apk)


@router.get("/{apk_id}/download", dependencies=[Depends(get_current_user)])
async def download_apk(apk_id: str, db: AsyncSession = Depends(get_db)) -> FileResponse:
    try:
        apk = await service.get_apk_file(db, apk_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    if not Path(apk.file_path).is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="APK file is missing from storage")
    return FileResponse(
        apk.file_path,
        media_type=service.APK_CONTENT_TYPE,
        filename=f"{apk.package_name}-{apk.version}.apk",
    )


@router.delete("/{apk_id}", response_model=MessageResponse, dependencies=[Depends(require_admin)])
async def delete_apk(apk_id: str, db: AsyncSession = Depends(get_db)) -> MessageResponse:
    try:
        await service.delete_apk(db, apk_id)
    except ServiceError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    return MessageResponse(message="APK deleted successfully")
