from datetime import datetime
from typing import Optional

from pydantic import BaseModel, computed_field


class ApkResponse(BaseModel):
    id: str
    package_name: str
    version: str
    upload_date: datetime
    file_size: Optional[int] = None

    @computed_field
    @property
    def download_url(self) -> str:
        return f"/api/v1/android-apks/{self.id}/download"

    class Config:
        from_attributes = True
