from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str = Field(..., alias="DATABASE_URL")
    create_tables_on_startup: bool = Field(True, alias="CREATE_TABLES_ON_STARTUP")

    jwt_secret_key: str = Field(..., alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(60, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    cors_origins: List[str] = Field(default_factory=lambda: ["*"], alias="CORS_ORIGINS")

    # Android APK store
    apk_storage_dir: str = Field("./storage/apks", alias="APK_STORAGE_DIR")
    apk_max_size_bytes: int = Field(100 * 1024 * 1024, alias="APK_MAX_SIZE_BYTES")

    # Countries / states / cities dataset (JSON list of countries with nested states and cities)
    locations_api_url: str = Field(
        "https://raw.githubusercontent.com/dr5hn/countries-states-cities-database/master/json/countries%2Bstates%2Bcities.json",
        alias="LOCATIONS_API_URL",
    )
    locations_timeout_seconds: float = Field(30.0, alias="LOCATIONS_TIMEOUT_SECONDS")
    # Local copy of the same dataset; read instead of LOCATIONS_API_URL when set
    locations_file: Optional[str] = Field(None, alias="LOCATIONS_FILE")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
