from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # make it absolute so reload/CWD doesn't break it
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Catalog Back Office", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path = Field(
        default=Path(__file__).resolve().parents[1] / "logs",
        validation_alias="LOG_DIR",
    )

    # API
    api_host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(default=8000, validation_alias="API_PORT")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        validation_alias="CORS_ORIGINS",
    )

    # Catalog API (records and image uploads live on the same host)
    catalog_api_url: str = Field(
        default="http://localhost:5000",
        validation_alias="CATALOG_API_URL",
    )
    catalog_api_token: str | None = Field(
        default=None,
        validation_alias="CATALOG_API_TOKEN",
        description="Bearer token of the admin account used for record writes.",
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        validation_alias="REQUEST_TIMEOUT_SECONDS",
    )
    upload_timeout_seconds: float = Field(
        default=30.0,
        validation_alias="UPLOAD_TIMEOUT_SECONDS",
        description="Image uploads carry up to 5 MiB and get a longer timeout.",
    )


# Global settings instance
settings = Settings()
