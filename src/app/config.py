"""Application configuration using Pydantic Settings (ENV ONLY)."""
from typing import List, Optional
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings (MUST come from environment variables)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = Field("SnapShare")
    ENVIRONMENT: str = Field("development")
    DEBUG: bool = Field(False)
    API_PREFIX: str = Field("/api")
    PORT: int = Field(8080)
    LOG_LEVEL: str = Field("INFO")
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    # Database
    DATABASE_URL: str = Field(...)
    DB_POOL_SIZE: int = Field(10)
    DB_MAX_OVERFLOW: int = Field(90)
    DB_ECHO: bool = Field(False)

    # Object storage (Cloudflare R2 / MinIO, S3 compatible)
    R2_ACCOUNT_ID: str = Field(...)
    R2_ACCESS_KEY: str = Field(...)
    R2_SECRET_ACCESS_KEY: str = Field(...)
    R2_BUCKET_NAME: str = Field(...)
    R2_PUBLIC_DOMAIN: str = Field(...)
    R2_ENDPOINT_URL: Optional[str] = Field(None)
    R2_PRESIGN_ENDPOINT_URL: Optional[str] = Field(None)

    @computed_field
    @property
    def STORAGE_ENDPOINT_URL(self) -> str:
        if self.R2_ENDPOINT_URL:
            return self.R2_ENDPOINT_URL
        if self.R2_ACCOUNT_ID == "minio":
            return "http://minio:9000"
        return f"https://{self.R2_ACCOUNT_ID}.r2.cloudflarestorage.com"

    @computed_field
    @property
    def STORAGE_PRESIGN_ENDPOINT_URL(self) -> str:
        # Presigned URLs are opened by browsers, so MinIO needs the host-facing port.
        if self.R2_PRESIGN_ENDPOINT_URL:
            return self.R2_PRESIGN_ENDPOINT_URL
        if self.R2_ACCOUNT_ID == "minio":
            return "http://localhost:9000"
        return self.STORAGE_ENDPOINT_URL

    # Redis / Celery
    REDIS_URL: str = Field("redis://127.0.0.1:6379/0")
    CELERY_BROKER_URL: Optional[str] = Field(None)
    CELERY_RESULT_BACKEND: Optional[str] = Field(None)
    SESSION_CLEANUP_INTERVAL_MINUTES: int = Field(60)

    @computed_field
    @property
    def BROKER_URL(self) -> str:
        return self.CELERY_BROKER_URL or self.REDIS_URL

    @computed_field
    @property
    def RESULT_BACKEND(self) -> str:
        return self.CELERY_RESULT_BACKEND or self.REDIS_URL


settings = Settings()
