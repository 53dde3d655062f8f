import pytest
from pydantic import ValidationError

from src.app.config import Settings

REQUIRED = dict(
    DATABASE_URL="sqlite://",
    R2_ACCESS_KEY="key",
    R2_SECRET_ACCESS_KEY="secret",
    R2_BUCKET_NAME="photos",
    R2_PUBLIC_DOMAIN="https://cdn.example.com",
)


def test_r2_endpoint_from_account_id():
    settings = Settings(_env_file=None, R2_ACCOUNT_ID="abc123", **REQUIRED)

    assert settings.STORAGE_ENDPOINT_URL == "https://abc123.r2.cloudflarestorage.com"
    assert settings.STORAGE_PRESIGN_ENDPOINT_URL == settings.STORAGE_ENDPOINT_URL


def test_minio_uses_host_facing_presign_endpoint():
    settings = Settings(_env_file=None, R2_ACCOUNT_ID="minio", **REQUIRED)

    assert settings.STORAGE_ENDPOINT_URL == "http://minio:9000"
    assert settings.STORAGE_PRESIGN_ENDPOINT_URL == "http://localhost:9000"


def test_explicit_endpoints_win():
    settings = Settings(
        _env_file=None,
        R2_ACCOUNT_ID="minio",
        R2_ENDPOINT_URL="http://storage:9000",
        R2_PRESIGN_ENDPOINT_URL="https://files.example.com",
        **REQUIRED,
    )

    assert settings.STORAGE_ENDPOINT_URL == "http://storage:9000"
    assert settings.STORAGE_PRESIGN_ENDPOINT_URL == "https://files.example.com"


def test_broker_falls_back_to_redis_url():
    settings = Settings(_env_file=None, R2_ACCOUNT_ID="x", REDIS_URL="redis://cache:6379/1", **REQUIRED)

    assert settings.BROKER_URL == "redis://cache:6379/1"
    assert settings.RESULT_BACKEND == "redis://cache:6379/1"


def test_missing_database_url_fails(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    values = {k: v for k, v in REQUIRED.items() if k != "DATABASE_URL"}

    with pytest.raises(ValidationError):
        Settings(_env_file=None, R2_ACCOUNT_ID="x", **values)
