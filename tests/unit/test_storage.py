from urllib.parse import urlparse, parse_qs
import uuid

import pytest
from botocore.exceptions import ClientError

from src.services.storage.s3 import (
    ObjectNotFoundError,
    S3Service,
    S3ServiceError,
    build_archive_key,
    build_photo_key,
    extension_for_content_type,
)


@pytest.mark.parametrize("content_type,expected", [
    ("image/jpeg", ".jpg"),
    ("image/png", ".png"),
    ("image/gif", ".gif"),
    ("image/webp", ".webp"),
    ("image/heic", ".heic"),
    ("image/heif", ".heif"),
    ("IMAGE/PNG", ".png"),
    ("image/png; charset=binary", ".png"),
    ("image/tiff", ".jpg"),
    ("", ".jpg"),
])
def test_extension_for_content_type(content_type, expected):
    assert extension_for_content_type(content_type) == expected


def test_object_keys():
    event_id = uuid.UUID("11111111-1111-1111-1111-111111111111")
    photo_id = uuid.UUID("22222222-2222-2222-2222-222222222222")

    assert build_photo_key(event_id, photo_id, "image/webp") == (
        "events/11111111-1111-1111-1111-111111111111/photos/22222222-2222-2222-2222-222222222222.webp"
    )
    assert build_archive_key(event_id, photo_id).endswith("/archives/22222222-2222-2222-2222-222222222222.zip")


def test_public_url(storage):
    assert storage.get_public_url("events/e/photos/p.jpg") == "https://cdn.example.com/events/e/photos/p.jpg"


def test_public_url_trims_slashes():
    service = S3Service(public_domain="https://cdn.example.com/")

    assert service.get_public_url("/a/b.png") == "https://cdn.example.com/a/b.png"


def test_presigned_upload_url_is_path_style(storage):
    url = storage.generate_presigned_upload_url("events/e/photos/p.png", "image/png", expires_in=900)
    parsed = urlparse(url)
    query = parse_qs(parsed.query)

    assert parsed.netloc == "test.r2.cloudflarestorage.com"
    assert parsed.path == "/test-bucket/events/e/photos/p.png"
    assert query["X-Amz-Expires"] == ["900"]
    assert query["X-Amz-Algorithm"] == ["AWS4-HMAC-SHA256"]


def test_presign_endpoint_differs_from_internal_endpoint():
    service = S3Service(
        endpoint_url="http://minio:9000",
        presign_endpoint_url="http://localhost:9000",
    )

    url = service.generate_presigned_download_url("a.zip", expires_in=3600, filename="event.zip")

    assert url.startswith("http://localhost:9000/test-bucket/a.zip")
    assert "response-content-disposition" in url
    assert service.s3_client is not service.presign_client


def test_presigned_delete_url(storage):
    url = storage.generate_presigned_delete_url("events/e/photos/p.png", expires_in=300)

    assert "X-Amz-Expires=300" in url


def test_download_missing_object_raises(storage, mocker):
    mocker.patch.object(
        storage.s3_client,
        "get_object",
        side_effect=ClientError({"Error": {"Code": "NoSuchKey", "Message": "missing"}}, "GetObject"),
    )

    with pytest.raises(ObjectNotFoundError, match="Object not found"):
        storage.download_file("missing.jpg")


def test_download_other_errors_are_not_missing_objects(storage, mocker):
    mocker.patch.object(
        storage.s3_client,
        "get_object",
        side_effect=ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, "GetObject"),
    )

    with pytest.raises(S3ServiceError) as exc_info:
        storage.download_file("secret.jpg")
    assert not isinstance(exc_info.value, ObjectNotFoundError)
