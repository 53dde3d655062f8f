"""Upload schemas for the presigned photo upload flow."""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict
from uuid import UUID


def _validate_content_type(v: str) -> str:
    v = v.strip().lower()
    if not v.startswith('image/'):
        raise ValueError('Content type must be an image MIME type')
    if len(v) > 50:
        raise ValueError('Content type is too long')
    return v


class UploadURLRequest(BaseModel):
    """Request for a single presigned upload URL."""
    content_type: str = Field(..., min_length=1, description="MIME type, e.g. image/png")
    event_id: Optional[UUID] = Field(None, description="Must match the session's event when given")

    @field_validator('content_type')
    @classmethod
    def validate_content_type(cls, v: str) -> str:
        return _validate_content_type(v)


class UploadURLResponse(BaseModel):
    """Response with presigned URL for upload."""
    upload_url: str = Field(..., description="Presigned URL for the PUT request")
    object_key: str = Field(..., description="Object key the upload lands on")
    photo_id: UUID = Field(..., description="Photo record ID (for confirmation)")


class FileInfo(BaseModel):
    content_type: str = Field(..., min_length=1)
    size: int = Field(0, ge=0, description="Expected size in bytes, if known")

    @field_validator('content_type')
    @classmethod
    def validate_content_type(cls, v: str) -> str:
        return _validate_content_type(v)


class BulkUploadRequest(BaseModel):
    """Request for multiple presigned URLs."""
    files: List[FileInfo] = Field(..., min_length=1, max_length=50, description="Max 50 files")
    event_id: Optional[UUID] = None


class BulkUploadResponse(BaseModel):
    uploads: List[UploadURLResponse]
    batch_id: str


class ConfirmUploadRequest(BaseModel):
    file_size: int = Field(..., ge=1, description="Uploaded size in bytes")


class BulkConfirmRequest(BaseModel):
    """Sizes keyed by photo ID."""
    confirmations: Dict[UUID, int] = Field(..., min_length=1)

    @field_validator('confirmations')
    @classmethod
    def validate_sizes(cls, v: Dict[UUID, int]) -> Dict[UUID, int]:
        if any(size < 1 for size in v.values()):
            raise ValueError('File sizes must be positive')
        return v
