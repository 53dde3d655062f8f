"""Photo schemas."""
from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from uuid import UUID
from typing import List


class PhotoResponse(BaseModel):
    """Photo metadata with its public URL."""
    model_config = ConfigDict(from_attributes=True)
    
    id: UUID
    event_id: UUID
    uploader_name: str
    object_key: str
    url: str = Field(..., description="Public URL of the object")
    file_size: int = Field(..., description="Bytes; 0 until the upload is confirmed")
    mime_type: str
    created_at: datetime
    updated_at: datetime


class PhotoListResponse(BaseModel):
    photos: List[PhotoResponse]
    count: int


class PhotoBulkDeleteRequest(BaseModel):
    """Organizer bulk delete; the owner token goes in the Authorization header."""
    event_id: UUID
    photo_ids: List[UUID] = Field(..., min_length=1)


class PhotoBulkDeleteResponse(BaseModel):
    message: str
    count: int


class MessageResponse(BaseModel):
    message: str
