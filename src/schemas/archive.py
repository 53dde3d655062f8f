"""Bulk download archive schemas."""
from pydantic import BaseModel, ConfigDict
from datetime import datetime
from uuid import UUID
from typing import Optional

from src.models.enums import ArchiveStatus


class ArchiveResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    
    id: UUID
    event_id: UUID
    status: ArchiveStatus
    photo_count: int
    skipped_count: int = 0
    size: Optional[int] = None
    error: Optional[str] = None
    download_url: Optional[str] = None
    expires_at: Optional[datetime] = None
    created_at: datetime
    completed_at: Optional[datetime] = None
