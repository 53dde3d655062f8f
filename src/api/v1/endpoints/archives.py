"""Bulk download archive endpoints."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from uuid import UUID

from src.api.deps import get_db, get_storage_service
from src.services.photo_service import PhotoService
from src.services.storage.s3 import S3Service
from src.schemas.archive import ArchiveResponse


router = APIRouter()


@router.get('/{archive_id}', response_model=ArchiveResponse)
def get_archive(
    archive_id: UUID,
    db: Session = Depends(get_db),
    storage: S3Service = Depends(get_storage_service)
):
    """Archive build status; includes `download_url` once ready."""
    result = PhotoService(db, storage).get_archive(archive_id)
    archive = result['archive']
    return ArchiveResponse(
        id=archive.id,
        event_id=archive.event_id,
        status=archive.status,
        photo_count=archive.photo_count,
        skipped_count=archive.skipped_count,
        size=archive.size,
        error=archive.error,
        download_url=result['download_url'],
        expires_at=result['expires_at'],
        created_at=archive.created_at,
        completed_at=archive.completed_at,
    )
