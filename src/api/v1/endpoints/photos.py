"""Photo API endpoints: presigned uploads, confirmation and deletion."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from uuid import UUID

from src.api.deps import get_db, get_current_session, get_owner_token, get_storage_service
from src.app.exceptions import AuthenticationError
from src.services.photo_service import FileSpec, GuestContext, PhotoService
from src.services.storage.s3 import S3Service
from src.schemas.photo import (
    PhotoResponse,
    PhotoBulkDeleteRequest,
    PhotoBulkDeleteResponse,
    MessageResponse,
)
from src.schemas.upload import (
    UploadURLRequest,
    UploadURLResponse,
    BulkUploadRequest,
    BulkUploadResponse,
    ConfirmUploadRequest,
    BulkConfirmRequest,
)


router = APIRouter()


def build_photo_response(photo_data: dict) -> PhotoResponse:
    """Build PhotoResponse from a photo and its public URL."""
    photo = photo_data['photo']
    return PhotoResponse(
        id=photo.id,
        event_id=photo.event_id,
        uploader_name=photo.uploader_name,
        object_key=photo.object_key,
        url=photo_data['url'],
        file_size=photo.size,
        mime_type=photo.mime_type,
        created_at=photo.created_at,
        updated_at=photo.updated_at,
    )


def resolve_event_id(guest: GuestContext, requested: Optional[UUID]) -> UUID:
    """Uploads go to the session's event; a different event_id is refused."""
    if requested is not None and requested != guest.event_id:
        raise AuthenticationError("session does not belong to this event")
    return guest.event_id


@router.post('/upload-url', response_model=UploadURLResponse)
def generate_upload_url(
    request: UploadURLRequest,
    guest: GuestContext = Depends(get_current_session),
    db: Session = Depends(get_db),
    storage: S3Service = Depends(get_storage_service)
):
    """Request a presigned PUT URL (valid 15 minutes) for one photo."""
    event_id = resolve_event_id(guest, request.event_id)
    info = PhotoService(db, storage).generate_upload_url(
        event_id,
        guest.guest_name,
        request.content_type,
        session_id=guest.session_id
    )
    return UploadURLResponse(upload_url=info.upload_url, object_key=info.object_key, photo_id=info.photo_id)


@router.post('/upload-urls', response_model=BulkUploadResponse)
def generate_bulk_upload_urls(
    request: BulkUploadRequest,
    guest: GuestContext = Depends(get_current_session),
    db: Session = Depends(get_db),
    storage: S3Service = Depends(get_storage_service)
):
    """Request presigned URLs for up to 50 photos at once."""
    event_id = resolve_event_id(guest, request.event_id)
    files = [FileSpec(content_type=f.content_type, size=f.size) for f in request.files]
    result = PhotoService(db, storage).generate_bulk_upload_urls(
        event_id,
        guest.guest_name,
        files,
        session_id=guest.session_id
    )
    return BulkUploadResponse(
        uploads=[
            UploadURLResponse(upload_url=u.upload_url, object_key=u.object_key, photo_id=u.photo_id)
            for u in result.uploads
        ],
        batch_id=result.batch_id,
    )


@router.post('/confirm-bulk', response_model=MessageResponse)
def confirm_bulk_upload(
    request: BulkConfirmRequest,
    guest: GuestContext = Depends(get_current_session),
    db: Session = Depends(get_db),
    storage: S3Service = Depends(get_storage_service)
):
    """Record sizes for several uploads of the session's event; all or nothing."""
    PhotoService(db, storage).confirm_bulk_upload(request.confirmations, event_id=guest.event_id)
    return MessageResponse(message='bulk upload confirmed')


@router.post('/confirm/{photo_id}', response_model=MessageResponse)
def confirm_upload(
    photo_id: UUID,
    request: ConfirmUploadRequest,
    guest: GuestContext = Depends(get_current_session),
    db: Session = Depends(get_db),
    storage: S3Service = Depends(get_storage_service)
):
    """Record the final size of an upload in the session's event."""
    PhotoService(db, storage).confirm_upload(photo_id, request.file_size, event_id=guest.event_id)
    return MessageResponse(message='upload confirmed')


@router.post('/delete-bulk', response_model=PhotoBulkDeleteResponse)
def delete_bulk_photos(
    request: PhotoBulkDeleteRequest,
    owner_token: str = Depends(get_owner_token),
    db: Session = Depends(get_db),
    storage: S3Service = Depends(get_storage_service)
):
    """Organizer deletes several photos of their event (owner token as Bearer)."""
    count = PhotoService(db, storage).delete_bulk_photos(
        request.photo_ids,
        request.event_id,
        owner_token
    )
    return PhotoBulkDeleteResponse(message='photos deleted', count=count)


@router.delete('/{photo_id}', response_model=MessageResponse)
def delete_photo(
    photo_id: UUID,
    guest: GuestContext = Depends(get_current_session),
    db: Session = Depends(get_db),
    storage: S3Service = Depends(get_storage_service)
):
    """Guest deletes one of their own photos."""
    PhotoService(db, storage).delete_photo(photo_id, guest)
    return MessageResponse(message='photo deleted')
