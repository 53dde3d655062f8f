"""Photo registrar: presigned uploads, confirmations, listing and deletion."""
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, List, Optional
from uuid import UUID, uuid4
import logging

from sqlalchemy.orm import Session

from src.app.exceptions import AuthenticationError, BatchTooLargeError, NotFoundError, UpstreamError
from src.core.security import utcnow, verify_owner_token
from src.models.archive import Archive
from src.models.enums import ArchiveStatus
from src.models.event import Event
from src.models.photo import Photo
from src.repositories.archive_repo import ArchiveRepository
from src.repositories.event_repo import EventRepository
from src.repositories.photo_repo import PhotoRepository
from src.services.storage.s3 import S3Service, build_archive_key, build_photo_key

logger = logging.getLogger(__name__)

UPLOAD_URL_EXPIRY = timedelta(minutes=15)
DELETE_URL_EXPIRY = timedelta(minutes=5)
DOWNLOAD_URL_EXPIRY = timedelta(hours=1)
MAX_BULK_FILES = 50


@dataclass
class UploadInfo:
    upload_url: str
    object_key: str
    photo_id: UUID


@dataclass
class FileSpec:
    content_type: str
    size: int = 0


@dataclass
class BulkUploadResult:
    uploads: List[UploadInfo] = field(default_factory=list)
    batch_id: str = ''


@dataclass
class GuestContext:
    """Who is asking: the session, its event and the guest name it carries."""
    session_id: UUID
    event_id: UUID
    guest_name: str


class PhotoService:
    """Registers photo uploads and issues presigned URLs for them."""

    def __init__(self, db: Session, storage: S3Service):
        self.db = db
        self.storage = storage
        self.repo = PhotoRepository(db)
        self.events = EventRepository(db)
        self.archives = ArchiveRepository(db)

    def _get_event(self, event_id: UUID) -> Event:
        # Existence only; unlike session creation the status is not checked.
        event = self.events.get(event_id)
        if not event:
            raise NotFoundError("event not found")
        return event

    def _presign_upload(self, event_id: UUID, content_type: str) -> UploadInfo:
        photo_id = uuid4()
        object_key = build_photo_key(event_id, photo_id, content_type)
        upload_url = self.storage.generate_presigned_upload_url(
            object_key,
            content_type,
            expires_in=int(UPLOAD_URL_EXPIRY.total_seconds())
        )
        return UploadInfo(upload_url=upload_url, object_key=object_key, photo_id=photo_id)

    def generate_upload_url(
        self,
        event_id: UUID,
        uploader_name: str,
        content_type: str,
        session_id: Optional[UUID] = None
    ) -> UploadInfo:
        """
        Issue a presigned PUT URL and record a placeholder photo row.

        The row has ``size=0`` until :meth:`confirm_upload` is called. The
        bytes go straight from the client to object storage.

        Args:
            event_id: Event UUID
            uploader_name: Guest display name
            content_type: MIME type of the upload
            session_id: Uploading session, the only one allowed to delete the photo

        Returns:
            UploadInfo with URL, object key and photo id
        """
        self._get_event(event_id)

        info = self._presign_upload(event_id, content_type)
        self.repo.create({
            'id': info.photo_id,
            'event_id': event_id,
            'uploader_name': uploader_name,
            'session_id': session_id,
            'object_key': info.object_key,
            'mime_type': content_type,
            'size': 0,
        })

        logger.info(f"Upload URL issued for photo {info.photo_id} in event {event_id} by '{uploader_name}'")
        return info

    def confirm_upload(self, photo_id: UUID, size: int, event_id: Optional[UUID] = None) -> Photo:
        """
        Record the uploaded size. The object itself is not inspected.

        With ``event_id`` only a photo of that event can be confirmed.
        """
        photo = self.repo.set_size(photo_id, size, event_id=event_id)
        if not photo:
            raise NotFoundError("photo not found")
        logger.info(f"Upload confirmed for photo {photo_id}: {size} bytes")
        return photo

    def get_photos_by_event(self, event_id: UUID) -> List[Dict]:
        """
        Non-deleted photos of an event, newest first.

        Returns:
            List of dicts with ``photo`` and its public ``url``
        """
        return [
            {'photo': photo, 'url': self.storage.get_public_url(photo.object_key)}
            for photo in self.repo.get_by_event(event_id)
        ]

    def delete_photo(self, photo_id: UUID, requester: GuestContext) -> None:
        """
        Soft delete a photo uploaded by the requesting session.

        The stored object is kept; only the database row is tombstoned.

        Raises:
            NotFoundError: If the photo does not exist
            AuthenticationError: If another session uploaded it
        """
        photo = self.repo.get(photo_id)
        if not photo:
            raise NotFoundError("photo not found")

        if photo.event_id != requester.event_id or photo.session_id != requester.session_id:
            raise AuthenticationError("unauthorized to delete photo")

        # TODO: hand the delete URL to a storage cleanup worker once objects are purged
        self.storage.generate_presigned_delete_url(
            photo.object_key,
            expires_in=int(DELETE_URL_EXPIRY.total_seconds())
        )
        self.repo.delete(photo_id)
        logger.info(f"Photo {photo_id} deleted by '{requester.guest_name}'")

    def generate_bulk_upload_urls(
        self,
        event_id: UUID,
        uploader_name: str,
        files: List[FileSpec],
        session_id: Optional[UUID] = None
    ) -> BulkUploadResult:
        """
        Issue one presigned URL and one placeholder row per file.

        All rows are inserted in a single commit.

        Raises:
            BatchTooLargeError: More than 50 files
            NotFoundError: Event missing
        """
        if len(files) > MAX_BULK_FILES:
            raise BatchTooLargeError(f"too many files: maximum {MAX_BULK_FILES} files per batch")

        self._get_event(event_id)

        uploads = []
        records = []
        for spec in files:
            info = self._presign_upload(event_id, spec.content_type)
            uploads.append(info)
            records.append({
                'id': info.photo_id,
                'event_id': event_id,
                'uploader_name': uploader_name,
                'session_id': session_id,
                'object_key': info.object_key,
                'mime_type': spec.content_type,
                'size': spec.size or 0,
            })

        self.repo.bulk_create(records)

        batch_id = str(uuid4())
        logger.info(f"Bulk upload batch {batch_id}: {len(uploads)} URLs for event {event_id}")
        return BulkUploadResult(uploads=uploads, batch_id=batch_id)

    def confirm_bulk_upload(self, confirmations: Dict[UUID, int], event_id: Optional[UUID] = None) -> int:
        """
        Record sizes for several photos atomically.

        With ``event_id`` every photo must belong to that event.

        Raises:
            NotFoundError: Any photo missing; no size is changed
        """
        if not confirmations:
            return 0

        try:
            for photo_id, size in confirmations.items():
                if not self.repo.set_size(photo_id, size, event_id=event_id, commit=False):
                    raise NotFoundError(f"photo not found: {photo_id}")
            self.repo.commit()
        except Exception:
            self.repo.rollback()
            raise

        logger.info(f"Bulk upload confirmed for {len(confirmations)} photos")
        return len(confirmations)

    def delete_bulk_photos(self, photo_ids: List[UUID], event_id: UUID, owner_token: Optional[str]) -> int:
        """
        Organizer bulk delete. Either every photo is deleted or none is.

        Raises:
            NotFoundError: Event missing, or any id absent / not in the event
            AuthenticationError: ``owner_token`` is not the event's owner token
        """
        unique_ids = list(dict.fromkeys(photo_ids))
        if not unique_ids:
            return 0

        event = self._get_event(event_id)
        if not verify_owner_token(owner_token, event.owner_token_hash):
            raise AuthenticationError("only the event owner can delete photos")

        if self.repo.count_in_event(unique_ids, event_id) != len(unique_ids):
            raise NotFoundError("some photos not found or don't belong to this event")

        photos = self.repo.get_many(unique_ids)
        deleted = self.repo.soft_delete_many(unique_ids)

        for photo in photos:
            self.storage.generate_presigned_delete_url(
                photo.object_key,
                expires_in=int(DELETE_URL_EXPIRY.total_seconds())
            )

        logger.info(f"Bulk deleted {deleted} photos from event {event_id}")
        return deleted

    def request_bulk_download(self, event_id: UUID) -> Archive:
        """
        Queue a zip archive of the event's photos.

        The archive is built by the ``tasks.build_event_archive`` worker;
        clients poll :meth:`get_archive` until it is ready.

        Raises:
            NotFoundError: Event missing or it has no photos
            UpstreamError: The build could not be queued; the archive is marked failed
        """
        from src.tasks.workers.archive_worker import build_event_archive

        self._get_event(event_id)

        photo_count = self.repo.count_by_event(event_id)
        if photo_count == 0:
            raise NotFoundError("no photos found for event")

        archive_id = uuid4()
        archive = self.archives.create({
            'id': archive_id,
            'event_id': event_id,
            'object_key': build_archive_key(event_id, archive_id),
            'status': ArchiveStatus.pending,
            'photo_count': photo_count,
        })

        try:
            build_event_archive.delay(str(archive.id))
        except Exception as e:
            logger.error(f"Failed to queue archive {archive.id}: {e}")
            self.archives.update(archive, {'status': ArchiveStatus.failed, 'error': f"queue unavailable: {e}"})
            raise UpstreamError("failed to queue archive build") from e

        logger.info(f"Archive {archive.id} queued for event {event_id} ({photo_count} photos)")
        return archive

    def get_archive(self, archive_id: UUID) -> Dict:
        """
        Archive status, with a presigned download URL once it is ready.

        Returns:
            Dict with ``archive``, ``download_url`` and ``expires_at``
        """
        archive = self.archives.get(archive_id)
        if not archive:
            raise NotFoundError("archive not found")

        download_url: Optional[str] = None
        expires_at: Optional[datetime] = None
        if archive.status == ArchiveStatus.ready:
            download_url = self.storage.generate_presigned_download_url(
                archive.object_key,
                expires_in=int(DOWNLOAD_URL_EXPIRY.total_seconds()),
                filename=f"event-{archive.event_id}.zip"
            )
            expires_at = utcnow() + DOWNLOAD_URL_EXPIRY

        return {'archive': archive, 'download_url': download_url, 'expires_at': expires_at}
