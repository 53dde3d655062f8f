"""
Archive Celery Worker
=====================

Builds the zip archive behind a bulk download request: streams every
confirmed photo of the event out of object storage, zips them into a
temporary file and uploads the result to the archive key. Photos whose
object was never uploaded are left out and counted as skipped.
"""

from typing import Any, Dict
from uuid import UUID
import logging
import os
import tempfile
import time
import zipfile

from celery import Task
from sqlalchemy.orm import Session

from src.tasks.celery_app import celery_app
from src.db.base import SessionLocal
from src.core.security import utcnow
from src.models.enums import ArchiveStatus
from src.repositories.archive_repo import ArchiveRepository
from src.repositories.photo_repo import PhotoRepository
from src.services.storage.s3 import ObjectNotFoundError, S3Service, extension_for_content_type

logger = logging.getLogger(__name__)


class ArchiveTask(Task):
    """Base task for archive builds."""

    def get_db(self) -> Session:
        """Get database session."""
        return SessionLocal()

    def get_storage(self) -> S3Service:
        return S3Service()

    def on_failure(self, exc, task_id, args, kwargs, einfo):
        logger.error(
            f"Task {task_id} failed: {str(exc)}",
            extra={"task_id": task_id, "args": args}
        )

    def on_success(self, retval, task_id, args, kwargs):
        logger.info(
            f"Task {task_id} completed successfully",
            extra={"task_id": task_id, "result": retval}
        )


def archive_entry_name(photo) -> str:
    """Path of a photo inside the zip: {uploader}/{photo_id}{ext}."""
    uploader = (photo.uploader_name or 'guest').replace('/', '_').strip() or 'guest'
    return f"{uploader}/{photo.id}{extension_for_content_type(photo.mime_type)}"


@celery_app.task(
    bind=True,
    base=ArchiveTask,
    name='tasks.build_event_archive',
    track_started=True
)
def build_event_archive(self, archive_id: str) -> Dict[str, Any]:
    """
    Build and upload the zip for one archive row.

    Args:
        archive_id: Archive UUID

    Returns:
        Summary with archive id, photo and skip counts and zip size
    """
    db = self.get_db()
    start_time = time.time()
    repo = ArchiveRepository(db)
    archive = None

    try:
        archive = repo.get(UUID(archive_id))
        if not archive:
            raise ValueError(f"Archive not found: {archive_id}")

        archive = repo.update(archive, {'status': ArchiveStatus.processing, 'error': None})
        storage = self.get_storage()
        photos = PhotoRepository(db).get_by_event(archive.event_id, confirmed_only=True)

        logger.info(f"Building archive {archive_id} with {len(photos)} photos")

        included = 0
        skipped = 0
        with tempfile.TemporaryDirectory() as workdir:
            zip_path = os.path.join(workdir, 'archive.zip')
            with zipfile.ZipFile(zip_path, 'w', compression=zipfile.ZIP_STORED) as zf:
                for photo in photos:
                    try:
                        data = storage.download_file(photo.object_key)
                    except ObjectNotFoundError:
                        logger.warning(f"Archive {archive_id}: skipping photo {photo.id}, object missing")
                        skipped += 1
                        continue
                    zf.writestr(archive_entry_name(photo), data)
                    included += 1

            size = os.path.getsize(zip_path)
            with open(zip_path, 'rb') as fh:
                storage.upload_fileobj(fh, archive.object_key, content_type='application/zip')

        repo.update(archive, {
            'status': ArchiveStatus.ready,
            'photo_count': included,
            'skipped_count': skipped,
            'size': size,
            'completed_at': utcnow(),
        })

        return {
            'archive_id': archive_id,
            'photo_count': included,
            'skipped_count': skipped,
            'size': size,
            'duration_seconds': round(time.time() - start_time, 2),
        }

    except Exception as e:
        db.rollback()
        if archive is not None:
            repo.update(archive, {'status': ArchiveStatus.failed, 'error': str(e)})
        raise

    finally:
        db.close()
