"""Photo repository for database operations."""
from sqlalchemy.orm import Session
from sqlalchemy import func, desc
from typing import Optional, List
from uuid import UUID
from datetime import datetime

from src.repositories.base import BaseRepository
from src.models.photo import Photo


class PhotoRepository(BaseRepository[Photo]):
    """Repository for photo database operations."""

    def __init__(self, db: Session):
        super().__init__(Photo, db)

    def get_by_event(self, event_id: UUID, confirmed_only: bool = False) -> List[Photo]:
        """
        Get all non-deleted photos of an event, newest first.

        Args:
            event_id: Event UUID
            confirmed_only: Skip placeholders whose upload was never confirmed

        Returns:
            List of photos
        """
        query = self.query().filter(Photo.event_id == event_id)
        if confirmed_only:
            query = query.filter(Photo.size > 0)
        return query.order_by(desc(Photo.created_at)).all()

    def count_by_event(self, event_id: UUID) -> int:
        return self.count(filters={'event_id': event_id})

    def count_in_event(self, photo_ids: List[UUID], event_id: UUID) -> int:
        """
        Count non-deleted photos among ``photo_ids`` that belong to the event.

        Args:
            photo_ids: Photo UUIDs to check
            event_id: Event the photos must belong to

        Returns:
            Number of matching photos
        """
        return self.db.query(func.count(Photo.id)).filter(
            Photo.id.in_(photo_ids),
            Photo.event_id == event_id,
            Photo.deleted_at.is_(None)
        ).scalar() or 0

    def get_many(self, photo_ids: List[UUID]) -> List[Photo]:
        return self.query().filter(Photo.id.in_(photo_ids)).all()

    def set_size(
        self,
        photo_id: UUID,
        size: int,
        event_id: Optional[UUID] = None,
        commit: bool = True
    ) -> Optional[Photo]:
        """
        Record the confirmed byte size of an upload.

        Args:
            photo_id: Photo UUID
            size: Size in bytes
            event_id: Only match a photo of this event
            commit: Commit immediately (False when part of a larger transaction)

        Returns:
            Updated photo or None if not found
        """
        query = self.query().filter(Photo.id == photo_id)
        if event_id is not None:
            query = query.filter(Photo.event_id == event_id)
        photo = query.first()
        if not photo:
            return None

        photo.size = size
        if commit:
            self.db.commit()
            self.db.refresh(photo)
        else:
            self.db.flush()
        return photo

    def soft_delete_many(self, photo_ids: List[UUID]) -> int:
        """Tombstone several photos in one statement."""
        deleted = self.query().filter(
            Photo.id.in_(photo_ids)
        ).update({Photo.deleted_at: datetime.utcnow()}, synchronize_session=False)
        self.db.commit()
        return deleted
