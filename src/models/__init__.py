"""Import all models for Alembic."""
from .base import TimestampMixin, SoftDeleteMixin
from .enums import EventStatus, ArchiveStatus
from .event import Event
from .session import GuestSession
from .photo import Photo
from .archive import Archive

__all__ = [
    "TimestampMixin",
    "SoftDeleteMixin",
    "EventStatus",
    "ArchiveStatus",
    "Event",
    "GuestSession",
    "Photo",
    "Archive",
]
