"""Enums for database models."""
import enum


class EventStatus(str, enum.Enum):
    """Event lifecycle status."""
    active = "active"
    inactive = "inactive"
    closed = "closed"


class ArchiveStatus(str, enum.Enum):
    """Bulk download archive build status."""
    pending = "pending"
    processing = "processing"
    ready = "ready"
    failed = "failed"
