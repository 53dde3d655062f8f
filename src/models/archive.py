"""Bulk download archive model."""
from sqlalchemy import Column, String, Integer, BigInteger, DateTime, ForeignKey, Text, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid

from src.db.base import Base
from .base import TimestampMixin
from .enums import ArchiveStatus


class Archive(Base, TimestampMixin):
    """Zip of an event's photos, built by a background worker."""
    
    __tablename__ = 'archives'
    
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    event_id = Column(UUID(as_uuid=True), ForeignKey('events.id', ondelete='CASCADE'), nullable=False, index=True)
    object_key = Column(String(255), nullable=False, unique=True)
    status = Column(SQLEnum(ArchiveStatus), default=ArchiveStatus.pending, nullable=False, index=True)
    photo_count = Column(Integer, nullable=False, default=0)
    skipped_count = Column(Integer, nullable=False, default=0)
    size = Column(BigInteger, nullable=True)
    error = Column(Text, nullable=True)
    completed_at = Column(DateTime, nullable=True)
    
    event = relationship('Event', back_populates='archives')
    
    def __repr__(self) -> str:
        return f'<Archive(id={self.id}, event_id={self.event_id}, status={self.status})>'
