"""Photo model."""
from sqlalchemy import Column, String, BigInteger, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid

from src.db.base import Base
from .base import TimestampMixin, SoftDeleteMixin


class Photo(Base, TimestampMixin, SoftDeleteMixin):
    """Metadata for one guest upload; the bytes live in object storage."""
    
    __tablename__ = 'photos'
    
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    event_id = Column(UUID(as_uuid=True), ForeignKey('events.id', ondelete='CASCADE'), nullable=False, index=True)
    uploader_name = Column(String(100), nullable=False, index=True)
    session_id = Column(UUID(as_uuid=True), ForeignKey('sessions.id', ondelete='SET NULL'), nullable=True, index=True)
    
    # Storage info
    object_key = Column(String(255), nullable=False, index=True)
    
    # File metadata (size stays 0 until the upload is confirmed)
    size = Column(BigInteger, nullable=False, default=0)
    mime_type = Column(String(50), nullable=False)
    
    # Relationships
    event = relationship('Event', back_populates='photos')
    
    @property
    def is_confirmed(self) -> bool:
        return (self.size or 0) > 0
    
    def __repr__(self) -> str:
        return f'<Photo(id={self.id}, object_key={self.object_key}, size={self.size})>'
