"""Event model."""
from sqlalchemy import Column, String, Date, Text, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid

from src.db.base import Base
from .base import TimestampMixin, SoftDeleteMixin
from .enums import EventStatus


class Event(Base, TimestampMixin, SoftDeleteMixin):
    """Organizer-created gathering guests join with a short code."""
    
    __tablename__ = 'events'
    
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(255), nullable=False)
    code = Column(String(8), unique=True, nullable=False, index=True)
    description = Column(Text, nullable=True)
    event_date = Column(Date, nullable=True)
    status = Column(SQLEnum(EventStatus), default=EventStatus.active, nullable=False, index=True)
    owner_email = Column(String(255), nullable=False, index=True)
    owner_token_hash = Column(String(64), nullable=False)
    
    # Relationships
    sessions = relationship('GuestSession', back_populates='event', cascade='all, delete-orphan', passive_deletes=True)
    photos = relationship('Photo', back_populates='event', cascade='all, delete-orphan', passive_deletes=True)
    archives = relationship('Archive', back_populates='event', cascade='all, delete-orphan', passive_deletes=True)
    
    @property
    def is_active(self) -> bool:
        return self.status == EventStatus.active and not self.is_deleted
    
    def __repr__(self) -> str:
        return f'<Event(id={self.id}, code={self.code}, status={self.status})>'
