"""Guest session model."""
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid

from src.db.base import Base
from .base import TimestampMixin


class GuestSession(Base, TimestampMixin):
    """Time-limited guest identity scoped to one event."""
    
    __tablename__ = "sessions"
    
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    event_id = Column(UUID(as_uuid=True), ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    guest_name = Column(String(255), nullable=False, index=True)
    session_token = Column(String(128), unique=True, nullable=False, index=True)
    expires_at = Column(DateTime, nullable=False, index=True)
    
    event = relationship("Event", back_populates="sessions")
    
    def __repr__(self) -> str:
        return f'<GuestSession(id={self.id}, event_id={self.event_id}, guest_name={self.guest_name})>'
