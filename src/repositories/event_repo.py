"""Event repository extending base repository."""
from sqlalchemy.orm import Session
from sqlalchemy import desc
from typing import Optional, List

from src.repositories.base import BaseRepository
from src.models.event import Event
from src.models.enums import EventStatus


class EventRepository(BaseRepository[Event]):
    """Repository for event database operations."""
    
    def __init__(self, db: Session):
        super().__init__(Event, db)
    
    def get_by_code(self, code: str, exclude_closed: bool = True) -> Optional[Event]:
        """
        Get event by its guest access code.
        
        Args:
            code: 8-character event code
            exclude_closed: Hide events whose status is closed
            
        Returns:
            Event instance or None
        """
        query = self.query().filter(Event.code == code)
        if exclude_closed:
            query = query.filter(Event.status != EventStatus.closed)
        return query.first()
    
    def get_active(self, event_id) -> Optional[Event]:
        """Get event only if its status is active."""
        return self.query().filter(
            Event.id == event_id,
            Event.status == EventStatus.active
        ).first()
    
    def get_all_by_owner(self, owner_email: str) -> List[Event]:
        """Events owned by an email address, newest first."""
        return self.query().filter(
            Event.owner_email == owner_email
        ).order_by(desc(Event.created_at)).all()
