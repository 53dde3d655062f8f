"""Guest session repository."""
from sqlalchemy.orm import Session, joinedload
from sqlalchemy import desc
from typing import Optional, List
from uuid import UUID
from datetime import datetime

from src.repositories.base import BaseRepository
from src.models.session import GuestSession


class SessionRepository(BaseRepository[GuestSession]):
    """Repository for guest session operations. Sessions are hard deleted."""
    
    def __init__(self, db: Session):
        super().__init__(GuestSession, db)
    
    def get_unexpired_by_token(self, token: str, now: datetime) -> Optional[GuestSession]:
        """Look up a session by token, with the expiry filter in the query."""
        return self.db.query(GuestSession).options(
            joinedload(GuestSession.event)
        ).filter(
            GuestSession.session_token == token,
            GuestSession.expires_at > now
        ).first()
    
    def get_unexpired_by_event(self, event_id: UUID, now: datetime) -> List[GuestSession]:
        return self.db.query(GuestSession).filter(
            GuestSession.event_id == event_id,
            GuestSession.expires_at > now
        ).order_by(desc(GuestSession.created_at)).all()
    
    def delete_by_token(self, token: str) -> int:
        """Hard delete by token; returns number of rows removed."""
        deleted = self.db.query(GuestSession).filter(
            GuestSession.session_token == token
        ).delete(synchronize_session=False)
        self.db.commit()
        return deleted
    
    def delete_expired(self, now: datetime) -> int:
        deleted = self.db.query(GuestSession).filter(
            GuestSession.expires_at <= now
        ).delete(synchronize_session=False)
        self.db.commit()
        return deleted
