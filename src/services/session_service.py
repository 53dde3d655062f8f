"""Guest session issuing and validation."""
from datetime import timedelta
from typing import List
from uuid import UUID
import logging

from sqlalchemy.orm import Session

from src.app.exceptions import AuthenticationError, NotFoundError
from src.core.security import generate_session_token, utcnow
from src.models.enums import EventStatus
from src.models.session import GuestSession
from src.repositories.event_repo import EventRepository
from src.repositories.session_repo import SessionRepository

logger = logging.getLogger(__name__)

SESSION_TTL = timedelta(hours=24)


class SessionService:
    """Create, validate, refresh and revoke guest sessions."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = SessionRepository(db)
        self.events = EventRepository(db)

    def create_session(self, event_id: UUID, guest_name: str) -> GuestSession:
        """
        Issue a 24h session for a guest of an active event.

        Raises:
            NotFoundError: If the event is missing, deleted or not active
        """
        event = self.events.get_active(event_id)
        if not event:
            raise NotFoundError("event not found or inactive")

        session = self.repo.create({
            'event_id': event.id,
            'guest_name': guest_name,
            'session_token': generate_session_token(),
            'expires_at': utcnow() + SESSION_TTL,
        })
        logger.info(f"Session created for '{guest_name}' in event {event.id}")
        return session

    def validate_session(self, token: str) -> GuestSession:
        """
        Resolve a token to a live session.

        A session is valid while ``now < expires_at`` and its event is active.

        Raises:
            AuthenticationError: If the token is unknown, expired, or the
                event is no longer active
        """
        session = self.repo.get_unexpired_by_token(token, utcnow())
        if not session:
            raise AuthenticationError("session not found or expired")

        event = session.event
        if event is None or event.is_deleted or event.status != EventStatus.active:
            raise AuthenticationError("event is no longer active")

        return session

    def refresh_session(self, token: str) -> GuestSession:
        """Reset expiry to now + 24h (not added to the previous expiry)."""
        session = self.validate_session(token)
        session = self.repo.update(session, {'expires_at': utcnow() + SESSION_TTL})
        logger.info(f"Session {session.id} refreshed until {session.expires_at.isoformat()}")
        return session

    def revoke_session(self, token: str) -> None:
        if not self.repo.delete_by_token(token):
            raise NotFoundError("session not found")
        logger.info("Session revoked")

    def get_sessions_by_event(self, event_id: UUID) -> List[GuestSession]:
        """Non-expired sessions of an event, newest first."""
        return self.repo.get_unexpired_by_event(event_id, utcnow())

    def cleanup_expired_sessions(self) -> int:
        """Delete every expired session; returns the number removed."""
        deleted = self.repo.delete_expired(utcnow())
        logger.info(f"Cleaned up {deleted} expired sessions")
        return deleted
