"""Event directory: create, look up and manage organizer events."""
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.app.exceptions import AuthenticationError, CodeGenerationError, NotFoundError
from src.core.security import (
    generate_event_code,
    generate_owner_token,
    hash_owner_token,
    verify_owner_token,
)
from src.models.enums import EventStatus
from src.models.event import Event
from src.repositories.event_repo import EventRepository

logger = logging.getLogger(__name__)

MAX_CODE_ATTEMPTS = 10
UPDATABLE_FIELDS = ('name', 'description', 'event_date', 'status')


class EventService:
    """Thin service over the events table."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = EventRepository(db)

    def create_event(
        self,
        name: str,
        owner_email: str,
        description: Optional[str] = None,
        event_date: Optional[date] = None,
    ) -> Tuple[Event, str]:
        """
        Create an active event with a fresh unique code.

        Returns the event and its owner token. Only a hash of the token is
        stored, so this is the one time the organizer can receive it.

        The unique index on ``events.code`` is the only uniqueness check: a
        colliding insert is rolled back and retried with a new code.

        Raises:
            CodeGenerationError: If every attempt collided
        """
        owner_token = generate_owner_token()
        for attempt in range(1, MAX_CODE_ATTEMPTS + 1):
            code = generate_event_code()
            try:
                event = self.repo.create({
                    'name': name,
                    'code': code,
                    'description': description,
                    'event_date': event_date,
                    'status': EventStatus.active,
                    'owner_email': owner_email,
                    'owner_token_hash': hash_owner_token(owner_token),
                })
            except IntegrityError:
                self.repo.rollback()
                logger.warning(f"Event code collision on attempt {attempt}: {code}")
                continue

            logger.info(f"Event created: {event.id} (code={event.code}, owner={owner_email})")
            return event, owner_token

        raise CodeGenerationError(
            f"failed to generate unique code after {MAX_CODE_ATTEMPTS} attempts"
        )

    def get_by_id(self, event_id: UUID) -> Event:
        event = self.repo.get(event_id)
        if not event:
            raise NotFoundError("event not found")
        return event

    def authorize_owner(self, event_id: UUID, owner_token: Optional[str]) -> Event:
        """
        Load an event on behalf of its organizer.

        Raises:
            NotFoundError: If the event does not exist
            AuthenticationError: If the owner token does not match
        """
        event = self.get_by_id(event_id)
        if not verify_owner_token(owner_token, event.owner_token_hash):
            raise AuthenticationError("invalid owner token")
        return event

    def get_by_code(self, code: str) -> Event:
        """Look up an event by code; closed events are reported as missing."""
        event = self.repo.get_by_code(code.strip().upper())
        if not event:
            raise NotFoundError("event not found or closed")
        return event

    def list_by_owner(self, owner_email: str) -> List[Event]:
        return self.repo.get_all_by_owner(owner_email)

    def update_event(self, event_id: UUID, updates: Dict[str, Any]) -> Event:
        """
        Apply only the supplied fields.

        Status changes are limited to the enum values; transitions are not
        validated (a closed event may be reopened).
        """
        event = self.get_by_id(event_id)
        changes = {k: v for k, v in updates.items() if k in UPDATABLE_FIELDS}
        if 'status' in changes and changes['status'] is not None:
            changes['status'] = EventStatus(changes['status'])
        if not changes:
            return event

        event = self.repo.update(event, changes)
        logger.info(f"Event {event_id} updated: {sorted(changes)}")
        return event

    def delete_event(self, event_id: UUID) -> None:
        """Soft delete."""
        if not self.repo.delete(event_id):
            raise NotFoundError("event not found")
        logger.info(f"Event {event_id} deleted")

    def close_event(self, event_id: UUID) -> Event:
        event = self.get_by_id(event_id)
        event = self.repo.update(event, {'status': EventStatus.closed})
        logger.info(f"Event {event_id} closed")
        return event
