"""Dependencies for API endpoints."""
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import Optional
from uuid import UUID

from src.db.base import get_db
from src.app.exceptions import AuthenticationError
from src.models.event import Event
from src.services.event_service import EventService
from src.services.photo_service import GuestContext
from src.services.session_service import SessionService
from src.services.storage.s3 import S3Service

security = HTTPBearer(auto_error=False)


def get_storage_service() -> S3Service:
    """Object storage client for the request."""
    return S3Service()


def _bearer_token(credentials: Optional[HTTPAuthorizationCredentials]) -> str:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("authorization header required")
    return credentials.credentials


async def get_current_session(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> GuestContext:
    """
    Resolve the bearer session token to the guest using it.

    The guest name and event id are also stored on ``request.state``.
    """
    session = SessionService(db).validate_session(_bearer_token(credentials))

    request.state.uploader_name = session.guest_name
    request.state.event_id = session.event_id

    return GuestContext(
        session_id=session.id,
        event_id=session.event_id,
        guest_name=session.guest_name,
    )


async def get_owner_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> str:
    """Raw organizer token from the Authorization header."""
    return _bearer_token(credentials)


async def get_event_owner(
    event_id: UUID,
    owner_token: str = Depends(get_owner_token),
    db: Session = Depends(get_db)
) -> Event:
    """The path's event, if the bearer token is its owner token."""
    return EventService(db).authorize_owner(event_id, owner_token)
