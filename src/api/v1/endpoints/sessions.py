"""Guest session API endpoints."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.deps import get_db
from src.models.session import GuestSession
from src.services.event_service import EventService
from src.services.session_service import SessionService
from src.schemas.event import PublicEventResponse
from src.schemas.photo import MessageResponse
from src.schemas.session import (
    SessionCreate,
    SessionTokenRequest,
    SessionResponse,
    CleanupResponse,
)


router = APIRouter()


def build_session_response(session: GuestSession) -> SessionResponse:
    """Build SessionResponse with the public view of its event."""
    return SessionResponse(
        id=session.id,
        event_id=session.event_id,
        guest_name=session.guest_name,
        session_token=session.session_token,
        expires_at=session.expires_at,
        created_at=session.created_at,
        event=PublicEventResponse.model_validate(session.event) if session.event else None,
    )


@router.post('', response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def create_session(
    request: SessionCreate,
    db: Session = Depends(get_db)
):
    """
    Join an event as a guest.
    
    - **event_code**: 8-character code from the event QR
    - **guest_name**: Display name attached to uploads
    """
    event = EventService(db).get_by_code(request.event_code)
    session = SessionService(db).create_session(event.id, request.guest_name)
    return build_session_response(session)


@router.post('/refresh', response_model=SessionResponse)
def refresh_session(
    request: SessionTokenRequest,
    db: Session = Depends(get_db)
):
    """Extend a session to 24 hours from now."""
    session = SessionService(db).refresh_session(request.session_token)
    return build_session_response(session)


@router.delete('', response_model=MessageResponse)
def revoke_session(
    request: SessionTokenRequest,
    db: Session = Depends(get_db)
):
    """Revoke (delete) a session."""
    SessionService(db).revoke_session(request.session_token)
    return MessageResponse(message='session revoked')


@router.post('/cleanup', response_model=CleanupResponse)
def cleanup_expired_sessions(db: Session = Depends(get_db)):
    """Remove expired sessions (system endpoint; normally run by the scheduler)."""
    deleted = SessionService(db).cleanup_expired_sessions()
    return CleanupResponse(message='expired sessions cleaned up', deleted=deleted)


@router.get('/{token}', response_model=SessionResponse)
def validate_session(
    token: str,
    db: Session = Depends(get_db)
):
    """Validate a session token and return the session with its event."""
    session = SessionService(db).validate_session(token)
    return build_session_response(session)
