"""Event API endpoints."""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from uuid import UUID

from src.api.deps import get_db, get_event_owner, get_storage_service
from src.api.v1.endpoints.photos import build_photo_response
from src.models.event import Event
from src.services.event_service import EventService
from src.services.photo_service import PhotoService
from src.services.session_service import SessionService
from src.services.storage.s3 import S3Service
from src.schemas.archive import ArchiveResponse
from src.schemas.event import (
    EventCreate,
    EventUpdate,
    PublicEventResponse,
    EventResponse,
    EventCreatedResponse,
    EventListResponse,
)
from src.schemas.photo import MessageResponse, PhotoListResponse
from src.schemas.session import SessionListResponse, SessionSummary


router = APIRouter()


@router.post('', response_model=EventCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_event(
    event_data: EventCreate,
    db: Session = Depends(get_db)
):
    """
    Create a new event with a generated 8-character code.

    - **name**: Event name (required)
    - **owner_email**: Organizer email (required)
    - **description**: Free text
    - **event_date**: Day of the event

    The response carries `owner_token` exactly once. Organizer routes
    expect it as `Authorization: Bearer <owner_token>`.
    """
    event, owner_token = EventService(db).create_event(
        name=event_data.name,
        owner_email=event_data.owner_email,
        description=event_data.description,
        event_date=event_data.event_date,
    )
    return EventCreatedResponse(
        **EventResponse.model_validate(event).model_dump(),
        owner_token=owner_token,
    )


@router.get('', response_model=EventListResponse)
def list_events(
    owner_email: str = Query(..., min_length=3, description='Organizer email'),
    db: Session = Depends(get_db)
):
    """List events owned by an email, newest first."""
    events = EventService(db).list_by_owner(owner_email)
    return EventListResponse(events=[EventResponse.model_validate(e) for e in events])


@router.get('/id/{event_id}', response_model=PublicEventResponse)
def get_event_by_id(
    event_id: UUID,
    db: Session = Depends(get_db)
):
    """Get an event by ID (closed events included)."""
    return PublicEventResponse.model_validate(EventService(db).get_by_id(event_id))


@router.get('/{code}', response_model=PublicEventResponse)
def get_event_by_code(
    code: str,
    db: Session = Depends(get_db)
):
    """Get an event by its guest code. Closed events are not found."""
    return PublicEventResponse.model_validate(EventService(db).get_by_code(code))


@router.patch('/{event_id}', response_model=EventResponse)
def update_event(
    event_id: UUID,
    event_data: EventUpdate,
    event: Event = Depends(get_event_owner),
    db: Session = Depends(get_db)
):
    """Update only the fields present in the body (organizer only)."""
    event = EventService(db).update_event(event.id, event_data.model_dump(exclude_unset=True))
    return EventResponse.model_validate(event)


@router.delete('/{event_id}', response_model=MessageResponse)
def delete_event(
    event_id: UUID,
    event: Event = Depends(get_event_owner),
    db: Session = Depends(get_db)
):
    """Soft delete an event (organizer only)."""
    EventService(db).delete_event(event.id)
    return MessageResponse(message='event deleted')


@router.post('/{event_id}/close', response_model=MessageResponse)
def close_event(
    event_id: UUID,
    event: Event = Depends(get_event_owner),
    db: Session = Depends(get_db)
):
    """Close an event; guests can no longer join or use their sessions."""
    EventService(db).close_event(event.id)
    return MessageResponse(message='event closed')


@router.get('/{event_id}/sessions', response_model=SessionListResponse)
def list_event_sessions(
    event_id: UUID,
    event: Event = Depends(get_event_owner),
    db: Session = Depends(get_db)
):
    """Active (unexpired) guest sessions of an event, without their tokens."""
    sessions = SessionService(db).get_sessions_by_event(event.id)
    summaries = [SessionSummary.model_validate(s) for s in sessions]
    return SessionListResponse(sessions=summaries, count=len(summaries))


@router.get('/{event_id}/photos', response_model=PhotoListResponse)
def list_event_photos(
    event_id: UUID,
    db: Session = Depends(get_db),
    storage: S3Service = Depends(get_storage_service)
):
    """All photos of an event with public URLs, newest first."""
    photos = PhotoService(db, storage).get_photos_by_event(event_id)
    responses = [build_photo_response(p) for p in photos]
    return PhotoListResponse(photos=responses, count=len(responses))


@router.post('/{event_id}/archives', response_model=ArchiveResponse, status_code=status.HTTP_202_ACCEPTED)
def request_bulk_download(
    event_id: UUID,
    db: Session = Depends(get_db),
    storage: S3Service = Depends(get_storage_service)
):
    """
    Queue a zip of all photos in the event.

    Poll `GET /archives/{archive_id}` until `status` is `ready`; the
    response then carries a presigned download URL valid for one hour.
    """
    archive = PhotoService(db, storage).request_bulk_download(event_id)
    return ArchiveResponse.model_validate(archive)
