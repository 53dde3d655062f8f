"""Event schemas."""
from pydantic import BaseModel, EmailStr, Field, ConfigDict
from datetime import date, datetime
from uuid import UUID
from typing import List, Optional

from src.models.enums import EventStatus


class EventCreate(BaseModel):
    """Schema for creating an event."""
    name: str = Field(..., min_length=1, max_length=255, description="Event name")
    description: Optional[str] = Field(None, max_length=1000)
    event_date: Optional[date] = Field(None, description="Day of the event")
    owner_email: EmailStr = Field(..., description="Organizer email")


class EventUpdate(BaseModel):
    """Partial update; only fields present in the request are applied."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=1000)
    event_date: Optional[date] = None
    status: Optional[EventStatus] = None


class PublicEventResponse(BaseModel):
    """What guests holding the event code may see."""
    model_config = ConfigDict(from_attributes=True)
    
    id: UUID
    name: str
    code: str
    description: Optional[str] = None
    event_date: Optional[date] = None
    status: EventStatus
    created_at: datetime
    updated_at: datetime


class EventResponse(PublicEventResponse):
    """Organizer view of an event."""
    owner_email: str


class EventCreatedResponse(EventResponse):
    owner_token: str = Field(..., description="Organizer secret, shown only once; send as Bearer token")


class EventListResponse(BaseModel):
    events: List[EventResponse]
