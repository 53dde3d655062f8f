"""Guest session schemas."""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime
from uuid import UUID
from typing import List, Optional

from src.schemas.event import PublicEventResponse


class SessionCreate(BaseModel):
    """Guest joins an event by code."""
    event_code: str = Field(..., min_length=8, max_length=8, description="8-character event code")
    guest_name: str = Field(..., min_length=1, max_length=100, description="Display name")
    
    @field_validator('event_code')
    @classmethod
    def normalize_code(cls, v: str) -> str:
        if not v.isalnum():
            raise ValueError('Event code must be alphanumeric')
        return v.upper()
    
    @field_validator('guest_name')
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('Guest name cannot be blank')
        return v


class SessionTokenRequest(BaseModel):
    """Body for refresh and revoke."""
    session_token: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    
    id: UUID
    event_id: UUID
    guest_name: str
    session_token: str
    expires_at: datetime
    created_at: datetime
    event: Optional[PublicEventResponse] = None


class SessionSummary(BaseModel):
    """Session as listed to the organizer; the token is never included."""
    model_config = ConfigDict(from_attributes=True)
    
    id: UUID
    event_id: UUID
    guest_name: str
    expires_at: datetime
    created_at: datetime


class SessionListResponse(BaseModel):
    sessions: List[SessionSummary]
    count: int


class CleanupResponse(BaseModel):
    message: str
    deleted: int
