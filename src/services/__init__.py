"""
Services package initializer.

Re-exports the service classes so callers can import from
`src.services` instead of deep module paths.
"""

from .event_service import EventService
from .session_service import SessionService
from .photo_service import PhotoService

__all__ = [
    "EventService",
    "SessionService",
    "PhotoService",
]
