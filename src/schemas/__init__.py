"""
API schemas package.

Request/response models for events, guest sessions, photo uploads and
bulk download archives.
"""

from .event import (
    EventCreate,
    EventUpdate,
    PublicEventResponse,
    EventResponse,
    EventCreatedResponse,
    EventListResponse,
)
from .session import (
    SessionCreate,
    SessionTokenRequest,
    SessionResponse,
    SessionSummary,
    SessionListResponse,
    CleanupResponse,
)
from .photo import (
    PhotoResponse,
    PhotoListResponse,
    PhotoBulkDeleteRequest,
    PhotoBulkDeleteResponse,
    MessageResponse,
)
from .upload import (
    UploadURLRequest,
    UploadURLResponse,
    FileInfo,
    BulkUploadRequest,
    BulkUploadResponse,
    ConfirmUploadRequest,
    BulkConfirmRequest,
)
from .archive import ArchiveResponse

__all__ = [
    "EventCreate",
    "EventUpdate",
    "PublicEventResponse",
    "EventResponse",
    "EventCreatedResponse",
    "EventListResponse",
    "SessionCreate",
    "SessionTokenRequest",
    "SessionResponse",
    "SessionSummary",
    "SessionListResponse",
    "CleanupResponse",
    "PhotoResponse",
    "PhotoListResponse",
    "PhotoBulkDeleteRequest",
    "PhotoBulkDeleteResponse",
    "MessageResponse",
    "UploadURLRequest",
    "UploadURLResponse",
    "FileInfo",
    "BulkUploadRequest",
    "BulkUploadResponse",
    "ConfirmUploadRequest",
    "BulkConfirmRequest",
    "ArchiveResponse",
]
