"""
Core package initializer.

Security helpers shared by the services: event code, session token and
organizer token handling plus the UTC clock used for expiry checks.
"""

from .security import (
    EVENT_CODE_ALPHABET,
    EVENT_CODE_LENGTH,
    generate_event_code,
    generate_session_token,
    generate_owner_token,
    hash_owner_token,
    verify_owner_token,
    utcnow,
)

__all__ = [
    "EVENT_CODE_ALPHABET",
    "EVENT_CODE_LENGTH",
    "generate_event_code",
    "generate_session_token",
    "generate_owner_token",
    "hash_owner_token",
    "verify_owner_token",
    "utcnow",
]
