"""Security utilities for guest sessions, organizer tokens and event codes."""
from datetime import datetime
import hashlib
import secrets

EVENT_CODE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
EVENT_CODE_LENGTH = 8
SESSION_TOKEN_BYTES = 32  # 256 bits -> 64 hex characters
OWNER_TOKEN_BYTES = 32


def generate_event_code(length: int = EVENT_CODE_LENGTH) -> str:
    """Generate a random uppercase alphanumeric event code."""
    return ''.join(secrets.choice(EVENT_CODE_ALPHABET) for _ in range(length))


def generate_session_token() -> str:
    """Generate an opaque hex session token."""
    return secrets.token_hex(SESSION_TOKEN_BYTES)


def generate_owner_token() -> str:
    """Generate the organizer secret handed out once when an event is created."""
    return secrets.token_urlsafe(OWNER_TOKEN_BYTES)


def hash_owner_token(token: str) -> str:
    """Only the SHA-256 digest of an owner token is stored."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def verify_owner_token(token: str, token_hash: str) -> bool:
    if not token or not token_hash:
        return False
    return secrets.compare_digest(hash_owner_token(token), token_hash)


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns."""
    return datetime.utcnow()
