from datetime import datetime, timedelta
import uuid

import pytest

from src.app.exceptions import AuthenticationError, NotFoundError
from src.models import EventStatus, GuestSession
from src.services.session_service import SessionService, SESSION_TTL

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


@pytest.fixture
def clock(mocker):
    return mocker.patch("src.services.session_service.utcnow", return_value=BASE_TIME)


@pytest.fixture
def service(db_session):
    return SessionService(db_session)


def test_create_session(service, make_event, clock):
    event = make_event()

    session = service.create_session(event.id, "Alice")

    assert session.guest_name == "Alice"
    assert len(session.session_token) == 64
    assert session.expires_at == BASE_TIME + SESSION_TTL


@pytest.mark.parametrize("status", [EventStatus.inactive, EventStatus.closed])
def test_create_session_requires_active_event(service, make_event, status):
    event = make_event(status=status)

    with pytest.raises(NotFoundError):
        service.create_session(event.id, "Alice")


def test_create_session_unknown_event(service):
    with pytest.raises(NotFoundError):
        service.create_session(uuid.uuid4(), "Alice")


def test_session_valid_until_expiry(service, make_event, clock):
    event = make_event()
    token = service.create_session(event.id, "Alice").session_token

    clock.return_value = BASE_TIME + SESSION_TTL - timedelta(seconds=1)
    assert service.validate_session(token).guest_name == "Alice"

    clock.return_value = BASE_TIME + SESSION_TTL
    with pytest.raises(AuthenticationError):
        service.validate_session(token)


def test_validate_unknown_token(service):
    with pytest.raises(AuthenticationError):
        service.validate_session("nope")


def test_validate_fails_once_event_closed(service, make_event, db_session):
    event = make_event()
    token = service.create_session(event.id, "Alice").session_token

    event.status = EventStatus.closed
    db_session.commit()

    with pytest.raises(AuthenticationError, match="no longer active"):
        service.validate_session(token)


def test_refresh_resets_expiry_from_now(service, make_event, clock):
    event = make_event()
    token = service.create_session(event.id, "Alice").session_token

    clock.return_value = BASE_TIME + timedelta(hours=10)
    session = service.refresh_session(token)

    assert session.expires_at == BASE_TIME + timedelta(hours=34)


def test_refresh_expired_session_fails(service, make_event, clock):
    event = make_event()
    token = service.create_session(event.id, "Alice").session_token

    clock.return_value = BASE_TIME + timedelta(hours=25)
    with pytest.raises(AuthenticationError):
        service.refresh_session(token)


def test_revoke_session(service, make_event, clock):
    event = make_event()
    token = service.create_session(event.id, "Alice").session_token

    service.revoke_session(token)

    with pytest.raises(AuthenticationError):
        service.validate_session(token)
    with pytest.raises(NotFoundError):
        service.revoke_session(token)


def test_sessions_by_event_excludes_expired(service, make_event, make_session, clock):
    event = make_event()
    make_session(event, guest_name="Alice", expires_at=BASE_TIME + timedelta(hours=1))
    make_session(event, guest_name="Bob", expires_at=BASE_TIME - timedelta(minutes=1))

    sessions = service.get_sessions_by_event(event.id)

    assert [s.guest_name for s in sessions] == ["Alice"]


def test_cleanup_expired_sessions(service, make_event, make_session, db_session, clock):
    event = make_event()
    make_session(event, guest_name="Alice", expires_at=BASE_TIME + timedelta(hours=1))
    make_session(event, guest_name="Bob", expires_at=BASE_TIME - timedelta(minutes=1))
    make_session(event, guest_name="Carol", expires_at=BASE_TIME)

    assert service.cleanup_expired_sessions() == 2
    assert [s.guest_name for s in db_session.query(GuestSession).all()] == ["Alice"]
