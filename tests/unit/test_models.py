from datetime import datetime, timedelta

from src.models import Event, EventStatus, GuestSession, Photo, Archive, ArchiveStatus


def test_create_event(db_session):
    """Test event creation defaults."""
    event = Event(
        name="Test Wedding",
        code="ABCD1234",
        owner_email="owner@example.com",
        owner_token_hash="0" * 64,
    )
    db_session.add(event)
    db_session.commit()

    assert event.id is not None
    assert event.status == EventStatus.active
    assert event.is_active
    assert event.deleted_at is None
    assert event.created_at is not None


def test_soft_deleted_event_is_not_active(db_session, make_event):
    event = make_event()
    event.deleted_at = datetime.utcnow()
    db_session.commit()

    assert event.is_deleted
    assert not event.is_active


def test_session_belongs_to_event(db_session, make_event):
    """Test guest session relationship."""
    event = make_event()
    session = GuestSession(
        event_id=event.id,
        guest_name="Alice",
        session_token="a" * 64,
        expires_at=datetime.utcnow() + timedelta(hours=24),
    )
    db_session.add(session)
    db_session.commit()

    assert session.event.id == event.id
    assert event.sessions[0].guest_name == "Alice"


def test_photo_records_uploading_session(make_event, make_session, make_photo):
    event = make_event()
    session = make_session(event)

    assert make_photo(event, session=session).session_id == session.id
    assert make_photo(event).session_id is None


def test_photo_is_confirmed_only_with_size(make_event, make_photo):
    event = make_event()

    assert not make_photo(event, size=0).is_confirmed
    assert make_photo(event, size=204800).is_confirmed


def test_archive_defaults(db_session, make_event):
    event = make_event()
    archive = Archive(event_id=event.id, object_key=f"events/{event.id}/archives/x.zip")
    db_session.add(archive)
    db_session.commit()

    assert archive.status == ArchiveStatus.pending
    assert archive.photo_count == 0
    assert archive.completed_at is None
