"""
Shared test configuration.

Settings are read from the environment at import time, so the variables
below must be in place before anything under ``src`` is imported.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["R2_ACCOUNT_ID"] = "test"
os.environ["R2_ACCESS_KEY"] = "test-access-key"
os.environ["R2_SECRET_ACCESS_KEY"] = "test-secret-key"
os.environ["R2_BUCKET_NAME"] = "test-bucket"
os.environ["R2_PUBLIC_DOMAIN"] = "https://cdn.example.com"
os.environ["ENVIRONMENT"] = "test"

from datetime import datetime, timedelta
import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.db.base import Base, get_db
from src.core.security import hash_owner_token
from src.models import Event, EventStatus, GuestSession, Photo
from src.services.storage.s3 import S3Service, build_photo_key
from src.app.main import app


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Create test database session."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def storage():
    """Storage service pointed at the fake R2 account; presigning works offline."""
    return S3Service()


@pytest.fixture
def client(session_factory):
    """FastAPI test client bound to the test database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_event(db_session):
    """Insert an event directly, bypassing code generation."""
    counter = {"n": 0}

    def _make_event(owner_token="owner-token", **overrides):
        counter["n"] += 1
        data = {
            "name": "Test Wedding",
            "code": f"TEST{counter['n']:04d}",
            "owner_email": "owner@example.com",
            "owner_token_hash": hash_owner_token(owner_token),
            "status": EventStatus.active,
        }
        data.update(overrides)
        event = Event(**data)
        db_session.add(event)
        db_session.commit()
        db_session.refresh(event)
        return event

    return _make_event


@pytest.fixture
def make_session(db_session):
    def _make_session(event, guest_name="Alice", expires_at=None, token=None):
        session = GuestSession(
            event_id=event.id,
            guest_name=guest_name,
            session_token=token or uuid.uuid4().hex,
            expires_at=expires_at or datetime.utcnow() + timedelta(hours=24),
        )
        db_session.add(session)
        db_session.commit()
        db_session.refresh(session)
        return session

    return _make_session


@pytest.fixture
def make_photo(db_session):
    def _make_photo(event, uploader_name="Alice", size=1024, mime_type="image/jpeg", created_at=None, session=None):
        photo_id = uuid.uuid4()
        photo = Photo(
            id=photo_id,
            event_id=event.id,
            uploader_name=uploader_name,
            session_id=session.id if session else None,
            object_key=build_photo_key(event.id, photo_id, mime_type),
            size=size,
            mime_type=mime_type,
            created_at=created_at or datetime.utcnow(),
        )
        db_session.add(photo)
        db_session.commit()
        db_session.refresh(photo)
        return photo

    return _make_photo
