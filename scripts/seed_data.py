#!/usr/bin/env python
"""Seed database with demo events."""
import sys
from datetime import date
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.orm import Session
from src.db.base import SessionLocal, engine, Base
from src.models import Event, EventStatus
from src.core.security import generate_owner_token, hash_owner_token


DEMO_EVENTS = [
    {
        "name": "Yamada Wedding",
        "code": "WEDDING1",
        "description": "Spring wedding. Share every photo you take!",
        "event_date": date(2025, 4, 15),
        "status": EventStatus.active,
        "owner_email": "yamada@example.com",
    },
    {
        "name": "Tanaka Family Trip",
        "code": "TRAVEL02",
        "description": "Okinawa trip memories",
        "event_date": date(2025, 5, 1),
        "status": EventStatus.active,
        "owner_email": "tanaka@example.com",
    },
    {
        "name": "High School Reunion 2025",
        "code": "REUNION2",
        "description": "Ten years on",
        "event_date": date(2025, 8, 10),
        "status": EventStatus.closed,
        "owner_email": "reunion@example.com",
    },
]


def seed_events(db: Session):
    """Create demo events, skipping codes that already exist."""
    for data in DEMO_EVENTS:
        existing = db.query(Event).filter(Event.code == data["code"]).first()
        if existing:
            print(f"  → Skipped event: {data['code']} (exists)")
            continue
        owner_token = generate_owner_token()
        db.add(Event(**data, owner_token_hash=hash_owner_token(owner_token)))
        print(f"  → Created event: {data['name']} (code: {data['code']}, owner token: {owner_token})")

    db.commit()
    print("✅ Seeded events")


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_events(db)
    finally:
        db.close()


if __name__ == "__main__":
    main()
