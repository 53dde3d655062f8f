#!/usr/bin/env python
"""Delete expired guest sessions once (for cron or manual use)."""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.app.logging_config import setup_logging
from src.db.base import SessionLocal
from src.services.session_service import SessionService


def main() -> int:
    setup_logging()
    db = SessionLocal()
    try:
        deleted = SessionService(db).cleanup_expired_sessions()
    finally:
        db.close()
    print(f"Removed {deleted} expired sessions")
    return 0


if __name__ == "__main__":
    sys.exit(main())
