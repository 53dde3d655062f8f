"""Periodic session maintenance, run by Celery beat."""
import logging

from src.tasks.celery_app import celery_app
from src.db.base import SessionLocal
from src.services.session_service import SessionService

logger = logging.getLogger(__name__)


@celery_app.task(name='tasks.cleanup_expired_sessions')
def cleanup_expired_sessions() -> int:
    """Delete expired guest sessions; returns how many were removed."""
    db = SessionLocal()
    try:
        return SessionService(db).cleanup_expired_sessions()
    finally:
        db.close()
