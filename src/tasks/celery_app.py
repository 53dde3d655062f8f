from celery import Celery

from src.app.config import settings

# Create Celery instance and include explicit task modules
celery_app = Celery(
    'snapshare',
    include=[
        'src.tasks.workers.archive_worker',
        'src.tasks.workers.session_worker',
    ]
)

celery_app.conf.update(
    broker_url=settings.BROKER_URL,
    result_backend=settings.RESULT_BACKEND,
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',
    timezone='UTC',
    enable_utc=True,
    task_track_started=True,
    task_time_limit=30 * 60,  # 30 minutes hard limit
    beat_schedule={
        'cleanup-expired-sessions': {
            'task': 'tasks.cleanup_expired_sessions',
            'schedule': settings.SESSION_CLEANUP_INTERVAL_MINUTES * 60.0,
        },
    },
)
