from fastapi import APIRouter
from src.api.v1.endpoints import sessions, events, photos, archives


api_router = APIRouter()

api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(events.router, prefix="/events", tags=["events"])
api_router.include_router(photos.router, prefix="/photos", tags=["photos"])
api_router.include_router(archives.router, prefix="/archives", tags=["archives"])
